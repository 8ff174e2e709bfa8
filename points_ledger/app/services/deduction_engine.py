"""Deduction Engine

Applies every recorded spend against the oldest earn transactions first.
"""

import logging
from points_ledger.domain.points_ledger import PointsLedger
from points_ledger.domain.errors import EngineInvariantViolation

logger = logging.getLogger(__name__)


class DeductionEngine:
    """
    Oldest-first points deduction

    Rules:
    1. Spends are applied strictly in recorded order
    2. Each spend drains the earliest available earn transaction first
    3. An earn transaction drained to exactly zero is marked exhausted
    4. Once the guards pass, every spend is applied in full

    The pre-flight guards must have passed before run() is called.
    """

    def run(self, ledger: PointsLedger) -> int:
        """
        Apply all spends recorded in the ledger

        Args:
            ledger: Ledger populated with earn and spend transactions

        Returns:
            Total points deducted

        Raises:
            EngineInvariantViolation: a spend could not be satisfied
        """
        deducted = 0
        spend_count = 0

        for handle in ledger.spends():
            deducted += self._apply_spend(ledger, handle)
            spend_count += 1

        logger.info(
            f"Applied {spend_count} spends, deducted {deducted} points, "
            f"{len(ledger.exhausted())} earn transactions exhausted"
        )
        return deducted

    def _apply_spend(self, ledger: PointsLedger, spend_handle: int) -> int:
        spend = ledger.get(spend_handle)
        need = spend.magnitude

        while need > 0:
            earn_handle = ledger.earliest_available_earn()
            if earn_handle is None:
                raise EngineInvariantViolation(
                    f"No earn transaction left to cover spend {spend_handle} "
                    f"({spend.payer}), {need} points outstanding"
                )

            earn = ledger.get(earn_handle)
            taken = min(earn.residual, need)
            remaining = ledger.consume(earn_handle, taken)
            need -= taken

            logger.debug(f"Took {taken} points from {earn.payer} (seq {earn.sequence}), {remaining} left")

            if remaining == 0:
                ledger.mark_exhausted(earn_handle)

        return spend.magnitude
