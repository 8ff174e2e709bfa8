"""SpendPoints Use Case

Withdraws points from a payer ledger, oldest earned points first, and reports
what is left per payer.
"""

import logging
from datetime import datetime
from typing import Optional
from points_ledger.libs.result import Result, Return, Error
from points_ledger.app.services.deduction_engine import DeductionEngine
from points_ledger.domain.points_ledger import PointsLedger
from points_ledger.domain.errors import (
    EMPTY_LEDGER,
    INSUFFICIENT_POINTS,
    EMPTY_LEDGER_MESSAGE,
    INSUFFICIENT_POINTS_MESSAGE,
    EngineInvariantViolation,
)
from .dtos import SpendPointsCommandDTO, PointsBalanceResponseDTO

logger = logging.getLogger(__name__)


class SpendPoints:
    """
    Use Case: Spend points across payers, oldest first

    Business Rules:
    1. Every run builds a fresh ledger; nothing is kept between runs
    2. Spends from the source and the user withdrawal are applied in that order
    3. No earned points at all: EMPTY_LEDGER, engine never runs
    4. Spends exceed earnings: INSUFFICIENT_POINTS, nothing is deducted
    5. No payer balance ever goes below zero

    Flow:
    1. Record source transactions (earn or spend by sign)
    2. Record the user withdrawal as the last spend
    3. Run pre-flight guards on the running totals
    4. Run the deduction engine
    5. Return remaining balances per payer
    """

    def __init__(
        self,
        engine: Optional[DeductionEngine] = None,
        withdrawal_payer: str = "User",
    ):
        self.engine = engine or DeductionEngine()
        self.withdrawal_payer = withdrawal_payer

    def execute(self, command: SpendPointsCommandDTO) -> Result[PointsBalanceResponseDTO]:
        """
        Execute points spend

        Args:
            command: SpendPointsCommandDTO with amount and source transactions

        Returns:
            Result[PointsBalanceResponseDTO]: Remaining balances or guard error

        Raises:
            EngineInvariantViolation: guards passed but the engine ran dry
        """
        # Step 1: Build the ledger
        ledger = self._build_ledger(command)

        logger.info(
            f"Ledger built: earned={ledger.earned_total}, "
            f"spend={ledger.spend_total} (withdrawal {command.amount})"
        )

        # Step 2: Pre-flight guards
        error = self._check_guards(ledger)
        if error:
            logger.warning(f"Spend rejected: {error.code} ({error.reason})")
            return Return.err(error)

        # Step 3: Deduct
        try:
            self.engine.run(ledger)
        except EngineInvariantViolation as e:
            logger.critical(f"Deduction engine diverged from guards: {e}")
            raise

        # Step 4: Report
        return Return.ok(
            PointsBalanceResponseDTO(
                balances=ledger.final_balances(),
                total_earned=ledger.earned_total,
                total_spent=ledger.spend_total,
                total_remaining=ledger.remaining_total(),
                exhausted_count=len(ledger.exhausted()),
            )
        )

    def _build_ledger(self, command: SpendPointsCommandDTO) -> PointsLedger:
        ledger = PointsLedger()

        for record in command.transactions:
            if record.points > 0:
                ledger.record_earn(record.payer, record.points, record.timestamp)
            elif record.points < 0:
                ledger.record_spend(record.payer, record.points, record.timestamp)
            else:
                logger.debug(f"Skipping zero-point record for {record.payer}")

        requested_at = command.requested_at or datetime.now()
        ledger.record_spend(self.withdrawal_payer, -command.amount, requested_at)
        return ledger

    def _check_guards(self, ledger: PointsLedger) -> Optional[Error]:
        if not ledger.has_earnings:
            return Error(
                code=EMPTY_LEDGER,
                message=EMPTY_LEDGER_MESSAGE,
                reason="no earn transactions recorded",
            )

        if not ledger.covers_spends:
            return Error(
                code=INSUFFICIENT_POINTS,
                message=INSUFFICIENT_POINTS_MESSAGE,
                reason=f"earned={ledger.earned_total}, requested={ledger.spend_total}",
            )

        return None
