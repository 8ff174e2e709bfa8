"""Points Ledger Domain Aggregate

Holds the earn and spend transactions of a single processing run.
Earn transactions are kept in a min-heap by timestamp so the oldest one with
points left is always available in O(log n).
"""

import heapq
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple
from .points_transaction import PointsTransaction, TransactionType


class PointsLedger:
    """
    Points Ledger - earn heap, spend list and exhausted list

    Every transaction lives once in an arena owned by the ledger; the heap and
    the lists only hold integer handles (arena positions), so a transaction is
    never shared between collections by reference.

    Domain Rules:
    - Earn transactions are ordered by (timestamp, sequence); equal timestamps
      are served in insertion order
    - Spend transactions are applied in arrival order, their timestamp is
      informational only
    - An earn transaction whose residual reaches zero is moved to the exhausted
      list exactly once and never becomes available again
    - earned_total / spend_total are running totals maintained on insert
    """

    def __init__(self):
        self._arena: List[PointsTransaction] = []
        self._available: List[Tuple[datetime, int]] = []
        self._spends: List[int] = []
        self._exhausted: List[int] = []
        self._exhausted_set: set = set()
        self.earned_total = 0
        self.spend_total = 0

    # Ingestion

    def record_earn(self, payer: str, points: int, timestamp: datetime) -> int:
        """
        Record an earn transaction

        Args:
            payer: Company or source that granted the points
            points: Points earned (must be > 0)
            timestamp: When the points were earned

        Returns:
            Handle of the recorded transaction
        """
        if points <= 0:
            raise ValueError(f"Earn points must be positive, got {points}")

        handle = self._append(payer, points, timestamp, TransactionType.EARN)
        heapq.heappush(self._available, (timestamp, handle))
        self.earned_total += points
        return handle

    def record_spend(self, payer: str, points: int, timestamp: datetime) -> int:
        """
        Record a spend transaction

        Args:
            payer: Label of the spend (file payer or the withdrawing user)
            points: Points to withdraw, either negative or as a positive magnitude
            timestamp: Informational only, spends are applied in call order

        Returns:
            Handle of the recorded transaction
        """
        if points == 0:
            raise ValueError("Spend points must be non-zero")

        handle = self._append(payer, -abs(points), timestamp, TransactionType.SPEND)
        self._spends.append(handle)
        self.spend_total += abs(points)
        return handle

    def _append(self, payer: str, points: int, timestamp: datetime, transaction_type: TransactionType) -> int:
        handle = len(self._arena)
        self._arena.append(
            PointsTransaction(
                payer=payer,
                points=points,
                timestamp=timestamp,
                transaction_type=transaction_type,
                residual=abs(points),
                sequence=handle,
            )
        )
        return handle

    # Queries

    def get(self, handle: int) -> PointsTransaction:
        return self._arena[handle]

    def earliest_available_earn(self) -> Optional[int]:
        """Handle of the oldest earn transaction with points left, or None"""
        if not self._available:
            return None
        return self._available[0][1]

    def spends(self) -> Iterator[int]:
        """Spend handles in the order they were recorded"""
        return iter(self._spends)

    def exhausted(self) -> List[int]:
        return list(self._exhausted)

    @property
    def has_earnings(self) -> bool:
        return self.earned_total > 0

    @property
    def covers_spends(self) -> bool:
        return self.earned_total >= self.spend_total

    @property
    def available_count(self) -> int:
        return len(self._available)

    # Mutation

    def consume(self, handle: int, points: int) -> int:
        """
        Take points from an available earn transaction

        Args:
            handle: Earn transaction handle
            points: Points to take (0 < points <= residual)

        Returns:
            Residual left on the transaction
        """
        transaction = self._arena[handle]
        if not transaction.is_earn:
            raise ValueError(f"Transaction {handle} is not an earn transaction")
        if handle in self._exhausted_set:
            raise ValueError(f"Transaction {handle} is already exhausted")
        if points <= 0 or points > transaction.residual:
            raise ValueError(
                f"Cannot take {points} points from transaction {handle} "
                f"with residual {transaction.residual}"
            )

        transaction.residual = transaction.residual - points
        return transaction.residual

    def mark_exhausted(self, handle: int) -> None:
        """
        Move a drained earn transaction from the heap to the exhausted list

        Must be called once per transaction, after its residual reached zero.
        """
        transaction = self._arena[handle]
        if handle in self._exhausted_set:
            raise ValueError(f"Transaction {handle} is already exhausted")
        if transaction.residual != 0:
            raise ValueError(
                f"Transaction {handle} still has {transaction.residual} points"
            )

        if self._available and self._available[0][1] == handle:
            heapq.heappop(self._available)
        else:
            entry = (transaction.timestamp, handle)
            self._available.remove(entry)
            heapq.heapify(self._available)

        self._exhausted.append(handle)
        self._exhausted_set.add(handle)

    # Reporting

    def final_balances(self) -> Dict[str, int]:
        """
        Remaining points per payer

        Available earn transactions contribute their residual, summed per payer
        in first-recorded order. Payers whose earn transactions were all drained
        are then listed with 0, in the order they were drained.
        """
        balances: Dict[str, int] = {}

        for handle in sorted(h for _, h in self._available):
            transaction = self._arena[handle]
            balances[transaction.payer] = balances.get(transaction.payer, 0) + transaction.residual

        for handle in self._exhausted:
            balances.setdefault(self._arena[handle].payer, 0)

        return balances

    def remaining_total(self) -> int:
        return sum(self._arena[h].residual for _, h in self._available)
