from .points_transaction import PointsTransaction, TransactionType
from .points_ledger import PointsLedger
from .errors import (
    EMPTY_LEDGER,
    INSUFFICIENT_POINTS,
    EMPTY_LEDGER_MESSAGE,
    INSUFFICIENT_POINTS_MESSAGE,
    EngineInvariantViolation,
)

__all__ = [
    "PointsTransaction",
    "TransactionType",
    "PointsLedger",
    "EMPTY_LEDGER",
    "INSUFFICIENT_POINTS",
    "EMPTY_LEDGER_MESSAGE",
    "INSUFFICIENT_POINTS_MESSAGE",
    "EngineInvariantViolation",
]
