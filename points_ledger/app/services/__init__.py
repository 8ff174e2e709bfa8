from .deduction_engine import DeductionEngine
from .transaction_reader import TransactionReader, TransactionSourceError

__all__ = [
    "DeductionEngine",
    "TransactionReader",
    "TransactionSourceError",
]
