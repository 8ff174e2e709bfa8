"""Points domain use cases"""
from .spend_points import SpendPoints
from .dtos import (
    TransactionRecordDTO,
    SpendPointsCommandDTO,
    PointsBalanceResponseDTO,
)

__all__ = [
    "SpendPoints",
    "TransactionRecordDTO",
    "SpendPointsCommandDTO",
    "PointsBalanceResponseDTO",
]
