"""Points Transaction Domain Entity

A single ledger entry tied to a payer and a point in time.
Earn transactions carry a residual that is consumed by spends.
"""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


class TransactionType(str, Enum):
    """Points transaction types"""
    EARN = "earn"    # Points added by a payer
    SPEND = "spend"  # Points requested to be withdrawn


class PointsTransaction(BaseModel):
    """
    Points Transaction - ledger entry with a mutable residual

    Domain Rules:
    - payer, points, timestamp and transaction_type never change after creation
    - points is positive for EARN and negative for SPEND
    - residual starts at abs(points) and only ever decreases, never below zero
    - sequence is the insertion position inside the owning ledger and breaks
      timestamp ties between earn transactions
    """

    payer: str = Field(
        ...,
        min_length=1,
        description="Company or source that granted the points"
    )

    points: int = Field(
        ...,
        description="Signed points (positive = earn, negative = spend)"
    )

    timestamp: datetime = Field(
        ...,
        description="When the transaction happened (orders earn transactions)"
    )

    transaction_type: TransactionType = Field(
        ...,
        description="earn or spend"
    )

    residual: int = Field(
        ...,
        ge=0,
        description="Points not yet consumed (earn) or requested (spend)"
    )

    sequence: int = Field(
        ...,
        ge=0,
        description="Insertion position inside the ledger"
    )

    class Config:
        """Pydantic configuration"""
        validate_assignment = True
        json_schema_extra = {
            "example": {
                "payer": "DANNON",
                "points": 1000,
                "timestamp": "2020-11-02T14:00:00",
                "transaction_type": "earn",
                "residual": 1000,
                "sequence": 0
            }
        }

    @property
    def is_earn(self) -> bool:
        return self.transaction_type == TransactionType.EARN

    @property
    def magnitude(self) -> int:
        return abs(self.points)

    def __str__(self) -> str:
        return f"{self.payer} {self.residual} {self.timestamp.isoformat()}"
