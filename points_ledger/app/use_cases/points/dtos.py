"""Data Transfer Objects for Points Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


class TransactionRecordDTO(BaseModel):
    """
    One transaction record as delivered by an input source

    Positive points are earned, negative points are spent.
    """

    payer: str = Field(
        ...,
        min_length=1,
        description="Company or source name"
    )

    points: int = Field(
        ...,
        description="Signed points (positive = earn, negative = spend)"
    )

    timestamp: datetime = Field(
        ...,
        description="When the transaction happened"
    )

    @field_validator("timestamp")
    @classmethod
    def drop_offset(cls, v):
        """Keep wall-clock time so all timestamps compare as local date-times"""
        if v.tzinfo is not None:
            return v.replace(tzinfo=None)
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "payer": "DANNON",
                "points": 1000,
                "timestamp": "2020-11-02T14:00:00"
            }
        }


class SpendPointsCommandDTO(BaseModel):
    """
    Command DTO for spending points

    Used as input to SpendPoints use case.
    """

    amount: int = Field(
        ...,
        gt=0,
        description="Points the user wants withdrawn (must be > 0)"
    )

    transactions: List[TransactionRecordDTO] = Field(
        default_factory=list,
        description="Earn and spend records, in source order"
    )

    requested_at: Optional[datetime] = Field(
        default=None,
        description="Timestamp of the withdrawal (defaults to now)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "amount": 5000,
                "transactions": [
                    {"payer": "DANNON", "points": 1000, "timestamp": "2020-11-02T14:00:00"},
                    {"payer": "UNILEVER", "points": 200, "timestamp": "2020-10-31T11:00:00"},
                    {"payer": "DANNON", "points": -200, "timestamp": "2020-10-31T15:00:00"}
                ]
            }
        }


class PointsBalanceResponseDTO(BaseModel):
    """
    Response DTO for spend points operation

    balances keeps first-seen payer order.
    """

    balances: Dict[str, int] = Field(
        ...,
        description="Remaining points per payer"
    )

    total_earned: int = Field(
        ...,
        description="Sum of all earned points"
    )

    total_spent: int = Field(
        ...,
        description="Sum of all spends, including the withdrawal"
    )

    total_remaining: int = Field(
        ...,
        description="Points left across all payers"
    )

    exhausted_count: int = Field(
        ...,
        description="Earn transactions drained to zero"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "balances": {"MILLER COORS": 5300, "DANNON": 1000, "UNILEVER": 0},
                "total_earned": 11500,
                "total_spent": 5200,
                "total_remaining": 6300,
                "exhausted_count": 2
            }
        }
