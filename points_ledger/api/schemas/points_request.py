"""Request schemas for Points API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class TransactionRecordSchema(BaseModel):
    """One earn (points > 0) or spend (points < 0) record"""

    payer: str = Field(
        ...,
        min_length=1,
        description="Company or source name (required, non-empty)"
    )

    points: int = Field(
        ...,
        description="Signed points"
    )

    timestamp: datetime = Field(
        ...,
        description="ISO-8601 date-time of the transaction"
    )


class SpendRequestSchema(BaseModel):
    """
    Request schema for spending points

    Used for POST /points/spend endpoint.
    """

    amount: int = Field(
        ...,
        gt=0,
        description="Points to withdraw (must be > 0)"
    )

    transactions: List[TransactionRecordSchema] = Field(
        default_factory=list,
        description="Earn and spend records, in the order they should be applied"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "amount": 5000,
                "transactions": [
                    {"payer": "DANNON", "points": 300, "timestamp": "2020-10-31T10:00:00Z"},
                    {"payer": "UNILEVER", "points": 200, "timestamp": "2020-10-31T11:00:00Z"},
                    {"payer": "DANNON", "points": -200, "timestamp": "2020-10-31T15:00:00Z"},
                    {"payer": "MILLER COORS", "points": 10000, "timestamp": "2020-11-01T14:00:00Z"},
                    {"payer": "DANNON", "points": 1000, "timestamp": "2020-11-02T14:00:00Z"}
                ]
            }
        }
