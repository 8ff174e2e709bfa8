"""Points API Routes

FastAPI routes for spending points.
"""

from fastapi import APIRouter, Depends, status

from points_ledger.api.schemas.points_request import SpendRequestSchema
from points_ledger.app.use_cases.points.dtos import (
    PointsBalanceResponseDTO,
    SpendPointsCommandDTO,
    TransactionRecordDTO,
)
from points_ledger.app.use_cases.points.spend_points import SpendPoints
from points_ledger.domain.errors import INSUFFICIENT_POINTS
from points_ledger.depends import get_spend_points
from points_ledger.api.error import ClientError

router = APIRouter(prefix="/points", tags=["Points"])


@router.post(
    "/spend",
    response_model=PointsBalanceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        402: {
            "description": "Insufficient points",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INSUFFICIENT_POINTS",
                            "message": "Not enough points left"
                        }
                    }
                }
            }
        },
        400: {
            "description": "No earned points or validation error",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "EMPTY_LEDGER",
                            "message": "No available point balance"
                        }
                    }
                }
            }
        }
    }
)
async def spend_points(
    request: SpendRequestSchema,
    use_case: SpendPoints = Depends(get_spend_points),
):
    """
    Spend points, oldest earned first, and return what is left per payer.

    The ledger exists only for this request: it is built from the submitted
    transactions, the withdrawal of `amount` is applied after every spend in
    the list, and the ledger is discarded afterwards.

    **Request body:**
    - `amount` (required): Points to withdraw (must be > 0)
    - `transactions` (required): Records with `payer`, signed `points`, `timestamp`

    **Returns:**
    - 200: Remaining points per payer
    - 402: Not enough points to cover every spend
    - 400: No earned points, or invalid request parameters
    """
    command = SpendPointsCommandDTO(
        amount=request.amount,
        transactions=[
            TransactionRecordDTO(payer=t.payer, points=t.points, timestamp=t.timestamp)
            for t in request.transactions
        ],
    )

    result = use_case.execute(command)

    if result.is_err():
        if result.error.code == INSUFFICIENT_POINTS:
            raise ClientError(result.error, status_code=status.HTTP_402_PAYMENT_REQUIRED)
        raise ClientError(result.error)

    return result.value
