from fastapi import Request
from points_ledger.app.services.deduction_engine import DeductionEngine
from points_ledger.app.use_cases.points.spend_points import SpendPoints


def get_spend_points(request: Request) -> SpendPoints:
    config = request.app.state.config
    return SpendPoints(
        engine=DeductionEngine(),
        withdrawal_payer=getattr(config, "WITHDRAWAL_PAYER", "User"),
    )
