import pytest
from datetime import datetime, timedelta
from points_ledger.domain.points_ledger import PointsLedger


@pytest.fixture
def at():
    """Timestamp factory: at(hours) is `hours` after 2020-11-01T00:00"""
    base = datetime(2020, 11, 1)

    def _at(hours: int) -> datetime:
        return base + timedelta(hours=hours)

    return _at


@pytest.fixture
def ledger():
    """Empty points ledger"""
    return PointsLedger()
