"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Optional
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_decision_engine
from loan_gateway.domain.exceptions import IdentityCodeError
from loan_gateway.domain.models import DecisionConstraints
from loan_gateway.domain.scoring import LoanDecisionEngine


# Every test evaluates "today" as this date
AS_OF = date(2026, 10, 19)

# Valid Estonian personal codes, born 1985-01-01, one per credit segment
DEBT_CODE = "38501011006"  # segment digits 1006
SEGMENT_1_CODE = "38501013004"  # 3004
SEGMENT_2_CODE = "38501016006"  # 6006
SEGMENT_3_CODE = "38501018000"  # 8000

TOO_YOUNG_CODE = "50901013002"  # born 2009-01-01, 17 years old
TOO_OLD_CODE = "34001013003"  # born 1940-01-01


class FakeIdentityParser:
    """Synthetic identity codes: any code listed in `ages` is valid with that age"""

    def __init__(self, ages: Optional[dict] = None):
        self.ages = ages or {}

    def is_valid(self, code: str) -> bool:
        return code in self.ages

    def age_in_months(self, code: str, as_of: date) -> int:
        return self.ages[code]


class UndecodableIdentityParser:
    """Accepts every code but cannot decode any of them"""

    def is_valid(self, code: str) -> bool:
        return True

    def age_in_months(self, code: str, as_of: date) -> int:
        raise IdentityCodeError("no birth date")


@pytest.fixture
def constraints() -> DecisionConstraints:
    return DecisionConstraints()


@pytest.fixture
def engine(constraints: DecisionConstraints) -> LoanDecisionEngine:
    """Decision engine with the default rules and a frozen clock"""
    return LoanDecisionEngine(constraints=constraints, clock=lambda: AS_OF)


@pytest.fixture
def client(engine: LoanDecisionEngine) -> TestClient:
    """Create FastAPI test client with a frozen-clock decision engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
