"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from loan_gateway.config import settings
from loan_gateway.domain.scoring import LoanDecisionEngine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_decision_engine() -> LoanDecisionEngine:
    """Provide the shared, stateless loan decision engine"""
    return LoanDecisionEngine(constraints=settings.decision_constraints())
