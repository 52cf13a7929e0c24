"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache
from fastapi import Request

from loan_decision.config import settings
from loan_decision.domain.decision_engine import LoanDecisionCalculator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_decision_calculator() -> LoanDecisionCalculator:
    """Provide the shared, stateless decision calculator"""
    return LoanDecisionCalculator(limits=settings.loan_limits())
