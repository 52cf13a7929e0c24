"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from loan_decision.api.main import create_app
from loan_decision.domain.decision_engine import LoanDecisionCalculator
from loan_decision.domain.models import LoanLimits


@pytest.fixture
def limits() -> LoanLimits:
    """Default business limits: 2000-10000 EUR, 12-60 months, modifiers 100/300/1000"""
    return LoanLimits()


@pytest.fixture
def calculator(limits: LoanLimits) -> LoanDecisionCalculator:
    """Calculator with the real personal code validator"""
    return LoanDecisionCalculator(limits=limits)


@pytest.fixture
def permissive_calculator(limits: LoanLimits) -> LoanDecisionCalculator:
    """Calculator accepting any personal code, for exercising segment boundaries"""
    return LoanDecisionCalculator(limits=limits, validator=lambda code: True)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)
