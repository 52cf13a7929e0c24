"""Unit tests for settings and loan limits"""

import pytest
from pydantic import ValidationError
from loan_decision.config import Settings
from loan_decision.domain.exceptions import DomainException, InvalidLoanLimitsError
from loan_decision.domain.models import Decision, LoanLimits, RejectionReason


def test_default_settings_build_default_limits():
    """Test defaults match the business constants"""
    limits = Settings().loan_limits()

    assert limits == LoanLimits(
        min_loan_amount=2000,
        max_loan_amount=10000,
        min_loan_period=12,
        max_loan_period=60,
        segment_1_modifier=100,
        segment_2_modifier=300,
        segment_3_modifier=1000,
    )


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch):
    """Test limits can be overridden through environment variables"""
    monkeypatch.setenv("MAX_LOAN_AMOUNT", "20000")
    monkeypatch.setenv("SEGMENT_2_MODIFIER", "500")

    limits = Settings().loan_limits()

    assert limits.max_loan_amount == 20000
    assert limits.segment_2_modifier == 500


def test_settings_reject_non_positive_modifier():
    with pytest.raises(ValidationError):
        Settings(segment_1_modifier=0)


def test_settings_with_inverted_bounds_fail_on_limits():
    settings = Settings(min_loan_amount=5000, max_loan_amount=4000)

    with pytest.raises(InvalidLoanLimitsError):
        settings.loan_limits()


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_loan_amount": 10001},
        {"min_loan_period": 61},
        {"segment_3_modifier": 0},
        {"max_loan_period": -12},
    ],
)
def test_loan_limits_invariants(overrides: dict):
    with pytest.raises(InvalidLoanLimitsError):
        LoanLimits(**overrides)


def test_loan_limits_error_is_domain_exception():
    assert issubclass(InvalidLoanLimitsError, DomainException)


def test_equal_bounds_allowed():
    """Test MIN == MAX is a valid single-value range"""
    limits = LoanLimits(min_loan_amount=5000, max_loan_amount=5000, min_loan_period=24, max_loan_period=24)

    assert limits.min_loan_amount == limits.max_loan_amount


def test_decision_forms():
    """Test approvals and rejections populate exactly one form"""
    approved = Decision.approve(5000, 24)
    rejected = Decision.reject(RejectionReason.NO_VALID_LOAN)

    assert (approved.loan_amount, approved.loan_period, approved.error_message) == (5000, 24, None)
    assert approved.approved is True
    assert (rejected.loan_amount, rejected.loan_period) == (None, None)
    assert rejected.error_message == RejectionReason.NO_VALID_LOAN.message
    assert rejected.approved is False
