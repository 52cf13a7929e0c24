"""Loan decision engine - core business logic for loan offers"""

import math
from typing import Callable, Optional

from loan_decision.domain.models import Decision, DecisionRequest, LoanLimits, RejectionReason
from loan_decision.domain.personal_code import is_valid as is_valid_personal_code

DEBT_SEGMENT_UPPER = 2500
SEGMENT_1_UPPER = 5000
SEGMENT_2_UPPER = 7500

PersonalCodeValidator = Callable[[str], bool]


def is_whole_number(value) -> bool:
    """True for int values, excluding bool"""
    return isinstance(value, int) and not isinstance(value, bool)


def verify_inputs(
    request: DecisionRequest,
    limits: LoanLimits,
    validator: PersonalCodeValidator,
) -> Optional[Decision]:
    """
    Check the request against business rules.

    Returns a rejection for the first rule that fails, None if the request
    may be scored. Rules are checked in order: personal code, amount, period.
    A validator that raises counts as rejecting the personal code.
    """
    try:
        valid_code = validator(request.personal_code)
    except Exception:
        valid_code = False
    if not valid_code:
        return Decision.reject(RejectionReason.INVALID_PERSONAL_CODE)
    if not is_whole_number(request.loan_amount) or not (
        limits.min_loan_amount <= request.loan_amount <= limits.max_loan_amount
    ):
        return Decision.reject(RejectionReason.INVALID_LOAN_AMOUNT)
    if not is_whole_number(request.loan_period) or not (
        limits.min_loan_period <= request.loan_period <= limits.max_loan_period
    ):
        return Decision.reject(RejectionReason.INVALID_LOAN_PERIOD)
    return None


def personal_code_segment(code: str) -> int:
    """Last four digits of the personal code as an integer"""
    tail = code[-4:] if isinstance(code, str) else ""
    if len(tail) != 4 or not (tail.isascii() and tail.isdigit()):
        raise ValueError(f"Personal code does not end in four digits: {code!r}")
    return int(tail)


def credit_modifier(segment: int, limits: LoanLimits) -> int:
    """
    Map a personal code segment to its credit modifier.

    Segments (half-open ranges):
    - 0000 - 2499: Debt, modifier 0
    - 2500 - 4999: Segment 1
    - 5000 - 7499: Segment 2
    - 7500 - 9999: Segment 3
    """
    if segment < DEBT_SEGMENT_UPPER:
        return 0
    elif segment < SEGMENT_1_UPPER:
        return limits.segment_1_modifier
    elif segment < SEGMENT_2_UPPER:
        return limits.segment_2_modifier
    else:
        return limits.segment_3_modifier


def credit_score(modifier: int, loan_amount: int, loan_period: int) -> float:
    """Credit score; 1.0 or above means the loan can be approved"""
    return modifier / loan_amount * loan_period


def approved_amount(score: float, loan_amount: int, limits: LoanLimits) -> int:
    """Largest amount the score supports, capped at the maximum loan amount"""
    return min(limits.max_loan_amount, math.floor(score * loan_amount))


def find_feasible_loan(modifier: int, loan_amount: int, loan_period: int, limits: LoanLimits) -> Decision:
    """
    Search for an amount and period with a credit score of at least 1.

    The amount is raised first, one euro at a time, up to the maximum amount.
    If that is not enough the period is raised one month at a time, keeping
    the amount the first phase ended on.
    """
    score = credit_score(modifier, loan_amount, loan_period)

    while score < 1 and loan_amount < limits.max_loan_amount:
        loan_amount += 1
        score = credit_score(modifier, loan_amount, loan_period)

    while score < 1 and loan_period < limits.max_loan_period:
        loan_period += 1
        score = credit_score(modifier, loan_amount, loan_period)

    if score < 1:
        return Decision.reject(RejectionReason.NO_VALID_LOAN)

    return Decision.approve(approved_amount(score, loan_amount, limits), loan_period)


class LoanDecisionCalculator:
    """
    Calculates the approved loan amount and period for a customer.

    Holds only immutable configuration and the personal code validator, so
    one instance can serve concurrent requests.
    """

    def __init__(self, limits: LoanLimits | None = None, validator: PersonalCodeValidator | None = None):
        self.limits = limits or LoanLimits()
        self.validator = validator or is_valid_personal_code

    def compute_decision(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Main entry point: validate the request and compute the loan offer.

        Never raises for bad input; every failure is returned as a rejected
        Decision carrying the reason and its message.
        """
        request = DecisionRequest(personal_code, loan_amount, loan_period)

        rejection = verify_inputs(request, self.limits, self.validator)
        if rejection is not None:
            return rejection

        try:
            segment = personal_code_segment(request.personal_code)
        except ValueError:
            return Decision.reject(RejectionReason.INVALID_PERSONAL_CODE)

        if segment < DEBT_SEGMENT_UPPER:
            return Decision.reject(RejectionReason.DEBT)

        modifier = credit_modifier(segment, self.limits)
        score = credit_score(modifier, request.loan_amount, request.loan_period)
        if score >= 1:
            return Decision.approve(
                approved_amount(score, request.loan_amount, self.limits),
                request.loan_period,
            )

        return find_feasible_loan(modifier, request.loan_amount, request.loan_period, self.limits)
