"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loan_decision.domain.exceptions import InvalidLoanLimitsError


class RejectionReason(str, Enum):
    """Why a loan request produced no offer"""

    INVALID_PERSONAL_CODE = "invalid_personal_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    DEBT = "debt"
    NO_VALID_LOAN = "no_valid_loan"

    @property
    def message(self) -> str:
        return REJECTION_MESSAGES[self]


# Customer-facing texts; clients match on these, keep them stable
REJECTION_MESSAGES = {
    RejectionReason.INVALID_PERSONAL_CODE: "Invalid personal ID code!",
    RejectionReason.INVALID_LOAN_AMOUNT: "Invalid loan amount!",
    RejectionReason.INVALID_LOAN_PERIOD: "Invalid loan period!",
    RejectionReason.DEBT: "Person has debt, no loan approved.",
    RejectionReason.NO_VALID_LOAN: "No suitable loan amount and period found, no loan approved.",
}


@dataclass(frozen=True)
class DecisionRequest:
    """Loan application as submitted by the customer"""

    personal_code: str
    loan_amount: int  # euros
    loan_period: int  # months


@dataclass(frozen=True)
class Decision:
    """Output of the decision engine: an offer or a rejection, never both"""

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str]
    rejection: Optional[RejectionReason] = None

    @classmethod
    def approve(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period, error_message=None)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "Decision":
        return cls(loan_amount=None, loan_period=None, error_message=reason.message, rejection=reason)

    @property
    def approved(self) -> bool:
        return self.rejection is None


@dataclass(frozen=True)
class LoanLimits:
    """
    Business constants for the decision engine.

    Amount and period bounds are inclusive. Modifiers map the three
    non-debt personal code segments to a credit modifier.
    """

    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12
    max_loan_period: int = 60
    segment_1_modifier: int = 100
    segment_2_modifier: int = 300
    segment_3_modifier: int = 1000

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if not isinstance(value, int) or value <= 0:
                raise InvalidLoanLimitsError(f"{name} must be a positive integer, got {value!r}")

        if self.min_loan_amount > self.max_loan_amount:
            raise InvalidLoanLimitsError(
                f"min_loan_amount ({self.min_loan_amount}) exceeds max_loan_amount ({self.max_loan_amount})"
            )
        if self.min_loan_period > self.max_loan_period:
            raise InvalidLoanLimitsError(
                f"min_loan_period ({self.min_loan_period}) exceeds max_loan_period ({self.max_loan_period})"
            )
