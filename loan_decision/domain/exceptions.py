"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanLimitsError(DomainException):
    """Configured loan bounds or credit modifiers are inconsistent"""

    pass
