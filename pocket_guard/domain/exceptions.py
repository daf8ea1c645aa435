"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanParameters(DomainException):
    """Principal, rate or tenure is outside the allowed domain"""

    pass


class InvalidMonthParameter(DomainException):
    """Requested schedule month is outside [1, tenure_months]"""

    pass


class PANVerificationError(DomainException):
    """PAN verification service returned an error or is unavailable"""

    pass
