"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DataAccessError(DomainException):
    """A read from one of the backing stores failed"""

    pass


class InvalidYearMonthError(DomainException):
    """Year-month string is not in YYYY-MM form"""

    pass


class InvalidHorizonError(DomainException):
    """Projection horizon is outside the supported range"""

    pass
