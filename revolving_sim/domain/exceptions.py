"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InterestOverflowError(DomainException):
    """Monthly interest is beyond the range of floating-point arithmetic"""

    pass
