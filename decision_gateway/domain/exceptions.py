"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPersonalCodeError(DomainException):
    """Personal ID code is malformed or fails the checksum"""

    def __init__(self, message: str = "Invalid personal ID code!"):
        super().__init__(message)


class InvalidLoanAmountError(DomainException):
    """Requested loan amount is outside the allowed range"""

    def __init__(self, message: str = "Invalid loan amount!"):
        super().__init__(message)


class InvalidLoanPeriodError(DomainException):
    """Requested loan period is outside the allowed range"""

    def __init__(self, message: str = "Invalid loan period!"):
        super().__init__(message)


class InvalidAgeError(DomainException):
    """Customer is too young or too old to be granted a loan"""

    def __init__(self, message: str = "Invalid age!"):
        super().__init__(message)


class NoValidLoanError(DomainException):
    """No amount and period combination can be approved"""

    def __init__(self, message: str = "No valid loan found!"):
        super().__init__(message)
