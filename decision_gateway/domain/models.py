"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as received from the customer"""

    personal_code: str
    loan_amount: int  # euros
    loan_period: int  # months


@dataclass(frozen=True)
class Decision:
    """
    Outcome of a loan evaluation.

    Either loan_amount and loan_period are set (approved), or only
    error_message is set (rejected during input validation).
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        has_loan = self.loan_amount is not None and self.loan_period is not None
        has_partial_loan = (self.loan_amount is None) != (self.loan_period is None)
        has_error = self.error_message is not None

        if has_partial_loan or has_loan == has_error:
            raise ValueError("Decision must carry either an approved loan or an error message")

    @property
    def approved(self) -> bool:
        return self.error_message is None

    @classmethod
    def approve(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def reject(cls, error_message: str) -> "Decision":
        return cls(error_message=error_message)
