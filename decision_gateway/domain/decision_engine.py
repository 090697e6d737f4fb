"""Loan decision engine - core business logic for loan approvals"""

from datetime import date
from typing import Callable, Protocol, Tuple

from decision_gateway.domain.constants import (
    LOAN_AMOUNT_STEP,
    MAXIMUM_AGE,
    MAXIMUM_LOAN_AMOUNT,
    MAXIMUM_LOAN_PERIOD,
    MINIMUM_AGE,
    MINIMUM_CREDIT_SCORE,
    MINIMUM_LOAN_AMOUNT,
    MINIMUM_LOAN_PERIOD,
)
from decision_gateway.domain.exceptions import (
    DomainException,
    InvalidAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from decision_gateway.domain.models import Decision, LoanRequest
from decision_gateway.domain.personal_code import calculate_age, get_credit_modifier


class PersonalCodeValidator(Protocol):
    """Checks format and checksum of a national personal ID code"""

    def is_valid(self, personal_code: str) -> bool: ...


def verify_inputs(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    validator: PersonalCodeValidator,
) -> None:
    """
    Check request inputs against business rules, first failure wins.

    Raises:
        InvalidPersonalCodeError: Code rejected by the validator
        InvalidLoanAmountError: Amount outside allowed range
        InvalidLoanPeriodError: Period outside allowed range
    """
    if not validator.is_valid(personal_code):
        raise InvalidPersonalCodeError()
    if not MINIMUM_LOAN_AMOUNT <= loan_amount <= MAXIMUM_LOAN_AMOUNT:
        raise InvalidLoanAmountError()
    if not MINIMUM_LOAN_PERIOD <= loan_period <= MAXIMUM_LOAN_PERIOD:
        raise InvalidLoanPeriodError()


def verify_age(personal_code: str, today: date) -> None:
    """Raise InvalidAgeError unless the customer age is within policy bounds"""
    age = calculate_age(personal_code, today)
    if not MINIMUM_AGE <= age <= MAXIMUM_AGE:
        raise InvalidAgeError()


def is_loan_approved(credit_modifier: int, loan_amount: int, loan_period: int) -> bool:
    """
    Approve when credit score = (modifier / amount) * period / 10 reaches 0.1.

    Smaller amounts and longer periods both raise the score.
    """
    credit_score = (credit_modifier / loan_amount) * loan_period / 10
    return credit_score >= MINIMUM_CREDIT_SCORE


def find_approved_loan(credit_modifier: int, loan_period: int) -> Tuple[int, int]:
    """
    Search for the largest approvable amount, extending the period if needed.

    Starts from the maximum amount at the requested period and steps the amount
    down. Once the amount drops below the minimum, the period is extended by one
    month and the amount reset to the maximum, until the maximum period is
    exhausted.

    Returns: (loan_amount, loan_period)

    Raises:
        NoValidLoanError: No amount is approvable up to the maximum period
    """
    loan_amount = MAXIMUM_LOAN_AMOUNT

    while not is_loan_approved(credit_modifier, loan_amount, loan_period):
        loan_amount -= LOAN_AMOUNT_STEP

        if loan_amount < MINIMUM_LOAN_AMOUNT:
            if loan_period >= MAXIMUM_LOAN_PERIOD:
                raise NoValidLoanError()
            loan_period += 1
            loan_amount = MAXIMUM_LOAN_AMOUNT

    return loan_amount, loan_period


def evaluate(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    today: date,
    validator: PersonalCodeValidator,
) -> Decision:
    """
    Main entry point: decide the maximum loan the customer qualifies for.

    Flow:
    1. Validate code, amount and period (failures become a rejected Decision)
    2. Validate customer age as of today
    3. Classify credit segment from the code suffix
    4. Search for the largest approvable amount and period

    Raises:
        InvalidAgeError: Customer age outside policy bounds
        InvalidPersonalCodeError: Birth date cannot be decoded from the code
        NoValidLoanError: Debt segment or no approvable amount/period
    """
    try:
        verify_inputs(personal_code, loan_amount, loan_period, validator)
    except DomainException as e:
        return Decision.reject(e.message)

    verify_age(personal_code, today)

    credit_modifier = get_credit_modifier(personal_code)
    if credit_modifier == 0:
        raise NoValidLoanError()

    approved_amount, approved_period = find_approved_loan(credit_modifier, loan_period)
    return Decision.approve(approved_amount, approved_period)


class DecisionEngine:
    """
    Long-lived decision service bound to its collaborators.

    Holds only the validator and the clock, so a single instance can serve
    concurrent requests.
    """

    def __init__(self, validator: PersonalCodeValidator, clock: Callable[[], date] = date.today):
        self.validator = validator
        self.clock = clock

    def calculate_approved_loan(self, request: LoanRequest) -> Decision:
        return evaluate(
            request.personal_code,
            request.loan_amount,
            request.loan_period,
            today=self.clock(),
            validator=self.validator,
        )
