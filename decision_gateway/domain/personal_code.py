"""Customer attributes derived from the Estonian personal ID code"""

from datetime import date

from decision_gateway.domain.constants import (
    SEGMENT_1_CREDIT_MODIFIER,
    SEGMENT_2_CREDIT_MODIFIER,
    SEGMENT_3_CREDIT_MODIFIER,
)
from decision_gateway.domain.exceptions import InvalidPersonalCodeError
from decision_gateway.utils.date_utils import full_years_between

# First digit of the code encodes the birth century (and gender)
CENTURY_BY_FIRST_DIGIT = {
    "1": 1800,
    "2": 1800,
    "3": 1900,
    "4": 1900,
    "5": 2000,
    "6": 2000,
    "7": 2100,
    "8": 2100,
}


def get_birth_date(personal_code: str) -> date:
    """
    Decode the birth date from a personal ID code.

    Layout: GYYMMDDSSSC
    - G: century and gender
    - YYMMDD: birth year within century, month and day
    - SSSC: serial number and checksum

    Raises:
        InvalidPersonalCodeError: Unknown century digit or impossible date
    """
    century = CENTURY_BY_FIRST_DIGIT.get(personal_code[:1])
    if century is None:
        raise InvalidPersonalCodeError()

    try:
        return date(
            century + int(personal_code[1:3]),
            int(personal_code[3:5]),
            int(personal_code[5:7]),
        )
    except ValueError as e:
        raise InvalidPersonalCodeError() from e


def calculate_age(personal_code: str, today: date) -> int:
    """Age of the customer in whole years as of today"""
    return full_years_between(get_birth_date(personal_code), today)


def get_credit_modifier(personal_code: str) -> int:
    """
    Map the last four digits of the code to a credit modifier.

    Segments:
    - 0000 - 2499: Debt (modifier 0, no loan possible)
    - 2500 - 4999: Segment 1
    - 5000 - 7499: Segment 2
    - 7500 - 9999: Segment 3
    """
    try:
        segment = int(personal_code[-4:])
    except ValueError as e:
        raise InvalidPersonalCodeError() from e

    if segment < 2500:
        return 0
    elif segment < 5000:
        return SEGMENT_1_CREDIT_MODIFIER
    elif segment < 7500:
        return SEGMENT_2_CREDIT_MODIFIER
    else:
        return SEGMENT_3_CREDIT_MODIFIER
