"""Estonian personal ID code (isikukood) validator backed by python-stdnum"""

import logging

from stdnum.ee import ik
from stdnum.exceptions import ValidationError


class EstonianPersonalCodeValidator:
    """Validates format, embedded birth date and checksum of an isikukood"""

    def is_valid(self, personal_code: str) -> bool:
        try:
            ik.validate(personal_code)
        except ValidationError as e:
            logging.debug(f"Personal code rejected: {e}")
            return False

        # stdnum strips separators, the domain layer slices the raw digits
        return ik.compact(personal_code) == personal_code
