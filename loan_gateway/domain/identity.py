"""Applicant identity codes: validation and birth date decoding"""

import re
from datetime import date
from typing import Protocol

from loan_gateway.domain.exceptions import IdentityCodeError
from loan_gateway.utils.date_utils import months_between

# Century and sex digit -> first year of the century
_CENTURY_BY_DIGIT = {
    1: 1800, 2: 1800,
    3: 1900, 4: 1900,
    5: 2000, 6: 2000,
    7: 2100, 8: 2100,
}

_CODE_PATTERN = re.compile(r"[0-9]{11}")

_FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
_SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


class IdentityCodeParser(Protocol):
    """What the decision engine needs to know about an applicant identifier"""

    def is_valid(self, code: str) -> bool:
        ...

    def age_in_months(self, code: str, as_of: date) -> int:
        ...


def personal_code_check_digit(first_ten: str) -> int:
    """
    Compute the Estonian personal code check digit (ISIKUKOOD).

    Weighted sum mod 11 with weights 1..9,1. A remainder of 10 is retried
    with weights 3..9,1,2,3; a second 10 becomes 0.
    """
    digits = [int(c) for c in first_ten]
    remainder = sum(d * w for d, w in zip(digits, _FIRST_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, _SECOND_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


class EstonianPersonalCodeParser:
    """
    Estonian personal identification code, format GYYMMDDSSSC.

    - G: century and sex (1-8)
    - YYMMDD: date of birth
    - SSS: sequence number for people born on the same day
    - C: check digit

    Example: 38501013004 -> male, born 1985-01-01
    """

    def is_valid(self, code: str) -> bool:
        if not isinstance(code, str) or not _CODE_PATTERN.fullmatch(code):
            return False
        if int(code[0]) not in _CENTURY_BY_DIGIT:
            return False
        if personal_code_check_digit(code[:10]) != int(code[10]):
            return False

        try:
            self.birth_date(code)
        except IdentityCodeError:
            return False
        return True

    def birth_date(self, code: str) -> date:
        """
        Decode date of birth from the code.

        Raises:
            IdentityCodeError: Century digit or date segment is not decodable
        """
        try:
            century = _CENTURY_BY_DIGIT[int(code[0])]
            return date(century + int(code[1:3]), int(code[3:5]), int(code[5:7]))
        except (KeyError, ValueError, IndexError) as e:
            raise IdentityCodeError(f"Cannot decode birth date from identity code: {e}") from e

    def age_in_months(self, code: str, as_of: date) -> int:
        """Whole months the applicant has lived as of the given date"""
        return months_between(self.birth_date(code), as_of)


def mask_code(code: str) -> str:
    """Keep only the segment digits of an identity code for log records"""
    if len(code) <= 4:
        return "*" * len(code)
    return "*" * (len(code) - 4) + code[-4:]
