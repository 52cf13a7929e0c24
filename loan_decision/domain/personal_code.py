"""Estonian personal identification code (isikukood) validation"""

from datetime import date

PERSONAL_CODE_LENGTH = 11

FIRST_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)

# First digit encodes sex and century of birth
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


def checksum(digits: str) -> int:
    """
    Calculate the check digit for the first ten digits of a personal code.

    Algorithm:
    - Weighted sum with weights 1..9, 1, modulo 11
    - If the result is 10, repeat with weights 3..9, 1, 2, 3
    - If the result is still 10, the check digit is 0
    """
    remainder = sum(int(d) * w for d, w in zip(digits[:10], FIRST_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(int(d) * w for d, w in zip(digits[:10], SECOND_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


def birth_date(personal_code: str) -> date | None:
    """Decode the birth date, or None if the century digit or date is invalid"""
    century = CENTURY_BY_FIRST_DIGIT.get(personal_code[:1])
    if century is None:
        return None

    try:
        return date(
            century + int(personal_code[1:3]),
            int(personal_code[3:5]),
            int(personal_code[5:7]),
        )
    except ValueError:
        return None


def is_valid(personal_code: str) -> bool:
    """
    Validate an Estonian personal code.

    Format: GYYMMDDSSSC
    - G: sex and century (1-8)
    - YYMMDD: date of birth
    - SSS: serial number
    - C: check digit
    """
    if not isinstance(personal_code, str) or len(personal_code) != PERSONAL_CODE_LENGTH:
        return False

    # isdigit() accepts non-ASCII digits such as superscripts
    if not (personal_code.isascii() and personal_code.isdigit()):
        return False

    if birth_date(personal_code) is None:
        return False

    return checksum(personal_code) == int(personal_code[10])
