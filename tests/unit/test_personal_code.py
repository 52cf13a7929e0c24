"""Unit tests for Estonian personal code validation"""

import pytest
from datetime import date
from loan_decision.domain.personal_code import birth_date, checksum, is_valid


@pytest.mark.parametrize(
    "code",
    [
        "49002010965",
        "49002013008",
        "49002015503",
        "49002018004",
        "49002016000",  # first weighted sum gives 10, second pass gives 0
        "79002013000",  # born 2190
        "89002013001",  # born 2190
    ],
)
def test_valid_codes(code: str):
    assert is_valid(code) is True


@pytest.mark.parametrize(
    "code",
    [
        "49002013009",  # wrong check digit
        "4900201300",  # too short
        "490020130080",  # too long
        "4900201300A",  # not numeric
        "99002013008",  # unknown century digit
        "09002013008",  # unknown century digit
        "49013013006",  # month 13, checksum otherwise correct
        "",
    ],
)
def test_invalid_codes(code: str):
    assert is_valid(code) is False


def test_non_string_rejected():
    """Test non-string input is rejected rather than raising"""
    assert is_valid(49002013008) is False
    assert is_valid(None) is False


def test_non_ascii_digits_rejected():
    """Test unicode digits that str.isdigit() accepts are not valid"""
    assert is_valid("4900201300²") is False


def test_checksum_first_and_second_weights():
    # 4*1 + 9*2 + 2*5 + 1*7 + 3*8 = 63 -> 63 % 11 = 8
    assert checksum("4900201300") == 8
    # First pass: 87 % 11 = 10, second pass: 77 % 11 = 0
    assert checksum("4900201600") == 0


def test_birth_date_century():
    """Test first digit selects the century of birth"""
    assert birth_date("49002013008") == date(1990, 2, 1)
    assert birth_date("19002013008") == date(1890, 2, 1)
    assert birth_date("60002290000") == date(2000, 2, 29)
    assert birth_date("60102290000") is None  # 2001 is not a leap year
    assert birth_date("79002013008") == date(2190, 2, 1)
    assert birth_date("99002013008") is None
