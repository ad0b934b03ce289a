"""Address, precision and amount checks that run before any ledger call."""

from decimal import Decimal

import pytest
from xrpl.wallet import Wallet

from iou_minter.domain.issuance.exceptions import PrecisionExceeded, ValidationError
from iou_minter.domain.issuance.validators import (
    assert_precision,
    format_amount,
    is_valid_address,
    parse_amount,
    require_address,
    significant_digits,
)

GENESIS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"


def test_valid_classic_addresses_pass():
    assert is_valid_address(GENESIS)
    assert is_valid_address(Wallet.create().classic_address)


@pytest.mark.parametrize(
    "value",
    [
        "rBADADDR",
        "",
        None,
        42,
        GENESIS[:-1] + ("h" if GENESIS[-1] != "h" else "j"),
        "xHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh",
        " " + GENESIS,
    ],
)
def test_malformed_addresses_fail(value):
    assert not is_valid_address(value)
    with pytest.raises(ValidationError):
        require_address(value)


@pytest.mark.parametrize(
    "amount, digits",
    [
        ("10", 2),
        ("0.001", 1),
        ("100", 3),
        ("123.456", 6),
        ("1234567890123456", 16),
        ("12345678901234567", 17),
        ("0.12345678901234567", 17),
    ],
)
def test_significant_digits_strip_separator_and_leading_zeros(amount, digits):
    assert significant_digits(amount) == digits


def test_precision_allows_sixteen_digits():
    assert_precision("1234567890.123456")
    assert_precision("0.0000001234567890123456")


def test_precision_rejects_seventeen_digits():
    with pytest.raises(PrecisionExceeded):
        assert_precision("12345678901234567")
    with pytest.raises(PrecisionExceeded):
        assert_precision("1.2345678901234567")


def test_precision_error_is_a_validation_error():
    with pytest.raises(ValidationError):
        assert_precision("99999999999999999")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10", "10"),
        (5, "5"),
        (0.1, "0.1"),
        ("1.50", "1.5"),
        ("1e2", "100"),
        (" 7 ", "7"),
        ("1000000", "1000000"),
    ],
)
def test_parse_amount_normalises(raw, expected):
    assert parse_amount(raw, Decimal("1000000")) == expected


@pytest.mark.parametrize("raw", ["0", "-1", 0, "1000000.01", "abc", "", None, True, "NaN", "Infinity", [], {}])
def test_parse_amount_rejects_out_of_range_or_garbage(raw):
    with pytest.raises(ValidationError):
        parse_amount(raw, Decimal("1000000"))


def test_parse_amount_keeps_all_sixteen_digits():
    assert parse_amount("0.1234567890123456", Decimal("1")) == "0.1234567890123456"


@pytest.mark.parametrize("raw", ["12345678901234567", "0.12345678901234567", "99999999999999999"])
def test_parse_amount_checks_precision_before_range(raw):
    with pytest.raises(PrecisionExceeded):
        parse_amount(raw, Decimal("1000000"))


def test_parse_amount_range_applies_to_precise_amounts():
    with pytest.raises(ValidationError) as excinfo:
        parse_amount("1234567", Decimal("1000000"))
    assert excinfo.value.code == "invalid_amount"


def test_format_amount_has_no_exponent():
    assert format_amount(Decimal("1E+3")) == "1000"
    assert format_amount(Decimal("2.500")) == "2.5"
