import pytest

from ftkit import conversions

SAMPLES = [0, 1, -1, 7, 42, -42, 1000, 123456789, -987654321, 2147483647, -2147483648]


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_atoi_round_trip(n):
    text = conversions.itoa(n)
    assert text == str(n)
    assert conversions.atoi(text) == n


def test_itoa_int_min():
    assert conversions.itoa(-2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_sign():
    assert conversions.atoi(" \t\n\v\f\r42") == 42
    assert conversions.atoi("  -42abc") == -42
    assert conversions.atoi("+17 and more") == 17


def test_atoi_stops_at_second_sign_or_letters():
    assert conversions.atoi("+-5") == conversions.atoi("abc")
    assert conversions.atoi("abc") == conversions.atoi("")


def test_atol_holds_64_bit_values():
    big = 2**40 + 3
    assert conversions.atol(str(big)) == big
    assert conversions.atol(str(-big)) == -big
    assert conversions.atol(str(2**63 - 1)) == 2**63 - 1


def test_atol_overflow_rules():
    huge = "9" * 25
    assert conversions.atol(huge) == -1
    assert conversions.atol("-" + huge) == 0


def test_atoi_wraps_like_int_cast():
    assert conversions.atoi(str(2**32 + 5)) == 5
    assert conversions.atoi(str(2**31)) == -(2**31)


@pytest.mark.parametrize("text, expected", [("3.25", 3.25), ("10.5", 10.5), ("0.125", 0.125), ("7", 7.0)])
def test_atod_positive_values(text, expected):
    assert conversions.atod(text) == pytest.approx(expected)


def test_atod_fraction_is_added_to_negative_integer_part():
    assert conversions.atod("-1.5") == pytest.approx(-0.5)


def test_atod_ignores_leading_whitespace_in_integer_part():
    assert conversions.atod("   2.5") == pytest.approx(2.5)


@pytest.mark.parametrize("n", [1, 15, 16, 255, 4096, 123456789, 2**40])
@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
def test_itoa_base_round_trip(n, base):
    assert int(conversions.itoa_base(n, base), base) == n


def test_itoa_base_zero():
    assert conversions.itoa_base(0, 16) == "0"


def test_itoa_base_case():
    assert conversions.itoa_base(255, 16, True) == conversions.itoa_base(255, 16).upper()
    assert conversions.itoa_base(255, 16) == format(255, "x")


def test_itoa_base_negative_decimal():
    assert conversions.itoa_base(-42, 10) == "-42"


def test_itoa_base_negative_hex_is_unsigned_64_bit():
    text = conversions.itoa_base(-1, 16)
    assert int(text, 16) == 2**64 - 1
    assert set(text) == {"f"}


@pytest.mark.parametrize("base", [0, 1, 37])
def test_itoa_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        conversions.itoa_base(5, base)