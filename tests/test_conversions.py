import pytest

from algokit.conversions import (
    add_binary_int,
    add_binary_string,
    binary_string_to_int,
    binary_to_decimal,
    binary_to_hex,
    binary_to_int,
    decimal_to_binary,
    decimal_to_hex,
    hex_to_binary,
    hex_to_decimal,
    int_to_binary,
)


def test_add_binary_int_example():
    assert add_binary_int(5, 3) == 8


@pytest.mark.parametrize("a,b", [(0, 0), (1, 1), (100, 27), (-5, 3), (-7, -9), (12345, -12345)])
def test_add_binary_int_matches_addition(a, b):
    assert add_binary_int(a, b) == a + b


def test_add_binary_int_wraps_at_32_bits():
    assert add_binary_int(2**31 - 1, 1) == -(2**31)


def test_add_binary_string_example():
    assert add_binary_string("101", "11") == "1000"


@pytest.mark.parametrize("a,b", [("0", "0"), ("1", "1"), ("1111", "1"), ("101010", "110011")])
def test_add_binary_string_sum(a, b):
    result = add_binary_string(a, b)
    assert int(result, 2) == int(a, 2) + int(b, 2)
    assert result == "0" or result.startswith("1")


@pytest.mark.parametrize("s", ["1101", "0", "1", "100000", "0110"])
def test_binary_string_to_int(s):
    assert binary_string_to_int(s) == int(s, 2)


@pytest.mark.parametrize("s", ["100", "1111", "0", "101101"])
def test_binary_to_int(s):
    assert binary_to_int(s) == int(s, 2)


def test_binary_to_int_rejects_non_digits():
    with pytest.raises(ValueError):
        binary_to_int("10x")


@pytest.mark.parametrize("x", [1, 2, 15, 255, 1024])
def test_int_to_binary_round_trip(x):
    bits = int_to_binary(x)
    assert int(bits, 2) == x
    assert bits.startswith("1")


def test_int_to_binary_rejects_zero():
    with pytest.raises(ValueError):
        int_to_binary(0)


def test_binary_to_decimal_example():
    assert binary_to_decimal("1101") == 13


def test_binary_to_decimal_rejects_invalid():
    with pytest.raises(ValueError):
        binary_to_decimal("102")


@pytest.mark.parametrize("value", [0, 13, 29, 2**31 - 1])
def test_decimal_to_binary_round_trip(value):
    bits = decimal_to_binary(value)
    assert len(bits) == 32
    assert binary_to_decimal(bits) == value


def test_decimal_to_binary_negative_is_twos_complement():
    assert decimal_to_binary(-1) == "1" * 32


def test_hex_to_binary_example():
    assert hex_to_binary("1D") == "00011101"


def test_hex_to_binary_case_insensitive():
    assert hex_to_binary("1d") == hex_to_binary("1D")


def test_hex_to_binary_rejects_invalid():
    with pytest.raises(ValueError):
        hex_to_binary("1G")


def test_binary_to_hex_example():
    assert binary_to_hex("00011101") == "1D"


def test_binary_to_hex_drops_incomplete_leading_group():
    assert binary_to_hex("1" + "00011101") == binary_to_hex("00011101")


@pytest.mark.parametrize("h", ["1D", "ff", "0", "ABCDEF", "123456789"])
def test_hex_binary_round_trip(h):
    assert binary_to_hex(hex_to_binary(h)) == h.upper()


@pytest.mark.parametrize("h", ["1D", "ff", "0", "abc123"])
def test_hex_to_decimal(h):
    assert hex_to_decimal(h) == int(h, 16)


def test_hex_to_decimal_example():
    assert hex_to_decimal("1D") == 29


@pytest.mark.parametrize("value", [0, 29, 4096, 2**31 - 1])
def test_decimal_to_hex_round_trip(value):
    text = decimal_to_hex(value)
    assert len(text) == 8
    assert int(text, 16) == value


def test_decimal_to_hex_negative_matches_binary_form():
    assert hex_to_binary(decimal_to_hex(-5)) == decimal_to_binary(-5)