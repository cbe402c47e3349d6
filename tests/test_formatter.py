import pytest

from moneyfold.formatter import Formatter

_USD_AFTER = (2, ".", ",", "$", "1 $")
_THREE_NO_SEP = (3, ".", "", "$", "1 $")
_POUND = (2, ".", ",", "£", "$1")
_TWD = (0, ".", ",", "NT$", "$1")

FORMAT_CASES = [
    (_USD_AFTER, 0, "0.00 $"),
    (_USD_AFTER, 1, "0.01 $"),
    (_USD_AFTER, 12, "0.12 $"),
    (_USD_AFTER, 123, "1.23 $"),
    (_USD_AFTER, 1234, "12.34 $"),
    (_USD_AFTER, 12345, "123.45 $"),
    (_USD_AFTER, 123456, "1,234.56 $"),
    (_USD_AFTER, 1234567, "12,345.67 $"),
    (_USD_AFTER, 12345678, "123,456.78 $"),
    (_USD_AFTER, 123456789, "1,234,567.89 $"),
    (_USD_AFTER, -1, "-0.01 $"),
    (_USD_AFTER, -12, "-0.12 $"),
    (_USD_AFTER, -123, "-1.23 $"),
    (_USD_AFTER, -1234, "-12.34 $"),
    (_USD_AFTER, -12345, "-123.45 $"),
    (_USD_AFTER, -123456, "-1,234.56 $"),
    (_USD_AFTER, -1234567, "-12,345.67 $"),
    (_USD_AFTER, -12345678, "-123,456.78 $"),
    (_USD_AFTER, -123456789, "-1,234,567.89 $"),
    (_THREE_NO_SEP, 1, "0.001 $"),
    (_THREE_NO_SEP, 12, "0.012 $"),
    (_THREE_NO_SEP, 123, "0.123 $"),
    (_THREE_NO_SEP, 1234, "1.234 $"),
    (_THREE_NO_SEP, 12345, "12.345 $"),
    (_THREE_NO_SEP, 123456, "123.456 $"),
    (_THREE_NO_SEP, 1234567, "1234.567 $"),
    (_THREE_NO_SEP, 12345678, "12345.678 $"),
    (_THREE_NO_SEP, 123456789, "123456.789 $"),
    (_POUND, 1, "£0.01"),
    (_POUND, 12, "£0.12"),
    (_POUND, 123, "£1.23"),
    (_POUND, 1234, "£12.34"),
    (_POUND, 12345, "£123.45"),
    (_POUND, 123456, "£1,234.56"),
    (_POUND, 1234567, "£12,345.67"),
    (_POUND, 12345678, "£123,456.78"),
    (_POUND, 123456789, "£1,234,567.89"),
    (_TWD, 1, "NT$1"),
    (_TWD, 12, "NT$12"),
    (_TWD, 123, "NT$123"),
    (_TWD, 1234, "NT$1,234"),
    (_TWD, 12345, "NT$12,345"),
    (_TWD, 123456, "NT$123,456"),
    (_TWD, 1234567, "NT$1,234,567"),
    (_TWD, 12345678, "NT$12,345,678"),
    (_TWD, 123456789, "NT$123,456,789"),
    (_TWD, -1, "-NT$1"),
    (_TWD, -12, "-NT$12"),
    (_TWD, -123, "-NT$123"),
    (_TWD, -1234, "-NT$1,234"),
    (_TWD, -12345, "-NT$12,345"),
    (_TWD, -123456, "-NT$123,456"),
    (_TWD, -1234567, "-NT$1,234,567"),
    (_TWD, -12345678, "-NT$12,345,678"),
    (_TWD, -123456789, "-NT$123,456,789"),
]

MAJOR_UNIT_CASES = [
    (_USD_AFTER, 0, 0.00),
    (_USD_AFTER, 1, 0.01),
    (_USD_AFTER, 12, 0.12),
    (_USD_AFTER, 123, 1.23),
    (_USD_AFTER, 1234, 12.34),
    (_USD_AFTER, 12345, 123.45),
    (_USD_AFTER, 123456, 1234.56),
    (_USD_AFTER, 1234567, 12345.67),
    (_USD_AFTER, 12345678, 123456.78),
    (_USD_AFTER, 123456789, 1234567.89),
    (_USD_AFTER, -1, -0.01),
    (_USD_AFTER, -12, -0.12),
    (_USD_AFTER, -123, -1.23),
    (_USD_AFTER, -1234, -12.34),
    (_USD_AFTER, -12345, -123.45),
    (_USD_AFTER, -123456, -1234.56),
    (_USD_AFTER, -1234567, -12345.67),
    (_USD_AFTER, -12345678, -123456.78),
    (_USD_AFTER, -123456789, -1234567.89),
    (_THREE_NO_SEP, 1, 0.001),
    (_THREE_NO_SEP, 12, 0.012),
    (_THREE_NO_SEP, 123, 0.123),
    (_THREE_NO_SEP, 1234, 1.234),
    (_THREE_NO_SEP, 12345, 12.345),
    (_THREE_NO_SEP, 123456, 123.456),
    (_THREE_NO_SEP, 1234567, 1234.567),
    (_THREE_NO_SEP, 12345678, 12345.678),
    (_THREE_NO_SEP, 123456789, 123456.789),
    (_POUND, 1, 0.01),
    (_POUND, 12, 0.12),
    (_POUND, 123, 1.23),
    (_POUND, 1234, 12.34),
    (_POUND, 12345, 123.45),
    (_POUND, 123456, 1234.56),
    (_POUND, 1234567, 12345.67),
    (_POUND, 12345678, 123456.78),
    (_POUND, 123456789, 1234567.89),
    (_TWD, 1, 1),
    (_TWD, 12, 12),
    (_TWD, 123, 123),
    (_TWD, 1234, 1234),
    (_TWD, 12345, 12345),
    (_TWD, 123456, 123456),
    (_TWD, 1234567, 1234567),
    (_TWD, 12345678, 12345678),
    (_TWD, 123456789, 123456789),
    (_TWD, -1, -1),
    (_TWD, -12, -12),
    (_TWD, -123, -123),
    (_TWD, -1234, -1234),
    (_TWD, -12345, -12345),
    (_TWD, -123456, -123456),
    (_TWD, -1234567, -1234567),
    (_TWD, -12345678, -12345678),
    (_TWD, -123456789, -123456789),
]


@pytest.mark.parametrize("rules,amount,expected", FORMAT_CASES)
def test_format(rules, amount, expected):
    assert Formatter(*rules).format(amount) == expected


@pytest.mark.parametrize("rules,amount,expected", MAJOR_UNIT_CASES)
def test_to_major_units(rules, amount, expected):
    assert Formatter(*rules).to_major_units(amount) == expected


def test_keyword_construction_matches_positional():
    formatter = Formatter(
        fraction=2, decimal=".", thousand=",", grapheme="$", template="$1"
    )
    assert formatter == Formatter(2, ".", ",", "$", "$1")
    assert formatter.format(123456) == "$1,234.56"
    assert formatter.format(-500) == "-$5.00"


@pytest.mark.parametrize("amount", [1, 999, 123456789, -42])
def test_negative_is_positive_with_minus_prefix(amount):
    formatter = Formatter(*_POUND)
    assert formatter.format(-abs(amount)) == "-" + formatter.format(abs(amount))