import pytest

from moneyfold.codes import BRL, EUR
from moneyfold.currency import (
    Currencies,
    Currency,
    add_currency,
    get_currency,
    get_currency_by_numeric_code,
    resolve_currency,
)


@pytest.mark.parametrize(
    ("code", "expected"),
    [(EUR, "EUR"), ("EUR", "EUR"), ("Eur", "EUR")],
)
def test_resolve_normalizes_code(code, expected):
    assert resolve_currency(code).code == expected


def test_resolve_unknown_uses_code_as_grapheme():
    currency = resolve_currency("RANDOM")
    assert currency.grapheme == "RANDOM"


def test_resolve_unknown_defaults():
    currency = resolve_currency("foo")
    assert currency == Currency(
        code="FOO",
        fraction=2,
        grapheme="FOO",
        template="1$",
        decimal=".",
        thousand=",",
    )


def test_resolve_known_returns_registered():
    currency = resolve_currency("usd")
    assert currency.grapheme == "$"
    assert currency.numeric_code == "840"
    assert currency.fraction == 2


@pytest.mark.parametrize(
    ("code", "other"),
    [(EUR, "EUR"), ("EUR", "EUR"), ("Eur", "EUR"), ("usd", "USD")],
)
def test_same_as(code, other):
    assert resolve_currency(code).same_as(resolve_currency(other))


def test_same_as_different_codes():
    assert not resolve_currency("USD").same_as(resolve_currency("EUR"))


def test_add_currency_template():
    add_currency("GOLD", "", "1$", "", "", 0)
    assert resolve_currency("GOLD").template == "1$"


def test_get_currency_returns_added():
    code = "KLINGONDOLLAR"
    desired = Currency(
        code=code, fraction=2, grapheme="$", template="$1", decimal=".", thousand=","
    )
    returned = add_currency(
        desired.code,
        desired.grapheme,
        desired.template,
        desired.decimal,
        desired.thousand,
        desired.fraction,
    )
    assert returned == desired
    assert get_currency(code) == desired


def test_get_non_existing_currency():
    assert get_currency("I*am*Not*a*Currency") is None


def test_get_currency_case_insensitive():
    currency = get_currency("eur")
    assert currency.code == "EUR"
    assert currency.grapheme == "\u20ac"


def test_currencies_collection():
    cur_foo = Currency(
        code="FOO",
        numeric_code="1234",
        fraction=10,
        grapheme="1",
        template="2",
        decimal="3",
        thousand="4",
    )
    collection = Currencies({"FOO": cur_foo})
    cur_bar = Currency(
        code="BAR",
        numeric_code="4321",
        fraction=1,
        grapheme="2",
        template="3",
        decimal="4",
        thousand="5",
    )
    collection = collection.add(cur_bar)

    assert cur_foo.same_as(collection.by_code("FOO"))
    assert cur_foo.same_as(collection.by_numeric_code("1234"))
    assert cur_bar.same_as(collection.by_code("BAR"))
    assert cur_bar.same_as(collection.by_numeric_code("4321"))


def test_currencies_missing_lookups():
    collection = Currencies()
    assert collection.by_code("FOO") is None
    assert collection.by_numeric_code("1234") is None


def test_currencies_add_replaces():
    collection = Currencies()
    collection.add(Currency(code="FOO", fraction=1))
    collection.add(Currency(code="FOO", fraction=3))
    assert len(collection) == 1
    assert collection.by_code("FOO").fraction == 3


def test_get_currency_by_numeric_code():
    expected = get_currency(BRL)
    got = get_currency_by_numeric_code("986")
    assert expected.same_as(got)


def test_get_currency_by_numeric_code_non_existing():
    assert get_currency_by_numeric_code("I*am*Not*a*Valid*Numeric*Code") is None


def test_formatter_uses_currency_rules():
    formatter = get_currency("USD").formatter()
    assert formatter.format(123456) == "$1,234.56"
    assert formatter.format(-500) == "-$5.00"


def test_formatter_fields_match_currency():
    currency = get_currency("BRL")
    formatter = currency.formatter()
    assert formatter.fraction == 2
    assert formatter.decimal == ","
    assert formatter.thousand == "."
    assert formatter.grapheme == "R$"
    assert formatter.format(123456) == "R$1.234,56"