"""Conversion of money and currencies to and from storage and JSON forms.

Database values are strings of the form ``"<amount><separator><code>"``,
for example ``"2550|USD"``. JSON documents have the form
``{"amount": 2550, "currency": "USD"}``.
"""

from __future__ import annotations

import json
import re
from typing import Any

from moneyfold.codes import DEFAULT_DB_MONEY_VALUE_SEPARATOR
from moneyfold.currency import Currency, get_currency
from moneyfold.money import Money

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ScanError(ValueError):
    """Raised when a stored value cannot be read back as money or a currency."""


class InvalidJSONError(ValueError):
    """Raised when a JSON document does not describe money."""


def money_to_db_value(
    money: Money, separator: str = DEFAULT_DB_MONEY_VALUE_SEPARATOR
) -> str:
    """Return the storage string for ``money``, e.g. ``"2550|USD"``."""
    return f"{money.amount}{separator}{money.currency.code}"


def _parse_amount(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ScanError(f"scanning {text!r} into an amount: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ScanError(f"scanning {text!r} into an amount: value out of range")
    return value


def money_from_db_value(
    src: Any, separator: str = DEFAULT_DB_MONEY_VALUE_SEPARATOR
) -> Money:
    """Read money from a storage string of the form ``"<amount><separator><code>"``.

    Raises ScanError when ``src`` is not such a string or names an unknown
    currency.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    expected = f'"amount{separator}currency_code"'
    if not isinstance(src, str):
        raise ScanError(
            f"don't know how to scan {type(src).__name__} into money; "
            f"expected a pair of {expected}"
        )

    parts = src.split(separator)
    if len(parts) != 2 or not all(parts):
        raise ScanError(
            f"{src!r} is not valid to scan into money; expected a pair of {expected}"
        )

    amount_text, code_text = parts
    amount = _parse_amount(amount_text)
    try:
        currency = currency_from_db_value(code_text)
    except ScanError as exc:
        raise ScanError(f"scanning {code_text!r} into a currency: {exc}") from exc
    return Money(amount, currency)


def currency_to_db_value(currency: Currency) -> str:
    """Return the storage string for a currency: its code."""
    return currency.code


def currency_from_db_value(src: Any) -> Currency:
    """Return the registered currency whose code is ``src`` (case-insensitive).

    Raises ScanError when ``src`` is not a string or no such currency exists.
    """
    if not isinstance(src, str):
        raise ScanError(
            f"{type(src).__name__} is not a supported type for a currency "
            "(store the currency code as a string only)"
        )
    currency = get_currency(src)
    if currency is None:
        raise ScanError(f"no currency is registered under {src!r}")
    return currency


def money_to_json(money: Money) -> str:
    """Return ``money`` as a compact JSON document."""
    return json.dumps(
        {"amount": money.amount, "currency": money.currency.code},
        separators=(",", ":"),
        ensure_ascii=False,
    )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def money_from_json(data: str | bytes | bytearray) -> Money:
    """Read money from a JSON document with ``amount`` and ``currency`` keys.

    Missing keys default to 0 and "". A fractional amount is truncated
    toward zero. Raises InvalidJSONError for malformed documents or values
    of the wrong type.
    """
    try:
        document = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJSONError(f"invalid json unmarshal: {exc}") from exc
    if not isinstance(document, dict):
        raise InvalidJSONError("invalid json unmarshal: expected an object")

    amount = document.get("amount", 0)
    if not _is_number(amount):
        raise InvalidJSONError("invalid json unmarshal")

    code = document.get("currency", "")
    if not isinstance(code, str):
        raise InvalidJSONError("invalid json unmarshal")

    return Money(int(amount), code)