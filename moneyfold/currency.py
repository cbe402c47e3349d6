"""Currencies, their registry and lookups by alphabetic or numeric code."""

from __future__ import annotations

from dataclasses import dataclass

from moneyfold.formatter import Formatter
from moneyfold.iso4217 import CurrencySpec, builtin_currencies


@dataclass(frozen=True)
class Currency:
    """A currency and the rules used to display amounts in it.

    ``fraction`` is the number of decimal places. In ``template``, ``1``
    stands for the number and ``$`` for the symbol (``grapheme``).
    """

    code: str
    numeric_code: str = ""
    fraction: int = 0
    grapheme: str = ""
    template: str = ""
    decimal: str = ""
    thousand: str = ""

    @classmethod
    def _from_spec(cls, spec: CurrencySpec) -> Currency:
        return cls(
            code=spec.code,
            numeric_code=spec.numeric_code,
            fraction=spec.fraction,
            grapheme=spec.grapheme,
            template=spec.template,
            decimal=spec.decimal,
            thousand=spec.thousand,
        )

    def formatter(self) -> Formatter:
        """Return a Formatter carrying this currency's display rules."""
        return Formatter(
            fraction=self.fraction,
            decimal=self.decimal,
            thousand=self.thousand,
            grapheme=self.grapheme,
            template=self.template,
        )

    def same_as(self, other: Currency) -> bool:
        """Return True when both currencies have the same code."""
        return self.code == other.code


class Currencies(dict):
    """A mapping of currency code to Currency with lookup helpers."""

    def by_code(self, code: str) -> Currency | None:
        """Return the currency registered under ``code`` exactly, or None."""
        return self.get(code)

    def by_numeric_code(self, code: str) -> Currency | None:
        """Return the first currency whose numeric code is ``code``, or None."""
        return next(
            (currency for currency in self.values() if currency.numeric_code == code),
            None,
        )

    def add(self, currency: Currency) -> Currencies:
        """Add or replace a currency under its code; return this collection."""
        self[currency.code] = currency
        return self


_registry = Currencies(
    (code, Currency._from_spec(spec)) for code, spec in builtin_currencies().items()
)


def add_currency(
    code: str,
    grapheme: str,
    template: str,
    decimal: str,
    thousand: str,
    fraction: int,
) -> Currency:
    """Register a custom currency (or replace one) and return it."""
    currency = Currency(
        code=code,
        grapheme=grapheme,
        template=template,
        decimal=decimal,
        thousand=thousand,
        fraction=fraction,
    )
    _registry.add(currency)
    return currency


def get_currency(code: str) -> Currency | None:
    """Return the registered currency for ``code`` (case-insensitive), or None."""
    return _registry.by_code(code.upper())


def get_currency_by_numeric_code(code: str) -> Currency | None:
    """Return the registered currency with ISO numeric code ``code``, or None."""
    return _registry.by_numeric_code(code)


def resolve_currency(code: str) -> Currency:
    """Return the registered currency for ``code``, or a default one.

    The code is upper-cased. An unknown currency gets two decimal places,
    "." and "," as separators, its code as symbol and the template "1$".
    """
    normalized = code.upper()
    registered = _registry.by_code(normalized)
    if registered is not None:
        return registered
    return Currency(
        code=normalized,
        fraction=2,
        grapheme=normalized,
        template="1$",
        decimal=".",
        thousand=",",
    )