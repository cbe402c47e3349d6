"""Monetary values held as integers in a currency's smallest unit."""

from __future__ import annotations

import math

from moneyfold import calculator
from moneyfold.currency import Currency, resolve_currency

_MAX_INT64 = 2**63 - 1


class CurrencyMismatchError(ValueError):
    """Raised when an operation mixes amounts in different currencies."""

    def __init__(self, message: str = "currencies don't match") -> None:
        super().__init__(message)


class Money:
    """An integer amount in a currency's smallest unit, e.g. cents for USD.

    Arithmetic never mutates; every operation returns a new instance.
    Operations between different currencies raise CurrencyMismatchError.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: int, currency: str | Currency) -> None:
        self._amount = int(amount)
        self._currency = (
            currency if isinstance(currency, Currency) else resolve_currency(currency)
        )

    @classmethod
    def from_float(cls, amount: float, code: str) -> Money:
        """Build from major units, truncating toward zero: 12.34 USD -> 1234."""
        fraction = resolve_currency(code).fraction
        return cls(int(amount * math.pow(10, fraction)), code)

    @property
    def amount(self) -> int:
        """The amount in the currency's smallest unit."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """The currency of this amount."""
        return self._currency

    def _with(self, amount: int) -> Money:
        return Money(amount, self._currency)

    def same_currency(self, other: Money) -> bool:
        """Return True when both amounts share a currency code."""
        return self._currency.same_as(other._currency)

    def _check_currency(self, other: Money) -> None:
        if not self.same_currency(other):
            raise CurrencyMismatchError()

    def compare(self, other: Money) -> int:
        """Return 1, 0 or -1 as this amount is greater, equal or less."""
        self._check_currency(other)
        return (self._amount > other._amount) - (self._amount < other._amount)

    def equals(self, other: Money) -> bool:
        return self.compare(other) == 0

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) == 1

    def greater_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def less_than(self, other: Money) -> bool:
        return self.compare(other) == -1

    def less_than_or_equal(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def absolute(self) -> Money:
        """Return the absolute value."""
        return self._with(calculator.absolute(self._amount))

    def negative(self) -> Money:
        """Return the negative value; negative amounts stay as they are."""
        if self._amount <= 0:
            return self._with(self._amount)
        return self._with(calculator.negative(self._amount))

    def _sum_of(self, others: tuple[Money, ...]) -> int:
        total = 0
        for other in others:
            self._check_currency(other)
            total = calculator.add(total, other._amount)
        return total

    def add(self, *args: Money) -> Money:
        """Return this amount plus all the others."""
        if not args:
            return self
        return self._with(calculator.add(self._amount, self._sum_of(args)))

    def subtract(self, *args: Money) -> Money:
        """Return this amount minus all the others."""
        if not args:
            return self
        return self._with(calculator.subtract(self._amount, self._sum_of(args)))

    def multiply(self, *args: int) -> Money:
        """Return this amount multiplied by every given integer."""
        if not args:
            raise ValueError("at least one multiplier is required to multiply")
        factor = math.prod(args)
        return self._with(calculator.multiply(self._amount, factor))

    def round(self) -> Money:
        """Round half up to a multiple of ten to the currency's fraction."""
        return self._with(
            calculator.round_to_precision(self._amount, self._currency.fraction)
        )

    def split(self, n: int) -> list[Money]:
        """Split into ``n`` near-equal parts; the first parts take the remainder."""
        if n <= 0:
            raise ValueError("split must be higher than zero")
        base = calculator.divide(self._amount, n)
        leftover = calculator.absolute(calculator.modulus(self._amount, n))
        step = -1 if self._amount < 0 else 1
        return [
            self._with(base + step if position < leftover else base)
            for position in range(n)
        ]

    def allocate(self, *args: int) -> list[Money]:
        """Divide by the given ratios; the first parts take the remainder."""
        if not args:
            raise ValueError("no ratios specified")
        total_ratio = 0
        for ratio in args:
            if ratio < 0:
                raise ValueError("negative ratios not allowed")
            if ratio > _MAX_INT64 - total_ratio:
                raise ValueError("sum of given ratios exceeds max int")
            total_ratio += ratio

        parts = [
            calculator.allocate(self._amount, ratio, total_ratio) for ratio in args
        ]
        if total_ratio != 0:
            leftover = self._amount - sum(parts)
            step = -1 if leftover < 0 else 1
            for position in range(abs(leftover)):
                parts[position] += step
        return [self._with(part) for part in parts]

    def display(self) -> str:
        """Format using the currency's display rules, e.g. "$1,234.56"."""
        return resolve_currency(self._currency.code).formatter().format(self._amount)

    def as_major_units(self) -> float:
        """Return the amount as a float in major units, e.g. 2550 -> 25.5."""
        formatter = resolve_currency(self._currency.code).formatter()
        return formatter.to_major_units(self._amount)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self._amount == other._amount and self.same_currency(other)

    def __hash__(self) -> int:
        return hash((self._amount, self._currency.code))

    def __repr__(self) -> str:
        return f"Money({self._amount!r}, {self._currency.code!r})"

    def __str__(self) -> str:
        return self.display()