"""Rendering of integer amounts according to a currency's display rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Formatter:
    """Display rules: decimal places, separators, symbol and template.

    In the template, ``1`` stands for the number and ``$`` for the symbol.
    """

    fraction: int
    decimal: str
    thousand: str
    grapheme: str
    template: str

    def format(self, amount: int) -> str:
        """Format an amount given in the smallest unit, e.g. 123456 -> "$1,234.56"."""
        digits = str(abs(amount))
        if len(digits) <= self.fraction:
            digits = digits.rjust(self.fraction + 1, "0")

        split = len(digits) - self.fraction
        whole, minor = digits[:split], digits[split:]

        if self.thousand:
            head = len(whole) % 3 or 3
            groups = [whole[:head]]
            groups.extend(whole[i : i + 3] for i in range(head, len(whole), 3))
            whole = self.thousand.join(groups)

        number = f"{whole}{self.decimal}{minor}" if self.fraction > 0 else whole
        text = self.template.replace("1", number, 1).replace("$", self.grapheme, 1)
        return f"-{text}" if amount < 0 else text

    def to_major_units(self, amount: int) -> float:
        """Return the amount as a float in major units, e.g. 123456 -> 1234.56."""
        if self.fraction == 0:
            return float(amount)
        return float(amount) / float(10**self.fraction)