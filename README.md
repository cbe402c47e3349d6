# moneyfold

Exact money arithmetic for Python. Every amount is an integer in the currency's
smallest unit (cents for USD, whole yen for JPY). Sums, splits and allocations
therefore never pick up floating-point drift.

The package uses only the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `moneyfold.money` | `Money`, `CurrencyMismatchError` |
| `moneyfold.currency` | `Currency`, `Currencies`, `add_currency`, `get_currency`, `get_currency_by_numeric_code`, `resolve_currency` |
| `moneyfold.formatter` | `Formatter` |
| `moneyfold.calculator` | integer helpers: `add`, `subtract`, `multiply`, `divide`, `modulus`, `allocate`, `absolute`, `negative`, `round_to_precision` |
| `moneyfold.iso4217` | `CurrencySpec`, `builtin_currencies()` (the built-in ISO 4217 table) |
| `moneyfold.codes` | currency code constants (`USD`, `EUR`, ...) and `DEFAULT_DB_MONEY_VALUE_SEPARATOR` |
| `moneyfold.codec` | storage-string and JSON conversion, `ScanError`, `InvalidJSONError` |

## Creating money

```python
from moneyfold.money import Money

price = Money(2550, "USD")          # $25.50
tax = Money(255, "usd")             # codes are case-insensitive
fee = Money.from_float(25.5, "USD") # 2550 cents; truncates toward zero

print(price.display())              # $25.50
print(price.as_major_units())       # 25.5
print(price.amount, price.currency.code)  # 2550 USD
```

Each currency's decimal places, symbol, separators and layout come from the
built-in ISO 4217 table. A code that is not in the table falls back to two
decimals, "." and "," as separators, and the code itself as the symbol:
`Money(100, "FOO").display()` gives `1.00FOO`.

`Money` instances are immutable. Two of them compare equal with `==` when
amount and currency code match.

## Arithmetic and comparison

Amounts must share a currency. Mixing currencies raises
`CurrencyMismatchError`, which is a `ValueError`.

```python
total = price.add(tax, fee)
change = total.subtract(Money(100, "USD"))
tripled = price.multiply(3)       # several factors multiply together

price.greater_than(tax)           # True
price.compare(tax)                # 1, 0 or -1
price.equals(Money(2550, "EUR"))  # raises CurrencyMismatchError
```

`multiply()` with no factors raises `ValueError`. `round()` rounds half up to
whole major units, keeping the sign: `Money(125, "EUR").round().amount` is
`100` and `Money(175, "EUR").round().amount` is `200`. `absolute()`,
`negative()`, `is_zero()`, `is_positive()` and `is_negative()` do what their
names say. `negative()` leaves amounts that are already negative unchanged.

## Splitting and allocation

Leftover minor units go to the first parties, one unit each, so no money is
lost:

```python
[m.display() for m in Money(100, "GBP").split(3)]
# ['£0.34', '£0.33', '£0.33']

[m.display() for m in Money(100, "GBP").allocate(33, 33, 33)]
# ['£0.34', '£0.33', '£0.33']
```

`split` raises `ValueError` unless the number of parts is positive.
`allocate` raises `ValueError` if no ratios are given, if a ratio is negative,
or if the ratios add up to more than a signed 64-bit integer can hold. When
every ratio is zero, every part is zero.

## Currencies

```python
from moneyfold.currency import add_currency, get_currency, get_currency_by_numeric_code

add_currency("BTC", "₿", "$1", ".", ",", 8)
get_currency("eur").grapheme              # '€'
get_currency_by_numeric_code("986").code  # 'BRL'
get_currency("NOPE")                      # None
```

`add_currency` registers a currency for the running process, replacing any
currency with the same code. `resolve_currency(code)` returns the registered
currency or the fallback described above.

A `Formatter` formats a raw amount by itself. In the template, `1` stands for
the number and `$` for the symbol:

```python
from moneyfold.formatter import Formatter

Formatter(2, ".", ",", "€", "1 $").format(123456)  # '1,234.56 €'
Formatter(2, ".", ",", "€", "1 $").to_major_units(123456)  # 1234.56
```

## Storage strings and JSON

```python
from moneyfold.codec import (
    money_to_db_value, money_from_db_value, money_to_json, money_from_json,
)

money_to_db_value(Money(2550, "USD"))           # '2550|USD'
money_to_db_value(Money(-10, "USD"), "+-+")     # '-10+-+USD'
money_from_db_value("30000,IDR", ",")           # Money(30000, 'IDR')
money_to_json(Money(12345, "IQD"))              # '{"amount":12345,"currency":"IQD"}'
money_from_json('{"amount": 10012, "currency": "USD"}').display()  # '$100.12'
```

`currency_to_db_value` and `currency_from_db_value` store a currency as its
code. Malformed storage strings, and codes that are not registered, raise
`ScanError`. In JSON, missing keys default to `0` and `""`; a malformed
document, or an amount or currency of the wrong type, raises
`InvalidJSONError`. Both errors are `ValueError`s.

## What it does not do

There is no currency conversion and no exchange rates. There is no database
adapter either. The codec functions only produce and read the strings that you
store yourself.