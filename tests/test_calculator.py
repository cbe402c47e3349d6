import pytest

from moneyfold import calculator


@pytest.mark.parametrize("a,b", [(5, 5), (10, -5), (0, 0), (-3, -4)])
def test_add_and_subtract_are_inverse(a, b):
    assert calculator.subtract(calculator.add(a, b), b) == a


@pytest.mark.parametrize("a,b", [(5, 5), (10, -5), (-7, 3)])
def test_add_is_commutative(a, b):
    assert calculator.add(a, b) == calculator.add(b, a)


@pytest.mark.parametrize("a,m", [(5, 5), (10, 5), (1, -1), (1, 0)])
def test_multiply_matches_product(a, m):
    assert calculator.multiply(a, m) == a * m


@pytest.mark.parametrize(
    "a,d", [(7, 2), (-7, 2), (7, -2), (-7, -2), (100, 3), (-101, 4), (-2, 3), (0, 5)]
)
def test_divide_and_modulus_reconstruct_dividend(a, d):
    q = calculator.divide(a, d)
    r = calculator.modulus(a, d)
    assert q * d + r == a
    assert abs(r) < abs(d)


@pytest.mark.parametrize("a,d", [(-7, 2), (-101, 4), (-2, 3), (7, -2)])
def test_divide_truncates_toward_zero(a, d):
    q = calculator.divide(a, d)
    assert abs(q) == abs(a) // abs(d)
    r = calculator.modulus(a, d)
    assert r == 0 or (r < 0) == (a < 0)


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        calculator.divide(10, 0)


def test_modulus_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        calculator.modulus(10, 0)


@pytest.mark.parametrize("a,r", [(0, 50), (0, 0)])
def test_allocate_zero_amount(a, r):
    assert calculator.allocate(a, r, 100) == 0


def test_allocate_zero_shares():
    assert calculator.allocate(100, 50, 0) == 0


@pytest.mark.parametrize("a,s", [(100, 90), (-101, 7), (5, 100)])
def test_allocate_full_ratio_returns_amount(a, s):
    assert calculator.allocate(a, s, s) == a


@pytest.mark.parametrize("a", [-5, -1, 0, 1, 5])
def test_absolute_and_negative(a):
    assert calculator.absolute(a) >= 0
    assert calculator.absolute(calculator.negative(a)) == calculator.absolute(a)
    assert calculator.negative(calculator.negative(a)) == a


@pytest.mark.parametrize(
    "amount,precision,expected",
    [
        (125, 2, 100),
        (175, 2, 200),
        (349, 2, 300),
        (351, 2, 400),
        (0, 2, 0),
        (-1, 2, 0),
        (-75, 2, -100),
        (12555, 3, 13000),
    ],
)
def test_round_to_precision(amount, precision, expected):
    assert calculator.round_to_precision(amount, precision) == expected


@pytest.mark.parametrize("amount", [1, 49, 50, 99, 1234, -1234, -50])
def test_round_result_is_multiple_of_factor(amount):
    rounded = calculator.round_to_precision(amount, 2)
    assert rounded % 100 == 0
    assert abs(rounded - amount) <= 50


def test_round_negative_precision_raises():
    with pytest.raises(ValueError):
        calculator.round_to_precision(10, -1)