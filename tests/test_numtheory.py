import pytest

from cipherkit.numtheory import NO_INVERSE_MESSAGE, extended_gcd, main, mod_inverse


@pytest.mark.parametrize("a,b", [(240, 46), (17, 5), (5, 17), (1, 1), (99, 78), (7, 0)])
def test_extended_gcd_bezout_identity(a, b):
    g, x, y = extended_gcd(a, b)
    assert a * x + b * y == g
    if a or b:
        assert a % g == 0 and b % g == 0


def test_extended_gcd_with_zero_second_argument():
    assert extended_gcd(12, 0) == (12, 1, 0)


def test_extended_gcd_finds_gcd():
    g, _, _ = extended_gcd(240, 46)
    assert g == 2


@pytest.mark.parametrize("a,m", [(3, 7), (10, 17), (1, 2), (65537, 3120), (12, 25)])
def test_mod_inverse_is_inverse(a, m):
    inv = mod_inverse(a, m)
    assert 0 <= inv < m
    assert (a * inv) % m == 1 % m


def test_mod_inverse_known_value():
    assert mod_inverse(3, 11) == 4


@pytest.mark.parametrize("a,m", [(4, 8), (6, 9), (0, 5)])
def test_mod_inverse_missing_raises(a, m):
    with pytest.raises(ValueError):
        mod_inverse(a, m)


def test_mod_inverse_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        mod_inverse(1, 0)


def test_main_prints_inverse(capsys):
    assert main(["10", "17"]) == 0
    assert capsys.readouterr().out == f"{mod_inverse(10, 17)}\n"


def test_main_reports_missing_inverse(capsys):
    assert main(["4", "8"]) == 0
    assert capsys.readouterr().out == NO_INVERSE_MESSAGE + "\n"


def test_main_needs_two_numbers(capsys):
    assert main(["4"]) == 2
    assert "usage" in capsys.readouterr().err