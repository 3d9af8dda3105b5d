"""Tests for raw-integer modular arithmetic."""

import random

import pytest

from finite_element.errors import DivisionByZeroError
from finite_element.field import modular

M127 = 2**127 - 1


def test_rem_euclid_positive():
    assert modular.rem_euclid(17, 5) == 2


def test_rem_euclid_negative_dividend():
    assert modular.rem_euclid(-5, 13) == 8
    assert modular.rem_euclid(-13, 13) == 0


def test_rem_euclid_negative_divisor():
    assert modular.rem_euclid(7, -5) == 2
    assert modular.rem_euclid(-7, -5) == 3


def test_rem_euclid_zero_modulus():
    with pytest.raises(ZeroDivisionError):
        modular.rem_euclid(3, 0)


def test_add_mod_wrap():
    assert modular.add_mod(7, 12, 13) == 6
    assert modular.add_mod(M127 - 1, M127 - 1, M127) == M127 - 2


def test_add_mod_zero():
    assert modular.add_mod(0, 0, 13) == 0
    assert modular.add_mod(5, 0, 13) == 5


def test_sub_mod_underflow():
    assert modular.sub_mod(7, 12, 13) == 8
    assert modular.sub_mod(0, 1, M127) == M127 - 1


def test_mul_mod_wrap():
    a = M127 - 1
    assert modular.mul_mod(a, a, M127) == 1


class TestPowMod:
    def test_small(self):
        assert modular.pow_mod(3, 3, 13) == 1
        assert modular.pow_mod(2, 10, 1000) == 24

    def test_zero_exponent(self):
        assert modular.pow_mod(5, 0, 13) == 1
        assert modular.pow_mod(0, 0, 13) == 1

    def test_modulus_one(self):
        assert modular.pow_mod(5, 3, 1) == 0
        assert modular.pow_mod(5, 0, 1) == 0

    def test_base_larger_than_modulus(self):
        assert modular.pow_mod(20, 2, 13) == 10

    def test_matches_builtin(self):
        rng = random.Random(1234)
        for _ in range(200):
            m = rng.randrange(2, 10**6)
            b = rng.randrange(0, 10**9)
            e = rng.randrange(0, 10**9)
            assert modular.pow_mod(b, e, m) == pow(b, e, m)

    def test_large_modulus(self):
        rng = random.Random(99)
        for _ in range(20):
            b = rng.randrange(M127)
            e = rng.randrange(2**200)
            assert modular.pow_mod(b, e, M127) == pow(b, e, M127)

    def test_fermat(self):
        for a in range(1, 31):
            assert modular.pow_mod(a, 30, 31) == 1

    def test_negative_exponent_rejected(self):
        with pytest.raises(ValueError):
            modular.pow_mod(3, -1, 13)

    def test_bad_modulus_rejected(self):
        with pytest.raises(ValueError):
            modular.pow_mod(3, 2, 0)


def test_inv_mod():
    for a in range(1, 13):
        assert modular.mul_mod(a, modular.inv_mod(a, 13), 13) == 1


def test_inv_mod_large():
    a = 12345
    assert modular.mul_mod(a, modular.inv_mod(a, M127), M127) == 1


def test_inv_mod_zero():
    with pytest.raises(DivisionByZeroError):
        modular.inv_mod(0, 13)
    with pytest.raises(ZeroDivisionError):
        modular.inv_mod(26, 13)


class TestIsProbablePrime:
    def test_small_primes(self):
        primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 97]
        for p in primes:
            assert modular.is_probable_prime(p)

    def test_small_composites(self):
        for n in [0, 1, 4, 6, 9, 15, 21, 25, 49, 91, 100]:
            assert not modular.is_probable_prime(n)

    def test_negative(self):
        assert not modular.is_probable_prime(-7)

    def test_carmichael(self):
        for n in [561, 1105, 1729, 2465, 2821, 6601, 8911]:
            assert not modular.is_probable_prime(n)

    def test_strong_pseudoprime_base_2(self):
        # 2047 = 23 * 89 passes the base-2 test alone
        assert not modular.is_probable_prime(2047)

    def test_large_primes(self):
        assert modular.is_probable_prime(M127)
        assert modular.is_probable_prime(2**61 - 1)
        assert modular.is_probable_prime(2**255 - 19)

    def test_large_composite(self):
        assert not modular.is_probable_prime((2**61 - 1) * (2**31 - 1))
        assert not modular.is_probable_prime(2**128 + 1)

    def test_matches_trial_division(self):
        def trial(n):
            if n < 2:
                return False
            d = 2
            while d * d <= n:
                if n % d == 0:
                    return False
                d += 1
            return True

        for n in range(2000):
            assert modular.is_probable_prime(n) == trial(n)
