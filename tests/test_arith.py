import math

import pytest

from dsalgo.arith import gcd, lcm


def test_known_gcd():
    assert gcd(12, 18) == 6


def test_gcd_matches_math():
    for a in range(0, 60):
        for b in range(0, 60):
            assert gcd(a, b) == math.gcd(a, b)


def test_gcd_is_symmetric():
    for a, b in [(7, 21), (100, 75), (13, 17)]:
        assert gcd(a, b) == gcd(b, a)


def test_lcm_matches_math():
    for a in range(1, 40):
        for b in range(0, 40):
            assert lcm(a, b) == math.lcm(a, b)


def test_lcm_times_gcd_is_product():
    for a, b in [(4, 6), (21, 6), (9, 28)]:
        assert lcm(a, b) * gcd(a, b) == a * b


def test_lcm_of_zeros_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)