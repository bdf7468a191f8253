# tests/test_arith.py

import random

from ethiocal.core.arith import mod, quotient


def test_floor_semantics_on_negatives():
    assert quotient(-1, 4) == -1
    assert mod(-1, 4) == 3
    assert quotient(-7, 2) == -4
    assert mod(-7, 2) == 1
    assert quotient(-8, 4) == -2
    assert mod(-8, 4) == 0


def test_mod_non_negative_for_positive_divisor():
    random.seed(42)
    for _ in range(10000):
        i = random.randint(-10**7, 10**7)
        j = random.randint(1, 146097)
        r = mod(i, j)
        assert 0 <= r < j
        assert quotient(i, j) * j + r == i
