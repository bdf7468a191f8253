"""
ethiocal.core.arith
-------------------
Floor-division primitives shared by every calendar formula.

Years and day counts go negative before the epochs, so all formulas use
division rounded toward negative infinity. Python's ``//`` and ``%`` already
floor; these names keep the formulas readable next to their derivations.
"""

from __future__ import annotations


def quotient(i: int, j: int) -> int:
    """floor(i / j)."""
    return i // j


def mod(i: int, j: int) -> int:
    """i - j * floor(i / j); never negative for j > 0."""
    return i - j * quotient(i, j)
