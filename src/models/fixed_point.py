# src/models/fixed_point.py

"""Two-decimal fixed-point value used for order-book unit prices.

A :class:`FixedPoint` stores an integer count of hundredths
(``raw``), so ``1.23`` is held as ``123``.  Equality, hashing and
ordering all compare ``raw`` directly.

Rounding rule: :meth:`FixedPoint.from_float` rounds ``value * 100``
half away from zero (``0.125`` -> ``0.13``, ``-0.125`` -> ``-0.13``).
Note that ``1.005 * 100`` is ``100.49999999999999`` in binary floating
point, so ``from_float(1.005)`` is ``1.00``.

``mul`` and ``div`` truncate toward zero after rescaling.  This is a
lossy convention kept for compatibility with existing snapshot
consumers, not true decimal arithmetic.

Overflow is not checked.  Python integers never wrap, but values are
expected to fit a signed 64-bit range so that other readers of the
snapshot files agree on them.
"""

import math
from dataclasses import dataclass

from src.errors import DivisionByZeroError

SCALE: int = 100


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot convert non-finite value {value!r}")
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact for doubles
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero (not flooring)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


@dataclass(frozen=True, order=True)
class FixedPoint:
    """A quantity with exactly two fractional digits."""

    raw: int

    @classmethod
    def from_float(cls, value: float) -> "FixedPoint":
        """Build from a float, rounding to the nearest hundredth."""
        return cls(_round_half_away(value * SCALE))

    @classmethod
    def from_raw_units(cls, raw: int) -> "FixedPoint":
        """Build directly from hundredths, with no rounding.

        Raises:
            TypeError: if *raw* is not an integer.
        """
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(
                f"Raw units must be an int, got {type(raw).__name__}"
            )
        return cls(raw)

    def to_float(self) -> float:
        return self.raw / SCALE

    def raw_units(self) -> int:
        return self.raw

    # ── Named arithmetic ──────────────────────────────────

    @staticmethod
    def add(a: "FixedPoint", b: "FixedPoint") -> "FixedPoint":
        """Exact sum of two values."""
        return FixedPoint(a.raw + b.raw)

    @staticmethod
    def sub(a: "FixedPoint", b: "FixedPoint") -> "FixedPoint":
        """Exact difference of two values."""
        return FixedPoint(a.raw - b.raw)

    @staticmethod
    def mul(a: "FixedPoint", b: "FixedPoint") -> "FixedPoint":
        """Product rescaled to two decimals, truncated toward zero."""
        return FixedPoint(_trunc_div(a.raw * b.raw, SCALE))

    @staticmethod
    def div(a: "FixedPoint", b: "FixedPoint") -> "FixedPoint":
        """Quotient rescaled to two decimals, truncated toward zero.

        Raises:
            DivisionByZeroError: if ``b`` is zero.
        """
        if b.raw == 0:
            raise DivisionByZeroError(f"Cannot divide {a} by zero")
        return FixedPoint(_trunc_div(a.raw * SCALE, b.raw))

    # ── Operators ─────────────────────────────────────────

    def __add__(self, other: "FixedPoint") -> "FixedPoint":
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return FixedPoint.add(self, other)

    def __sub__(self, other: "FixedPoint") -> "FixedPoint":
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return FixedPoint.sub(self, other)

    def __mul__(self, other: "FixedPoint") -> "FixedPoint":
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return FixedPoint.mul(self, other)

    def __truediv__(self, other: "FixedPoint") -> "FixedPoint":
        if not isinstance(other, FixedPoint):
            return NotImplemented
        return FixedPoint.div(self, other)

    def __str__(self) -> str:
        sign = "-" if self.raw < 0 else ""
        whole, cents = divmod(abs(self.raw), SCALE)
        return f"{sign}{whole}.{cents:02d}"
