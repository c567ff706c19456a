# tests/test_fixed_point.py

"""Tests for the FixedPoint two-decimal value."""

import unittest

from src.errors import BazaarFeedError, DivisionByZeroError
from src.models.fixed_point import FixedPoint


class TestConstruction(unittest.TestCase):
    """from_float / from_raw_units behaviour."""

    def test_from_float_stores_hundredths(self) -> None:
        """1.23 is stored as 123 raw units."""
        self.assertEqual(FixedPoint.from_float(1.23).raw_units(), 123)

    def test_from_raw_units_no_rounding(self) -> None:
        """Raw construction keeps the integer as-is."""
        self.assertEqual(FixedPoint.from_raw_units(12345).raw_units(), 12345)
        self.assertEqual(FixedPoint.from_raw_units(-7).raw_units(), -7)

    def test_from_raw_units_rejects_non_int(self) -> None:
        """Floats and bools are not silently truncated into raw units."""
        for raw in (1.99, 100.0, "100", True):
            with self.subTest(raw=raw):
                with self.assertRaises(TypeError):
                    FixedPoint.from_raw_units(raw)  # type: ignore[arg-type]

    def test_round_trip_to_float(self) -> None:
        """to_float returns the value rounded to hundredths."""
        cases = {
            4.2: 4.2,
            3.14159: 3.14,
            2.999: 3.0,
            -8.456: -8.46,
            0.0: 0.0,
            1186070.0: 1186070.0,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertAlmostEqual(
                    FixedPoint.from_float(source).to_float(), expected,
                )

    def test_1_005_rounds_down(self) -> None:
        """1.005 * 100 is 100.4999... in binary, so it rounds to 1.00."""
        self.assertEqual(FixedPoint.from_float(1.005).raw_units(), 100)

    def test_exact_half_rounds_away_from_zero(self) -> None:
        """0.125 * 100 is exactly 12.5 and rounds away from zero."""
        self.assertEqual(FixedPoint.from_float(0.125).raw_units(), 13)
        self.assertEqual(FixedPoint.from_float(-0.125).raw_units(), -13)
        self.assertEqual(FixedPoint.from_float(0.005).raw_units(), 1)

    def test_same_float_parses_identically(self) -> None:
        """Two conversions of one float are equal and hash equal."""
        a = FixedPoint.from_float(4.25)
        b = FixedPoint.from_float(4.25)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_just_below_half_rounds_down(self) -> None:
        """The largest double below 0.5 rounds to 0, not 1."""
        below_half = 0.49999999999999994
        self.assertLess(below_half, 0.5)
        self.assertEqual(FixedPoint.from_float(below_half / 100).raw_units(), 0)
        self.assertEqual(
            FixedPoint.from_float(-below_half / 100).raw_units(), 0
        )

    def test_large_whole_values_not_bumped(self) -> None:
        """Odd whole numbers above 2**52 keep their exact value."""
        value = 4503599627370497.0 / 100
        expected = int(value * 100)
        self.assertEqual(FixedPoint.from_float(value).raw_units(), expected)
        self.assertEqual(
            FixedPoint.from_float(-value).raw_units(), -expected
        )

    def test_non_finite_rejected(self) -> None:
        """NaN and infinity have no fixed-point representation."""
        for value in (float("nan"), float("inf"), float("-inf")):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    FixedPoint.from_float(value)


class TestArithmetic(unittest.TestCase):
    """Named operations and their operator forms."""

    def test_add_is_exact(self) -> None:
        """add sums raw units directly."""
        a = FixedPoint.from_float(0.1)
        b = FixedPoint.from_float(0.2)
        total = FixedPoint.add(a, b)
        self.assertEqual(total.raw_units(), a.raw_units() + b.raw_units())
        self.assertEqual(total, FixedPoint.from_raw_units(30))

    def test_sub_is_exact(self) -> None:
        """sub subtracts raw units directly."""
        a = FixedPoint.from_raw_units(150)
        b = FixedPoint.from_raw_units(275)
        self.assertEqual(FixedPoint.sub(a, b).raw_units(), -125)

    def test_mul_one_by_one(self) -> None:
        """1.00 * 1.00 == 1.00."""
        one = FixedPoint.from_raw_units(100)
        self.assertEqual(FixedPoint.mul(one, one).raw_units(), 100)

    def test_mul_truncates_toward_zero(self) -> None:
        """0.15 * 0.15 = 0.0225 truncates to 0.02, -0.0225 to -0.02."""
        a = FixedPoint.from_raw_units(15)
        self.assertEqual(FixedPoint.mul(a, a).raw_units(), 2)
        neg = FixedPoint.from_raw_units(-15)
        self.assertEqual(FixedPoint.mul(neg, a).raw_units(), -2)

    def test_div_truncates_toward_zero(self) -> None:
        """1.00 / 3.00 = 0.33 and -1.00 / 3.00 = -0.33 (not -0.34)."""
        one = FixedPoint.from_raw_units(100)
        three = FixedPoint.from_raw_units(300)
        self.assertEqual(FixedPoint.div(one, three).raw_units(), 33)
        minus_one = FixedPoint.from_raw_units(-100)
        self.assertEqual(FixedPoint.div(minus_one, three).raw_units(), -33)

    def test_div_by_zero_raises(self) -> None:
        """Division by a zero value raises DivisionByZeroError."""
        zero = FixedPoint.from_raw_units(0)
        for raw in (0, 1, -250, 10**9):
            with self.subTest(raw=raw):
                with self.assertRaises(DivisionByZeroError):
                    FixedPoint.div(FixedPoint.from_raw_units(raw), zero)

    def test_div_by_zero_is_zero_division_error(self) -> None:
        """The error is catchable as ZeroDivisionError and the base error."""
        zero = FixedPoint.from_raw_units(0)
        with self.assertRaises(ZeroDivisionError):
            FixedPoint.from_raw_units(1) / zero
        with self.assertRaises(BazaarFeedError):
            FixedPoint.from_raw_units(1) / zero

    def test_operators_delegate(self) -> None:
        """+ - * / match the named operations."""
        a = FixedPoint.from_raw_units(420)
        b = FixedPoint.from_raw_units(310)
        self.assertEqual(a + b, FixedPoint.add(a, b))
        self.assertEqual(a - b, FixedPoint.sub(a, b))
        self.assertEqual(a * b, FixedPoint.mul(a, b))
        self.assertEqual(a / b, FixedPoint.div(a, b))

    def test_ordering_uses_raw_units(self) -> None:
        """Comparisons follow raw units."""
        low = FixedPoint.from_raw_units(99)
        high = FixedPoint.from_raw_units(100)
        self.assertLess(low, high)
        self.assertEqual(max(low, high), high)
        self.assertEqual(sorted([high, low]), [low, high])


class TestDisplay(unittest.TestCase):
    """String rendering with exactly two decimals."""

    def test_two_decimals(self) -> None:
        """Values always render with two fractional digits."""
        cases = {
            123: "1.23",
            1230: "12.30",
            5: "0.05",
            0: "0.00",
            -5: "-0.05",
            -1234: "-12.34",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                self.assertEqual(
                    str(FixedPoint.from_raw_units(raw)), expected,
                )


if __name__ == "__main__":
    unittest.main()
