"""
Tests for speed units and speed parsing.
"""

import math
import random
import unittest

from navunits import (
    KNOT,
    KNOT_IN_MPS,
    KPH,
    KilometresPerHour,
    Knot,
    MetrePerSecond,
    MilesPerHour,
    ParseError,
    Speed,
    UnitError,
    UnknownUnitError,
    parse_speed,
)

DELTA = 0.000001

SPEED_UNITS = [MetrePerSecond, Knot, KilometresPerHour, MilesPerHour]


class TestSpeedConversions(unittest.TestCase):
    """Test conversions between speed units."""

    def test_knots(self):
        """Test m/s in knots."""
        s = MetrePerSecond(16)
        self.assertAlmostEqual(s.to_knots(), 31.101511879, delta=DELTA)

    def test_kph(self):
        """Test m/s in km/h."""
        s = MetrePerSecond(2)
        self.assertAlmostEqual(s.to_kph(), 7.2, delta=DELTA)

    def test_mps(self):
        """Test knots in m/s."""
        s = Knot(16)
        self.assertAlmostEqual(s.to_mps(), 8.23111111111, delta=DELTA)

    def test_mph(self):
        """Test mph against km/h and knots."""
        s = MilesPerHour(60)
        self.assertAlmostEqual(s.to_kph(), 96.56064, delta=DELTA)
        self.assertAlmostEqual(Knot(1).to_mph(), 1852 / 1609.344, delta=DELTA)

    def test_to_mps_is_identity(self):
        """Test that converting to m/s returns the stored value unchanged."""
        for value in (0.1, -10.4, 8.231111111111111, 1e12):
            s = Knot.from_si(value)
            self.assertEqual(s.to_mps(), value)

    def test_multiply_by_constant(self):
        """Test number times unit constant."""
        s = 16 * KNOT
        self.assertIsInstance(s, Knot)
        self.assertEqual(float(s), 16 * KNOT_IN_MPS)
        self.assertAlmostEqual((50 * KPH).to_knots(), 26.997840172786177, delta=DELTA)

    def test_speed_alias(self):
        """Test the Speed type alias covers every speed unit."""
        for unit in SPEED_UNITS:
            self.assertIsInstance(unit(1), Speed)


class TestSpeedValidity(unittest.TestCase):
    """Test NaN handling of speeds."""

    def test_nan_is_invalid(self):
        """Test that NaN propagates through every conversion."""
        s = Knot(math.nan)
        self.assertFalse(s.valid())
        for convert in (s.to_mps, s.to_kph, s.to_knots, s.to_mph):
            self.assertTrue(math.isnan(convert()))

    def test_negative_is_valid(self):
        """Test that negative speeds are valid."""
        self.assertTrue(Knot(-3).valid())


class TestSpeedNames(unittest.TestCase):
    """Test names, abbreviations and formatting."""

    def test_name_and_short(self):
        """Test unit names and abbreviations."""
        self.assertEqual(Knot(1).name(), "knots")
        self.assertEqual(Knot(1).short(), "kn")
        self.assertEqual(KilometresPerHour(1).name(), "kilometres per hour")
        self.assertEqual(MetrePerSecond(1).short(), "m/s")
        self.assertEqual(MilesPerHour(1).short(), "mph")

    def test_str(self):
        """Test string formatting in the unit's own scale."""
        self.assertEqual(str(MetrePerSecond(2.5)), "2.500000 m/s")
        self.assertEqual(str(Knot(10)), "10.000000 kn")
        self.assertEqual(str(KilometresPerHour(36)), "36.000000 km/h")


class TestParseSpeed(unittest.TestCase):
    """Test parsing of speed strings."""

    def test_parse_values(self):
        """Test values and unit types of parsed speeds."""
        cases = {
            "-10.4kn": Knot(-10.4),
            "32 m/s": MetrePerSecond(32),
            "120km/h": KilometresPerHour(120),
            "23.6\tmph": MilesPerHour(23.6),
            "10kn": Knot(10),
            "5 mi/h": MilesPerHour(5),
        }

        for text, expected in cases.items():
            with self.subTest(text=text):
                s = parse_speed(text)
                self.assertIs(type(s), type(expected))
                self.assertAlmostEqual(s.to_mps(), expected.to_mps(), delta=DELTA)
                self.assertAlmostEqual(s.to_kph(), expected.to_kph(), delta=DELTA)
                self.assertAlmostEqual(s.to_mph(), expected.to_mph(), delta=DELTA)
                self.assertAlmostEqual(s.to_knots(), expected.to_knots(), delta=DELTA)

    def test_parse_knots(self):
        """Test 16 knots in m/s."""
        s = parse_speed("16kn")
        self.assertAlmostEqual(float(s), 8.231111, delta=DELTA)
        self.assertEqual(float(s), 16 * KNOT_IN_MPS)

    def test_parse_errors(self):
        """Test that malformed speed strings raise."""
        for text in ("hello 6' world", "0.1.2m/s", "--123kn", "42"):
            with self.subTest(text=text):
                with self.assertRaises(UnitError):
                    parse_speed(text)

    def test_parse_error_kinds(self):
        """Test which error kind each failure raises."""
        with self.assertRaises(ParseError):
            parse_speed("0.1.2m/s")
        with self.assertRaises(ParseError):
            parse_speed("--123kn")
        with self.assertRaises(UnknownUnitError):
            parse_speed("42")

    def test_unknown_units(self):
        """Test that plausible but unlisted abbreviations are rejected."""
        for text in ("16 kts", "16 KN", "16 knots", "16 kph", "10 km"):
            with self.subTest(text=text):
                with self.assertRaises(UnknownUnitError):
                    parse_speed(text)


class TestSpeedRandom(unittest.TestCase):
    """Test that chained conversions preserve the speed."""

    def test_random_conversions(self):
        """Test 5 random conversions on random speeds."""
        rng = random.Random(42)

        for _ in range(10000):
            unit = rng.choice(SPEED_UNITS)
            s0 = unit(rng.random() * 200000 - 100000)
            s = s0

            # do 5 random conversions
            for _ in range(5):
                target = rng.choice(SPEED_UNITS)
                s = target(s.to(target))

            tolerance = max(DELTA, 1e-9 * abs(float(s0)))
            self.assertAlmostEqual(float(s), float(s0), delta=tolerance)
            self.assertAlmostEqual(s.to_knots(), s0.to_knots(), delta=tolerance)


if __name__ == "__main__":
    unittest.main()
