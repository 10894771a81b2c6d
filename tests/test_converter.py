"""
Tests for the Converter facade.
"""

import unittest

from usngrid import Converter, Datum, GeoPoint, ParseResult, UsngCoordinate
from usngrid.config import CLARKE_1866, WGS84
from usngrid.errors import GridReferenceParseError, InputRangeError
from usngrid.projection import Hemisphere
from usngrid.unit import Meter

MONUMENT = (38.8895, -77.0353)


class TestConverterDatum(unittest.TestCase):
    """Test the datum a Converter is bound to."""

    def test_default_datum(self):
        """Test that the default datum is NAD83 on the WGS84 ellipsoid."""
        converter = Converter()
        self.assertIs(converter.datum, Datum.NAD83)
        self.assertIs(converter.ellipsoid, WGS84)

    def test_datum_by_name(self):
        """Test selecting a datum by case-insensitive name."""
        converter = Converter("nad27")
        self.assertIs(converter.datum, Datum.NAD27)
        self.assertIs(converter.ellipsoid, CLARKE_1866)
        self.assertIs(Converter("WGS84").datum, Datum.NAD83)
        self.assertIs(Converter(None).datum, Datum.NAD83)

    def test_repr(self):
        """Test the representation names the datum."""
        self.assertEqual(repr(Converter(Datum.NAD27)), "Converter(NAD27)")


class TestConverterEncode(unittest.TestCase):
    """Test the encoding operations of Converter."""

    def setUp(self):
        self.converter = Converter()

    def test_encode(self):
        """Test USNG and MGRS strings of a known position."""
        self.assertEqual(self.converter.encode(*MONUMENT, 5), "18S UJ 2347 0648")
        self.assertEqual(self.converter.encode_mgrs(*MONUMENT, 5), "18SUJ23470648")
        self.assertEqual(self.converter.encode(*MONUMENT), "18S")

    def test_encode_on_nad27(self):
        """Test that a NAD27 converter projects on the Clarke ellipsoid."""
        self.assertEqual(Converter(Datum.NAD27).encode(*MONUMENT, 6), "18S UJ 23474 06276")

    def test_encode_nad27(self):
        """Test that the NAD27 string is the same whatever the converter's datum."""
        expected = "18S UJ 2347 0627 (NAD27)"
        self.assertEqual(self.converter.encode_nad27(*MONUMENT, 5), expected)
        self.assertEqual(Converter(Datum.NAD27).encode_nad27(*MONUMENT, 5), expected)

    def test_encode_bounding_box(self):
        """Test encoding the center of a box."""
        self.assertEqual(self.converter.encode_bounding_box(40.0, 32.0, -72.0, -78.0), "18S")

    def test_outside_grid(self):
        """Test that positions outside the grid raise."""
        with self.assertRaises(InputRangeError):
            self.converter.encode(84.5, 0.0, 3)


class TestConverterDecode(unittest.TestCase):
    """Test the decoding operations of Converter."""

    def setUp(self):
        self.converter = Converter()

    def test_decode(self):
        """Test decoding to a cell and to its center."""
        box = self.converter.decode("18S UJ 2347 0648")
        self.assertTrue(box.contains(GeoPoint.from_deg(*MONUMENT)))
        point = self.converter.decode("18S UJ 2347 0648", center=True)
        self.assertLess(float(point.distance_to(GeoPoint.from_deg(*MONUMENT))), 10.0)

    def test_decode_malformed(self):
        """Test that malformed text decodes to None."""
        self.assertIsNone(self.converter.decode(""))
        self.assertIsNone(self.converter.decode_to_utm("18S UJ 234 06"))

    def test_decode_to_utm(self):
        """Test the UTM corner of a reference."""
        utm = self.converter.decode_to_utm("18S UJ 2347 0648")
        self.assertEqual((utm.zone_number, utm.easting, utm.northing), (18, 323470.0, 4306480.0))
        self.assertIs(utm.hemisphere, Hemisphere.N)

    def test_parse(self):
        """Test the tolerant and strict parsers."""
        result = self.converter.parse("18S UJ 2347 0648")
        self.assertIsInstance(result, ParseResult)
        self.assertTrue(result.ok)
        self.assertFalse(self.converter.parse("18S UJ 234 06").ok)

        self.assertIsInstance(self.converter.parse_usng("18S UJ 2347 0648"), UsngCoordinate)
        self.assertEqual(self.converter.parse_mgrs("18SUJ23470648").easting, 2347)
        with self.assertRaises(GridReferenceParseError):
            self.converter.parse_usng("18SUJ23470648")

    def test_nad27_round_trip(self):
        """Test encoding and decoding on the NAD27 ellipsoid."""
        converter = Converter(Datum.NAD27)
        point = converter.decode(converter.encode(*MONUMENT, 6), center=True)
        self.assertLess(float(point.distance_to(GeoPoint.from_deg(*MONUMENT))), 1.0)


class TestConverterHelpers(unittest.TestCase):
    """Test the zone, projection and distance helpers of Converter."""

    def setUp(self):
        self.converter = Converter()

    def test_zone_exceptions(self):
        """Test the Norway and Svalbard zone exceptions."""
        self.assertEqual(self.converter.resolve_zone_number(61.0, 5.0), 32)
        self.assertEqual(self.converter.resolve_zone_number(75.0, 10.0), 33)
        self.assertEqual(self.converter.band_letter(38.8895), "S")

    def test_project_round_trip(self):
        """Test projecting and unprojecting through the converter."""
        utm = self.converter.project_with_hemisphere(-33.8568, 151.2153)
        point = self.converter.unproject_with_hemisphere(utm.northing, utm.easting, utm.zone_number, hemisphere=utm.hemisphere)
        self.assertAlmostEqual(point.lat, -33.8568, places=6)
        self.assertAlmostEqual(point.lon, 151.2153, places=6)

        signed = self.converter.project(-33.8568, 151.2153)
        same = self.converter.unproject(signed.northing, signed.easting, signed.zone_number)
        self.assertAlmostEqual(same.lat, point.lat, places=9)

    def test_great_circle_distance(self):
        """Test the distance of one degree along the equator."""
        distance = self.converter.great_circle_distance(0.0, 0.0, 0.0, 1.0)
        self.assertIsInstance(distance, Meter)
        self.assertEqual(round(float(distance)), 111195)


if __name__ == '__main__':
    unittest.main()
