"""
Tests for the forward and inverse Transverse Mercator projection.

pyproj is used as an independent reference for the projected values.
"""

import unittest

import numpy as np
from pyproj import Transformer

from usngrid.config import CLARKE_1866, WGS84
from usngrid.errors import InputRangeError
from usngrid.geo import BoundingBox, GeoPoint
from usngrid.projection import EQUATOR_LATITUDE, Hemisphere, TransverseMercator, UtmCoordinate, central_meridian
from usngrid.unit import Kilometer


def utm_transformer(zone, south=False):
    epsg = (32700 if south else 32600) + zone
    return Transformer.from_crs("EPSG:4326", f"EPSG:{epsg}", always_xy=True)


class TestForwardProjection(unittest.TestCase):
    """Test TransverseMercator.project."""

    def setUp(self):
        self.tm = TransverseMercator()

    def test_washington_monument(self):
        """Test a known position in zone 18."""
        utm = self.tm.project(38.8895, -77.0353)
        self.assertEqual(utm.zone_number, 18)
        self.assertEqual(utm.band_letter, "S")
        self.assertAlmostEqual(utm.easting, 323478.063, delta=0.01)
        self.assertAlmostEqual(utm.northing, 4306483.242, delta=0.01)

    def test_central_meridian(self):
        """Test that a point on the central meridian has the false easting."""
        utm = self.tm.project(45.0, -123.0)
        self.assertEqual(utm.zone_number, 10)
        self.assertAlmostEqual(utm.easting, 500000.0, places=6)
        self.assertAlmostEqual(utm.northing, 4982950.4, delta=0.01)
        self.assertEqual(central_meridian(10), -123)

    def test_southern_northing_is_negative(self):
        """Test that southern northings are signed."""
        utm = self.tm.project(-33.8568, 151.2153)
        self.assertEqual(utm.zone_number, 56)
        self.assertEqual(utm.band_letter, "H")
        self.assertLess(utm.northing, 0)
        self.assertIsNone(utm.hemisphere)

    def test_matches_pyproj(self):
        """Test projected values against pyproj over a sweep of positions."""
        rng = np.random.default_rng(1532)
        for lat, lon in zip(rng.uniform(-79.0, 83.0, 200), rng.uniform(-179.0, 179.0, 200)):
            utm = self.tm.project_with_hemisphere(lat, lon)
            south = utm.hemisphere is Hemisphere.S
            easting, northing = utm_transformer(utm.zone_number, south).transform(lon, lat)
            self.assertAlmostEqual(utm.easting, easting, delta=0.02, msg=f"{lat}, {lon}")
            self.assertAlmostEqual(utm.northing, northing, delta=0.02, msg=f"{lat}, {lon}")

    def test_forced_zone(self):
        """Test projecting into a neighbouring zone."""
        utm = self.tm.project(61.0, 5.0, zone=31)
        easting, northing = utm_transformer(31).transform(5.0, 61.0)
        self.assertEqual(utm.zone_number, 31)
        self.assertAlmostEqual(utm.easting, easting, delta=0.01)
        self.assertAlmostEqual(utm.northing, northing, delta=0.01)

    def test_outside_grid_is_undefined(self):
        """Test that latitudes outside [-80, 84] give no projection."""
        self.assertIsNone(self.tm.project(84.5, 0.0))
        self.assertIsNone(self.tm.project(-85.0, 0.0))
        self.assertIsNone(self.tm.project(91.0, 0.0))

    def test_out_of_range_longitude(self):
        """Test that longitudes outside [-180, 360] raise."""
        with self.assertRaises(InputRangeError):
            self.tm.project(0.0, 361.0)
        with self.assertRaises(InputRangeError):
            self.tm.project(0.0, -180.5)

    def test_with_hemisphere(self):
        """Test the false northing and hemisphere flag."""
        south = self.tm.project_with_hemisphere(-33.8568, 151.2153)
        self.assertIs(south.hemisphere, Hemisphere.S)
        self.assertAlmostEqual(south.northing, 6252288.753, delta=0.01)
        self.assertAlmostEqual(south.signed_northing(), -3747711.247, delta=0.01)

        north = self.tm.project_with_hemisphere(38.8895, -77.0353)
        self.assertIs(north.hemisphere, Hemisphere.N)
        self.assertIsNone(self.tm.project_with_hemisphere(85.0, 0.0))

    def test_clarke_ellipsoid_differs(self):
        """Test that the NAD27 ellipsoid shifts the projected position."""
        nad83 = TransverseMercator(WGS84).project(38.8895, -77.0353)
        nad27 = TransverseMercator(CLARKE_1866).project(38.8895, -77.0353)
        self.assertEqual(nad27.zone_number, nad83.zone_number)
        self.assertGreater(abs(nad27.northing - nad83.northing), 1.0)
        self.assertLess(abs(nad27.northing - nad83.northing), 500.0)


class TestInverseProjection(unittest.TestCase):
    """Test TransverseMercator.unproject."""

    def setUp(self):
        self.tm = TransverseMercator()

    def test_point_round_trip(self):
        """Test that unprojecting a projection gives back the position."""
        rng = np.random.default_rng(1395)
        for lat, lon in zip(rng.uniform(-79.0, 83.0, 200), rng.uniform(-179.0, 179.0, 200)):
            utm = self.tm.project(lat, lon)
            point = self.tm.unproject(utm.northing, utm.easting, utm.zone_number)
            self.assertIsInstance(point, GeoPoint)
            self.assertLess(float(point.distance_to(GeoPoint.from_deg(lat, lon))), 0.01, f"{lat}, {lon}")

    def test_matches_pyproj(self):
        """Test unprojected values against pyproj."""
        to_geo = Transformer.from_crs("EPSG:32618", "EPSG:4326", always_xy=True)
        for easting, northing in ((323478.0, 4306483.0), (250000.0, 3600000.0), (700000.0, 5000000.0)):
            lon, lat = to_geo.transform(easting, northing)
            point = self.tm.unproject(northing, easting, 18)
            self.assertAlmostEqual(point.lat, lat, delta=1e-7)
            self.assertAlmostEqual(point.lon, lon, delta=1e-7)

    def test_equator_substitution(self):
        """Test that a latitude of exactly zero is reported as 0.001."""
        point = self.tm.unproject(0.0, 500000.0, 31)
        self.assertAlmostEqual(point.lat, EQUATOR_LATITUDE, places=12)
        self.assertAlmostEqual(point.lon, 3.0)

    def test_cell_bounding_box(self):
        """Test the bounding box of a cell up to 100 km."""
        box = self.tm.unproject(4306480.0, 323470.0, 18, accuracy=10)
        self.assertIsInstance(box, BoundingBox)
        self.assertTrue(box.is_complete)
        self.assertGreater(box.north, box.south)
        self.assertGreater(box.east, box.west)
        self.assertTrue(box.contains(GeoPoint.from_deg(38.8895, -77.0353)))

    def test_accuracy_as_unit(self):
        """Test that the accuracy may be given as a distance unit."""
        plain = self.tm.unproject(4300000.0, 300000.0, 18, accuracy=1000)
        unit = self.tm.unproject(4300000.0, 300000.0, 18, accuracy=Kilometer(1))
        self.assertEqual(plain, unit)

    def test_large_cell_uses_tables(self):
        """Test that cells over 100 km are answered from the band and zone tables."""
        box = self.tm.unproject(4306483.0, 323478.0, 18, accuracy=1000000)
        self.assertEqual(box, BoundingBox(north=40.0, south=32.0, east=-72.0, west=-78.0))

    def test_large_cell_unknown_band(self):
        """Test that an unknown band leaves only the longitudes set."""
        box = self.tm.unproject(9400000.0, 500000.0, 18, accuracy=1000000)
        self.assertEqual(box, BoundingBox(east=-72.0, west=-78.0))

    def test_with_hemisphere(self):
        """Test unprojecting a false northing with an S flag."""
        utm = self.tm.project_with_hemisphere(-33.8568, 151.2153)
        point = self.tm.unproject_with_hemisphere(utm.northing, utm.easting, utm.zone_number, hemisphere="S")
        self.assertAlmostEqual(point.lat, -33.8568, places=6)
        self.assertAlmostEqual(point.lon, 151.2153, places=6)

        same = self.tm.unproject_utm(utm)
        self.assertAlmostEqual(same.lat, point.lat)


class TestUtmCoordinate(unittest.TestCase):
    """Test UtmCoordinate class."""

    def test_with_hemisphere_is_idempotent(self):
        """Test that an already flagged coordinate is returned unchanged."""
        utm = UtmCoordinate(500000.0, 100.0, 31, "N", Hemisphere.N)
        self.assertIs(utm.with_hemisphere(), utm)

    def test_str(self):
        """Test the string form."""
        utm = UtmCoordinate(323478.0, 4306483.0, 18, "S", Hemisphere.N)
        self.assertEqual(str(utm), "18S 323478.000mE 4306483.000mN N")


if __name__ == '__main__':
    unittest.main()
