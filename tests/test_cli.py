"""
Tests for the command line interface.
"""

import io
import os
import unittest
from unittest import mock

from rich.console import Console

from usngrid.cli import main


class TestCli(unittest.TestCase):
    """Test main function."""

    def run_cli(self, *argv):
        output = io.StringIO()
        status = main(list(argv), console=Console(file=output, width=120))
        return status, output.getvalue()

    def test_encode(self):
        """Test encoding a position as USNG."""
        status, output = self.run_cli("encode", "38.8895", "-77.0353")
        self.assertEqual(status, 0)
        self.assertIn("18S UJ 2347 0648", output)
        self.assertIn("NAD83", output)

    def test_encode_mgrs(self):
        """Test encoding a position as MGRS at a chosen precision."""
        status, output = self.run_cli("encode", "38.8895", "-77.0353", "--precision", "6", "--mgrs")
        self.assertEqual(status, 0)
        self.assertIn("18SUJ2347806483", output)

    def test_decode_center(self):
        """Test decoding a reference to the center of its cell."""
        status, output = self.run_cli("decode", "18S UJ 2347 0648", "--center")
        self.assertEqual(status, 0)
        self.assertIn("Center", output)
        self.assertIn("38.889", output)
        self.assertIn("-77.035", output)
        self.assertIn("323470.000mE", output)

    def test_decode_cell(self):
        """Test decoding a reference to the edges of its cell."""
        status, output = self.run_cli("decode", "18SUJ")
        self.assertEqual(status, 0)
        for label in ("North", "South", "East", "West"):
            self.assertIn(label, output)

    def test_decode_invalid(self):
        """Test that an invalid reference prints an error and fails."""
        status, output = self.run_cli("decode", "18S UJ 234 06")
        self.assertEqual(status, 1)
        self.assertIn("Error", output)
        self.assertIn("18S UJ 234 06", output)

    def test_encode_outside_grid(self):
        """Test that a position outside the grid prints an error and fails."""
        status, output = self.run_cli("encode", "85.0", "0.0")
        self.assertEqual(status, 1)
        self.assertIn("invalid input", output)

    def test_zone(self):
        """Test the grid zone designation of a position in Norway."""
        status, output = self.run_cli("zone", "61.0", "5.0")
        self.assertEqual(status, 0)
        self.assertIn("32V", output)

    def test_bbox(self):
        """Test encoding a bounding box."""
        status, output = self.run_cli("bbox", "40.0", "32.0", "-72.0", "-78.0")
        self.assertEqual(status, 0)
        self.assertIn("Bounding Box", output)
        self.assertIn("18S", output)

    def test_datum_option(self):
        """Test selecting the NAD27 datum on the command line."""
        status, output = self.run_cli("--datum", "nad27", "encode", "38.8895", "-77.0353")
        self.assertEqual(status, 0)
        self.assertIn("18S UJ 2347 0627", output)

    def test_datum_from_environment(self):
        """Test that the datum defaults to the environment variable."""
        with mock.patch.dict(os.environ, {"USNGRID_DATUM": "NAD27"}):
            status, output = self.run_cli("encode", "38.8895", "-77.0353")
        self.assertEqual(status, 0)
        self.assertIn("NAD27", output)
        self.assertIn("18S UJ 2347 0627", output)

    def test_missing_command(self):
        """Test that a missing sub-command is a usage error."""
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                main([], console=Console(file=io.StringIO()))


if __name__ == '__main__':
    unittest.main()
