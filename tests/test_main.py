"""
Unit tests for the command line entry point
"""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from discounts.__main__ import main


class TestMain(unittest.TestCase):
    """Test cases for argument handling and output"""

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(argv)
        return code, out.getvalue()

    def test_prints_discount(self):
        code, output = self._run(["501", "bronze"])
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "Discount: 50.10")

    def test_category_defaults_to_bronze(self):
        code, output = self._run(["100,01"])
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "Discount: 5.00")

    def test_negative_amount(self):
        code, output = self._run(["-50", "gold"])
        self.assertEqual(code, 0)
        self.assertEqual(output.strip(), "Discount: 0.00")

    @patch('discounts.__main__.calculate_discount', return_value=12.5)
    def test_passes_parsed_amount_and_category(self, mock_calculate):
        code, output = self._run(["1000", "Gold"])
        mock_calculate.assert_called_once_with(1000.0, "Gold")
        self.assertEqual(output.strip(), "Discount: 12.50")

    def test_invalid_amount_exits_with_usage_error(self):
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as cm:
            main(["ten", "gold"])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("Invalid amount", err.getvalue())


if __name__ == '__main__':
    unittest.main()
