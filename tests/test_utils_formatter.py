import io
import unittest
from contextlib import redirect_stdout

from loan_schedule.engine import compute
from loan_schedule.formatter import (
    EMPTY_SCHEDULE_MESSAGE,
    format_currency,
    format_number,
    payments_label,
    print_comparison,
    print_schedule,
    print_summary,
)
from loan_schedule.utils import parse_amount, parse_rate, parse_term, years_label


def _captured(func, *args, **kwargs) -> str:
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        func(*args, **kwargs)
    return buffer.getvalue()


class TestParsing(unittest.TestCase):
    def test_parse_amount(self):
        self.assertEqual(parse_amount("250000"), 250_000.0)
        self.assertEqual(parse_amount(" 250,000 "), 250_000.0)
        self.assertEqual(parse_amount("250k"), 250_000.0)
        self.assertEqual(parse_amount("$1.5M"), 1_500_000.0)
        self.assertEqual(parse_amount("-$5"), -5.0)
        self.assertEqual(parse_amount("- $1,200"), -1200.0)
        self.assertEqual(parse_amount("+$2k"), 2000.0)

    def test_parse_amount_rejects_text(self):
        with self.assertRaises(ValueError):
            parse_amount("a lot")
        with self.assertRaises(ValueError):
            parse_amount("")

    def test_parse_rate(self):
        self.assertEqual(parse_rate("4.5"), 4.5)
        self.assertEqual(parse_rate("4.5 %"), 4.5)
        self.assertEqual(parse_rate("0"), 0.0)
        with self.assertRaises(ValueError):
            parse_rate("four")

    def test_parse_term(self):
        self.assertEqual(parse_term("360"), 360)
        self.assertEqual(parse_term("30y"), 360)
        self.assertEqual(parse_term("15 years"), 180)
        with self.assertRaises(ValueError):
            parse_term("12.5")

    def test_years_label(self):
        self.assertEqual(years_label(360), "30 years")
        self.assertEqual(years_label(120), "10 years")
        self.assertEqual(years_label(None), "")
        self.assertEqual(years_label(0), "")


class TestFormatting(unittest.TestCase):
    def test_format_currency(self):
        self.assertEqual(format_currency(1266.7133), "$1,266.71")
        self.assertEqual(format_currency(250000), "$250,000.00")
        self.assertEqual(format_currency(0), "$0.00")
        self.assertEqual(format_currency(-12.5), "-$12.50")
        self.assertEqual(format_currency(-1e-12), "$0.00")

    def test_format_number(self):
        self.assertEqual(format_number(1234), "1,234")
        self.assertEqual(format_number(360), "360")

    def test_payments_label(self):
        self.assertEqual(payments_label(1200), "1,200 payments")
        self.assertEqual(payments_label(0), "Enter loan details to see schedule")

    def test_print_summary(self):
        summary, _ = compute(1200, 0, 12)
        output = _captured(print_summary, summary)
        self.assertIn("Monthly Payment", output)
        self.assertIn("$100.00", output)
        self.assertIn("$1,200.00", output)

    def test_print_schedule_truncates(self):
        _, records = compute(250_000, 4.5, 360)
        output = _captured(print_schedule, records, max_rows=120)
        self.assertIn("360 payments", output)
        self.assertIn("Showing first 120 rows. 240 more rows truncated.", output)
        self.assertIn("$937.50", output)

    def test_print_schedule_empty(self):
        output = _captured(print_schedule, ())
        self.assertIn(EMPTY_SCHEDULE_MESSAGE, output)

    def test_print_comparison(self):
        s1, _ = compute(1200, 0, 12)
        s2, _ = compute(1200, 0, 6)
        output = _captured(print_comparison, s1, s2)
        self.assertIn("monthly_payment", output)
        self.assertIn("100.00", output)


if __name__ == "__main__":
    unittest.main()
