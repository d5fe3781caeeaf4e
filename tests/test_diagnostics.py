import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from layout_engine.diagnostics import YieldConfig, check_yield


class TestYieldDiagnostics(unittest.TestCase):

    def test_five_pages_short_text_flagged(self):
        with self.assertLogs('layout_engine.diagnostics.yield_check', level='WARNING') as cm:
            report = check_yield('x' * 299, page_count=5, source='scan.pdf')
        self.assertTrue(report.low_yield)
        self.assertIn('scan.pdf', cm.output[0])

    def test_one_page_not_flagged(self):
        report = check_yield('ten chars!', page_count=1)
        self.assertFalse(report.low_yield)
        self.assertEqual(report.char_count, 10)

    def test_page_gate_is_strict(self):
        self.assertFalse(check_yield('', page_count=2).low_yield)
        self.assertTrue(check_yield('', page_count=3).low_yield)

    def test_char_threshold_is_strict(self):
        self.assertFalse(check_yield('x' * 300, page_count=10).low_yield)

    def test_six_pages_150_chars(self):
        self.assertTrue(check_yield('y' * 150, page_count=6).low_yield)

    def test_custom_config(self):
        cfg = YieldConfig(min_pages=0, min_chars=5)
        self.assertTrue(check_yield('abc', page_count=1, config=cfg).low_yield)

    def test_summary(self):
        report = check_yield('abc', page_count=1)
        self.assertEqual(report.summary(), 'yield ok: 3 chars over 1 pages')


if __name__ == "__main__":
    unittest.main()
