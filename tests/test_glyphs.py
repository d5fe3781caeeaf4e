import unittest
import io
import threading
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from unittest.mock import MagicMock, patch

from layout_engine.glyphs import (
    ExtractionCancelled,
    open_document,
    page_items,
    iter_document_items,
)
from layout_engine.types import TextRun
from layout_engine.pipeline import extract_document_text


def glyph_word(text, x0, bottom, matrix_x, matrix_y):
    """pdfplumber word whose box and first-glyph matrix are both given"""
    return {
        'text': text, 'x0': x0, 'top': bottom - 10, 'bottom': bottom,
        'chars': [{'text': text[0], 'matrix': (1, 0, 0, 1, matrix_x, matrix_y)}],
    }


def glyph_page(words):
    page = MagicMock()
    page.height = 792.0
    page.extract_words.return_value = words
    return page


class TestPageItems(unittest.TestCase):

    def test_origin_from_first_glyph_matrix(self):
        page = glyph_page([glyph_word('Week', 72.0, 100.0, 72.0, 695.5)])
        items = page_items(page)
        self.assertEqual(items, [{'text': 'Week ', 'transform': [1, 0, 0, 1, 72.0, 695.5]}])
        page.extract_words.assert_called_once_with(return_chars=True)
        run = TextRun.from_item(items[0])
        self.assertEqual((run.origin_x, run.origin_y), (72.0, 695.5))

    def test_shared_baseline_different_fonts(self):
        # 16pt bold label and 9pt body drawn at y=700: box bottoms differ, baselines do not
        words = [
            glyph_word('Week', 72.0, 95.312, 72.0, 700.0),
            glyph_word('1:', 115.0, 95.312, 115.0, 700.0),
            glyph_word('Introduction', 150.0, 93.863, 150.0, 700.0),
        ]
        ys = {item['transform'][5] for item in page_items(glyph_page(words))}
        self.assertEqual(ys, {700.0})

        pdf = MagicMock()
        pdf.pages = [glyph_page(words)]
        with patch("pdfplumber.open") as mock_open:
            mock_open.return_value.__enter__.return_value = pdf
            self.assertEqual(extract_document_text("mixed_fonts.pdf"), 'Week 1: Introduction')

    def test_empty_words_skipped(self):
        page = glyph_page([{'text': '', 'x0': 0, 'bottom': 0, 'chars': []}])
        self.assertEqual(page_items(page), [])

    def test_higher_on_page_means_larger_y(self):
        page = glyph_page([
            glyph_word('Title', 10, 50, 10, 745.0),
            glyph_word('Body', 10, 150, 10, 645.0),
        ])
        title, body = page_items(page)
        self.assertGreater(title['transform'][5], body['transform'][5])


class TestIterDocumentItems(unittest.TestCase):

    def test_pages_in_order(self):
        pages = []
        for n in range(3):
            page = MagicMock()
            page.height = 792.0
            page.extract_words.return_value = [glyph_word(f'p{n}', 0, 10, 0, 782.0)]
            pages.append(page)
        pdf = MagicMock()
        pdf.pages = pages
        result = [(num, items[0]['text']) for num, items in iter_document_items(pdf)]
        self.assertEqual(result, [(1, 'p0 '), (2, 'p1 '), (3, 'p2 ')])

    def test_cancel_stops_between_pages(self):
        cancel = threading.Event()
        first = MagicMock()
        first.height = 792.0
        first.extract_words.return_value = []
        second = MagicMock()
        pdf = MagicMock()
        pdf.pages = [first, second]

        gen = iter_document_items(pdf, cancel_event=cancel)
        self.assertEqual(next(gen), (1, []))
        cancel.set()
        with self.assertRaises(ExtractionCancelled):
            next(gen)
        second.extract_words.assert_not_called()


class TestOpenDocument(unittest.TestCase):

    def test_bytes_wrapped_in_stream(self):
        with patch("pdfplumber.open") as mock_open:
            with open_document(b"%PDF-1.4 data"):
                pass
        arg = mock_open.call_args[0][0]
        self.assertIsInstance(arg, io.BytesIO)
        self.assertEqual(arg.getvalue(), b"%PDF-1.4 data")

    def test_path_passed_through(self):
        with patch("pdfplumber.open") as mock_open:
            with open_document("syllabus.pdf"):
                pass
        mock_open.assert_called_once_with("syllabus.pdf")


if __name__ == "__main__":
    unittest.main()
