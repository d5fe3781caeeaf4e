"""
Glyph Run Provider
==================
Adapts pdfplumber pages to positioned decoder items:

    {"text": str, "transform": [a, b, c, d, e, f]}

where (e, f) is the run's baseline origin in PDF space, Y increasing upward
from the page bottom. The origin comes from the first glyph's text matrix,
so words in different fonts on one baseline share the same Y.
"""

import io
import os
import threading
from contextlib import contextmanager
from typing import IO, Iterator, List, Optional, Tuple, Union

import pdfplumber

from .types import Item

PdfSource = Union[str, os.PathLike, bytes, IO[bytes]]


class ExtractionCancelled(Exception):
    """Raised between pages once a caller has given up on a document"""


@contextmanager
def open_document(source: PdfSource):
    """
    Open a PDF from a path, raw bytes, or a binary file object.
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(bytes(source))
    with pdfplumber.open(source) as pdf:
        yield pdf


def page_items(page) -> List[Item]:
    """
    Convert one pdfplumber page into decoder items, one per word.

    The origin is taken from the first glyph's text matrix, which is
    already in PDF space: (e, f) is the baseline start, Y increasing
    upward. Word boxes are not used because their bottom edge sits below
    the baseline by a font-dependent amount.

    Each word carries a trailing space so inter-word spacing survives
    concatenation; line assembly never inserts separators of its own.
    """
    items: List[Item] = []
    for word in page.extract_words(return_chars=True):
        text = word.get('text', '')
        if not text:
            continue
        matrix = word['chars'][0]['matrix']
        items.append({
            'text': text + ' ',
            'transform': [1, 0, 0, 1, float(matrix[4]), float(matrix[5])],
        })
    return items


def iter_document_items(
    pdf,
    cancel_event: Optional[threading.Event] = None
) -> Iterator[Tuple[int, List[Item]]]:
    """
    Generator yielding (page_num, items) for each page, in page order.

    Pages are decoded one at a time; page N+1 is not touched until page N
    has been consumed.
    """
    for i, page in enumerate(pdf.pages):
        if cancel_event is not None and cancel_event.is_set():
            raise ExtractionCancelled(f"cancelled before page {i + 1}")
        yield i + 1, page_items(page)
