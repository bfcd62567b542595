import logging

import fitz  # PyMuPDF

from models import TextFragment

logger = logging.getLogger(__name__)


def page_fragments(page, page_number):
    """Collect every span on a page as a TextFragment.

    PyMuPDF measures y downwards from the top edge, so the origin is flipped
    against the page height to get PDF-style coordinates.
    """
    height = page.rect.height
    fragments = []
    blocks = page.get_text("dict")["blocks"]
    for block in blocks:
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                size = span["size"]
                x, y = span["origin"]
                fragments.append(TextFragment(
                    text=span["text"],
                    transform=(size, 0.0, 0.0, size, x, height - y),
                    font_name=span.get("font", ""),
                    page=page_number,
                ))
    return fragments


def extract_fragments(doc):
    """Return one fragment list per page, in page order."""
    pages = []
    for page in doc:
        page_number = page.number + 1
        fragments = page_fragments(page, page_number)
        logger.debug("page %d: %d fragments", page_number, len(fragments))
        pages.append(fragments)
    return pages


def extract_spans(pdf_path):
    with fitz.open(pdf_path) as doc:
        return extract_fragments(doc)
