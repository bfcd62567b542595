import fitz
import pytest

from conftest import write_pdf
from span_extractor import extract_fragments, extract_spans


def test_fragments_use_upward_y_axis(report_pdf):
    pages = extract_spans(str(report_pdf))
    assert len(pages) == 2

    annual = next(f for f in pages[0] if f.text == "Annual")
    assert annual.x == pytest.approx(72, abs=0.5)
    assert annual.y == pytest.approx(720, abs=0.5)
    assert annual.scale == pytest.approx(24)
    assert annual.font_name == "Helvetica-Bold"
    assert annual.page == 1

    footer = next(f for f in pages[1] if f.text == "Page 2")
    assert footer.y < annual.y
    assert footer.page == 2


def test_blank_page_gives_empty_list(tmp_path):
    pdf = write_pdf(tmp_path / "blank.pdf", [[("Cover", 72, 700, "Helvetica", 12)], []])
    with fitz.open(str(pdf)) as doc:
        pages = extract_fragments(doc)
    assert [len(p) for p in pages] == [1, 0]
