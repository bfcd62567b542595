import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from models import Line, TextFragment


def frag(text, x=0.0, y=0.0, size=12.0, font="Helvetica", page=1):
    return TextFragment(text=text, transform=(size, 0.0, 0.0, size, x, y), font_name=font, page=page)


def line(text, size, page=1, weight="normal"):
    return Line(text=text, size=size, weight=weight, page=page)


def write_pdf(path, pages):
    """Render pages of ``(text, x, y, font, size)`` runs with reportlab."""
    c = canvas.Canvas(str(path), pagesize=letter)
    for runs in pages:
        for text, x, y, font, size in runs:
            c.setFont(font, size)
            c.drawString(x, y, text)
        c.showPage()
    c.save()
    return path


REPORT_PAGES = [
    [
        ("Annual", 72, 720, "Helvetica-Bold", 24),
        ("Report", 72, 690, "Helvetica-Bold", 24),
        ("Introduction", 72, 640, "Helvetica-Bold", 16),
        ("The year in review.", 72, 610, "Helvetica", 9),
        ("Page 1", 300, 40, "Helvetica", 9),
    ],
    [
        ("Background", 72, 720, "Helvetica-Bold", 16),
        ("Market Details", 72, 690, "Helvetica-Bold", 13),
        ("Regional Notes", 72, 660, "Helvetica", 11),
        ("Sales grew in every region.", 72, 630, "Helvetica", 9),
        ("Page 2", 300, 40, "Helvetica", 9),
    ],
]


@pytest.fixture
def report_pdf(tmp_path):
    return write_pdf(tmp_path / "report.pdf", REPORT_PAGES)
