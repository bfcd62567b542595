import re
from typing import Optional, Sequence

from models import Line, TextFragment

# Instructional notes such as "(Title of the form)" leak into extracted text.
PARENTHETICAL = re.compile(r'\s*\(.*?\)\s*')
BOLD = re.compile(r'bold', re.IGNORECASE)


def clean_text(text: str) -> str:
    return PARENTHETICAL.sub('', text.strip()).strip()


def font_weight(font_name: Optional[str]) -> str:
    return "bold" if font_name and BOLD.search(font_name) else "normal"


def normalize_line(group: Sequence[TextFragment], page: int) -> Optional[Line]:
    """Reduce a fragment group to a Line, or None if no text survives.

    Size and weight come from the first fragment only.
    """
    if not group:
        return None
    text = clean_text(" ".join(fragment.text for fragment in group))
    if not text:
        return None

    first = group[0]
    return Line(
        text=text,
        size=round(first.scale, 2),
        weight=font_weight(first.font_name),
        page=page,
    )
