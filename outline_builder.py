import logging
from typing import Dict, List, Optional, Sequence, Tuple

from models import DEFAULT_TITLE, HeadingEntry, Line, OutlineResult

logger = logging.getLogger(__name__)

LEVELS = ["H1", "H2", "H3"]


def drop_page_number_lines(lines: Sequence[Line]) -> List[Line]:
    """Remove running "Page N" headers/footers printed on page N."""
    return [line for line in lines if line.text.lower() != f"page {line.page}"]


def find_title(lines: Sequence[Line]) -> Tuple[str, Optional[float]]:
    """Join every first-page line set in the page's largest size.

    Returns the title and its size; the size is None when page 1 has no lines.
    """
    first_page = [line for line in lines if line.page == 1]
    if not first_page:
        return DEFAULT_TITLE, None

    title_size = max(line.size for line in first_page)
    title_lines = [line.text for line in first_page if line.size == title_size]
    return " ".join(title_lines), title_size


def rank_sizes(lines: Sequence[Line], title_size: Optional[float]) -> Dict[float, str]:
    """Map the three largest non-title font sizes to H1, H2 and H3."""
    sizes = sorted({line.size for line in lines}, reverse=True)
    remaining = [size for size in sizes if size != title_size]

    font_map = {}
    for i, size in enumerate(remaining[:len(LEVELS)]):
        font_map[size] = LEVELS[i]
    return font_map


def build_outline(lines: Sequence[Line]) -> OutlineResult:
    lines = drop_page_number_lines(lines)
    if not lines:
        return OutlineResult()

    title, title_size = find_title(lines)
    font_map = rank_sizes(lines, title_size)
    logger.debug("title size %s, heading sizes %s", title_size, font_map)

    outline = []
    for line in lines:
        level = font_map.get(line.size)
        # Substring test: a short heading contained in the title is dropped too.
        if level and line.text not in title:
            outline.append(HeadingEntry(level=level, text=line.text, page=line.page))

    return OutlineResult(title=title, outline=outline)
