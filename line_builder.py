from functools import cmp_to_key
from typing import Iterable, Iterator, List, Sequence, Tuple

from models import TextFragment

Y_TOLERANCE = 5
ANCHORS = ("previous", "first")


def sort_fragments(fragments: Iterable[TextFragment],
                   tolerance: float = Y_TOLERANCE) -> List[TextFragment]:
    """Order fragments top-to-bottom, then left-to-right within a row."""
    def compare(a, b):
        if abs(a.y - b.y) > tolerance:
            return -1 if a.y > b.y else 1
        if a.x == b.x:
            return 0
        return -1 if a.x < b.x else 1

    return sorted(fragments, key=cmp_to_key(compare))


def group_fragments(fragments: Iterable[TextFragment],
                    tolerance: float = Y_TOLERANCE,
                    anchor: str = "previous") -> List[List[TextFragment]]:
    """Split one page's fragments into same-row groups.

    With ``anchor="previous"`` a fragment joins the current group while it
    stays within ``tolerance`` of the fragment added just before it, which
    follows baselines that drift slowly across a row. ``anchor="first"``
    measures against the first fragment of the group instead.
    """
    if anchor not in ANCHORS:
        raise ValueError(f"unknown anchor {anchor!r}, expected one of {ANCHORS}")

    ordered = sort_fragments(fragments, tolerance)
    if not ordered:
        return []

    groups = []
    current = [ordered[0]]
    for fragment in ordered[1:]:
        reference = current[-1] if anchor == "previous" else current[0]
        if abs(reference.y - fragment.y) <= tolerance:
            current.append(fragment)
        else:
            groups.append(current)
            current = [fragment]
    groups.append(current)
    return groups


def build_page_groups(pages: Sequence[Sequence[TextFragment]],
                      tolerance: float = Y_TOLERANCE,
                      anchor: str = "previous") -> Iterator[Tuple[int, List[TextFragment]]]:
    """Yield ``(page_number, group)`` for every page, skipping empty pages."""
    for page_number, fragments in enumerate(pages, start=1):
        if not fragments:
            continue
        for group in group_fragments(fragments, tolerance, anchor):
            yield page_number, group
