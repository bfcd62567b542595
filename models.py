from dataclasses import dataclass, field
from typing import List, Tuple

DEFAULT_TITLE = "Untitled Document"


@dataclass(frozen=True)
class TextFragment:
    """One positioned run of text as reported by the PDF reader.

    ``transform`` follows the PDF text matrix layout ``[a, b, c, d, e, f]``:
    ``d`` is the vertical font scale, ``e``/``f`` the x/y origin. The y axis
    points up, so larger ``y`` means higher on the page.
    """
    text: str
    transform: Tuple[float, ...]
    font_name: str = ""
    page: int = 1

    @property
    def x(self) -> float:
        return self.transform[4]

    @property
    def y(self) -> float:
        return self.transform[5]

    @property
    def scale(self) -> float:
        return self.transform[3]


@dataclass(frozen=True)
class Line:
    """A visual row of text rebuilt from one or more fragments."""
    text: str
    size: float
    weight: str
    page: int


@dataclass(frozen=True)
class HeadingEntry:
    level: str
    text: str
    page: int

    def to_dict(self):
        return {"level": self.level, "text": self.text, "page": self.page}


@dataclass
class OutlineResult:
    title: str = DEFAULT_TITLE
    outline: List[HeadingEntry] = field(default_factory=list)

    def to_dict(self):
        return {
            "title": self.title,
            "outline": [entry.to_dict() for entry in self.outline],
        }

    @classmethod
    def error(cls, filename: str) -> "OutlineResult":
        """Fallback result written when a document cannot be processed."""
        return cls(title=f"Error processing {filename}", outline=[])
