import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every run of whitespace to a single space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


@dataclass(frozen=True)
class ContentBlock:
    """A paragraph or heading taken from the article body."""

    type: str
    text: str


@dataclass(frozen=True)
class ImageRef:
    src: str
    alt: str


@dataclass(frozen=True)
class ArticleRecord:
    """Everything extracted from one article page.

    ``title``, ``author`` and ``date`` are ``None`` when the page lacks the
    matching element; they are left out of :meth:`to_dict` in that case.
    """

    title: Optional[str]
    author: Optional[str]
    date: Optional[str]
    content: Tuple[ContentBlock, ...] = field(default_factory=tuple)
    images: Tuple[ImageRef, ...] = field(default_factory=tuple)
    estimated_reading_time: str = "0 minutes"

    def normalized(self) -> "ArticleRecord":
        """Return a copy with whitespace collapsed in every content block."""
        blocks = tuple(
            ContentBlock(type=block.type, text=collapse_whitespace(block.text))
            for block in self.content
        )
        return replace(self, content=blocks)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key in ("title", "author", "date"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        data["content"] = [{"type": b.type, "text": b.text} for b in self.content]
        data["images"] = [{"src": img.src, "alt": img.alt} for img in self.images]
        data["estimatedReadingTime"] = self.estimated_reading_time
        return data
