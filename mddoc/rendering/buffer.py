"""Line buffer threaded through line-oriented rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Document:
    """A finished document and where it goes below the output root."""

    path: str
    content: str


@dataclass
class DocumentBuffer:
    """Accumulates markdown lines for a single document."""

    lines: List[str] = field(default_factory=list)

    def line(self, text: str = "") -> "DocumentBuffer":
        self.lines.append(text)
        return self

    def blank(self) -> "DocumentBuffer":
        return self.line()

    def heading(self, level: int, text: str) -> "DocumentBuffer":
        return self.line(f"{'#' * level} {text}")

    def bullet(self, text: str) -> "DocumentBuffer":
        return self.line(f"- {text}")

    def getvalue(self) -> str:
        return "\n".join(self.lines) + "\n"


__all__ = ["Document", "DocumentBuffer"]
