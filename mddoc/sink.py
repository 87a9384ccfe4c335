"""Writes finished documents below the output root."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import List, Set

from .logging import PROGRESS, get_logger


class FileSink:
    """Creates parent directories on demand and overwrites files with new content."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.written: List[str] = []
        self._created: Set[Path] = set()
        self.logger = get_logger("sink")

    def prepare(self) -> None:
        """Create the output root; a no-op when it already exists."""
        self._ensure_dir(self.root)

    def write(self, relative_path: str, content: str) -> Path:
        """Write ``content`` to ``relative_path`` below the root.

        Raises ``ValueError`` for paths that are absolute or climb out of the root.
        """
        relative = PurePosixPath(relative_path)
        if relative.is_absolute() or ".." in relative.parts:
            raise ValueError(f"Refusing to write outside the output directory: {relative_path}")
        target = self.root.joinpath(*relative.parts)
        self._ensure_dir(target.parent)
        target.write_text(content, encoding="utf-8")
        self.written.append(relative_path)
        self.logger.log(PROGRESS, "  Written: %s", relative_path)
        return target

    def _ensure_dir(self, directory: Path) -> None:
        if directory in self._created:
            return
        directory.mkdir(parents=True, exist_ok=True)
        self._created.add(directory)


__all__ = ["FileSink"]
