"""Plain-text helpers shared by the renderers."""

from __future__ import annotations

import posixpath
import re
from typing import List

_TAG_PATTERN = re.compile(r"<[^>]*>")
_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*]')
_SEGMENT_SPLIT = re.compile(r"[/\\]+")

_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    # Last, so that "&amp;lt;" decodes to "&lt;" rather than "<".
    ("&amp;", "&"),
)


def strip_markup(text: str, *, decode_entities: bool = True) -> str:
    """Remove every ``<...>`` span and optionally decode ``&lt; &gt; &amp;``.

    Input is linked markup, so literal angle brackets such as type arguments must
    arrive entity-encoded (``Map&lt;String, int&gt;``); a raw ``<...>`` is taken for a
    tag and dropped. Unbalanced tags are tolerated: a ``<`` without a closing ``>`` is
    left as is.
    """
    stripped = _TAG_PATTERN.sub("", text)
    if decode_entities:
        for entity, literal in _ENTITIES:
            stripped = stripped.replace(entity, literal)
    return stripped


def sanitize_file_name(name: str) -> str:
    """Replace characters that are invalid in file names on common filesystems."""
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def first_line(text: str, max_len: int = 80) -> str:
    """Return the trimmed first line, truncated with ``...`` past ``max_len``."""
    if not text:
        return ""
    first = text.split("\n", 1)[0].strip()
    if len(first) > max_len:
        return first[: max_len - 3] + "..."
    return first


def path_segments(path: str) -> List[str]:
    return [segment for segment in _SEGMENT_SPLIT.split(path) if segment]


def relative_source_path(path: str, project_root: str) -> str:
    """Express ``path`` relative to ``project_root`` using forward slashes.

    The result is normalised and never starts with ``..``, so it always stays below
    whatever directory it is joined to.
    """
    normalized = _normalize(path)
    root = _normalize(project_root).rstrip("/") if project_root else ""
    relative = normalized
    if root and normalized.startswith(root) and normalized[len(root) : len(root) + 1] == "/":
        relative = normalized[len(root) :]
    segments = [segment for segment in relative.split("/") if segment]
    while segments and segments[0] == "..":
        segments.pop(0)
    return "/".join(segments)


def _normalize(path: str) -> str:
    return posixpath.normpath(path.replace("\\", "/"))


__all__ = [
    "first_line",
    "path_segments",
    "relative_source_path",
    "sanitize_file_name",
    "strip_markup",
]
