"""Link validation for cross-linked output trees."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List


class LinkValidator:
    """Ensures relative links in a document point at files that exist."""

    _LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

    def validate(self, markdown: str, *, root: Path) -> List[str]:
        """Return a list of issues discovered in the provided markdown."""

        issues: List[str] = []
        in_code = False
        for line in markdown.splitlines():
            if line.lstrip().startswith("```"):
                in_code = not in_code
                continue
            if in_code:
                continue
            for match in self._LINK_PATTERN.finditer(line):
                target = match.group(2).strip()
                if not target:
                    issues.append("Empty link target detected")
                    continue
                if target.startswith(("http://", "https://", "mailto:", "#")):
                    continue
                cleaned = target.split("#", 1)[0].split("?", 1)[0]
                normalized = cleaned.replace("\\", "/")
                if normalized.startswith("./"):
                    normalized = normalized[2:]
                if not normalized:
                    continue
                if not (root / normalized).exists():
                    issues.append(f"Link target not found: {target}")
        return issues


__all__ = ["LinkValidator"]
