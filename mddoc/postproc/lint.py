"""Whitespace normalisation for generated markdown."""

from __future__ import annotations

from typing import List


class MarkdownLinter:
    """Normalises line endings, blank lines and heading spacing outside code fences.

    Trailing whitespace is removed except for Markdown hard line breaks.
    """

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        lines = normalized.split("\n")
        cleaned: List[str] = []
        in_code = False
        previous_blank = False

        for index, line in enumerate(lines):
            stripped = line.rstrip()
            if stripped.startswith("```"):
                if not in_code and cleaned and cleaned[-1] != "" and _is_heading(cleaned[-1]):
                    cleaned.append("")
                in_code = not in_code
                cleaned.append(stripped)
                previous_blank = False
                continue

            if not in_code:
                if _is_heading(stripped) and cleaned and cleaned[-1] != "":
                    cleaned.append("")
                if not stripped:
                    if previous_blank or not cleaned:
                        continue
                    previous_blank = True
                    cleaned.append("")
                    continue

            if in_code:
                cleaned.append(line)
            elif _is_hard_break(line, lines[index + 1 : index + 2]):
                cleaned.append(stripped + "  ")
            else:
                cleaned.append(stripped)
            previous_blank = False

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"


def _is_hard_break(line: str, following: List[str]) -> bool:
    """Two trailing spaces before another line of the same paragraph are a line break."""
    if not line.endswith("  ") or not line.strip() or _is_heading(line.strip()):
        return False
    if not following:
        return False
    next_line = following[0].strip()
    return bool(next_line) and not _is_heading(next_line) and not next_line.startswith("```")


def _is_heading(line: str) -> bool:
    if not line.startswith("#"):
        return False
    hashes = len(line) - len(line.lstrip("#"))
    return hashes <= 6 and (len(line) == hashes or line[hashes] == " ")


__all__ = ["MarkdownLinter"]
