"""Markdown post-processing helpers."""

from .links import LinkValidator
from .lint import MarkdownLinter

__all__ = ["LinkValidator", "MarkdownLinter"]
