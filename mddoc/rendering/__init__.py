"""Renderers for the two output layouts."""

from .buffer import Document, DocumentBuffer
from .full import FullRenderer
from .simple import SimpleRenderer

__all__ = ["Document", "DocumentBuffer", "FullRenderer", "SimpleRenderer"]
