"""Markdown API documentation from a resolved package model."""

from .config import GeneratorConfig, load_config
from .generator import GenerationReport, MarkdownGenerator, generate
from .loader import ModelError, load_package_graph

__all__ = [
    "GenerationReport",
    "GeneratorConfig",
    "MarkdownGenerator",
    "ModelError",
    "generate",
    "load_config",
    "load_package_graph",
]
