"""Helpers for assembling small package graphs in tests."""

from __future__ import annotations

from typing import List

from mddoc.models import (
    Container,
    EntityKind,
    Library,
    Method,
    Package,
    PackageGraph,
    Parameter,
)

PROJECT_ROOT = "/work/mathutils"


class GraphBuilder:
    """Collects libraries for a default package rooted at ``project_root``."""

    def __init__(self, project_root: str = PROJECT_ROOT) -> None:
        self.project_root = project_root
        self.libraries: List[Library] = []

    def source(self, relative: str) -> str:
        return f"{self.project_root}/{relative}"

    def library(self, name: str, relative: str, **kwargs: object) -> Library:
        library = Library(name=name, source_path=self.source(relative), **kwargs)
        self.libraries.append(library)
        return library

    def build(self, name: str = "mathutils", documentation: str = "") -> PackageGraph:
        package = Package(name=name, documentation=documentation, libraries=self.libraries)
        return PackageGraph(default_package=package, packages=[package])


def vector_class(builder: GraphBuilder) -> Container:
    """The ``Vector`` class from lib/vector.dart with a single ``add`` method."""
    source = builder.source("lib/vector.dart")
    return Container(
        name="Vector",
        kind=EntityKind.CLASS,
        documentation="A 2D vector.",
        one_line_doc="A 2D vector.",
        source_path=source,
        line=10,
        methods=[
            Method(
                name="add",
                return_type="Vector",
                parameters=[Parameter(name="other", type="Vector")],
                documentation="Adds two vectors.",
                source_path=source,
                line=15,
            )
        ],
    )


def vector_graph(builder: GraphBuilder | None = None) -> PackageGraph:
    builder = builder or GraphBuilder()
    library = builder.library("mathutils", "lib/mathutils.dart")
    library.classes.append(vector_class(builder))
    return builder.build()


__all__ = ["GraphBuilder", "PROJECT_ROOT", "vector_class", "vector_graph"]
