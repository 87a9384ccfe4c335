"""Tests for full-mode rendering."""

from __future__ import annotations

from pathlib import Path

from mddoc.config import GeneratorConfig
from mddoc.generator import MarkdownGenerator
from mddoc.models import (
    Constructor,
    Container,
    EntityKind,
    Field,
    Function,
    Method,
    Parameter,
    TypeRef,
    Variable,
)
from tests._fixtures.graph_builder import GraphBuilder, vector_graph
from tests._fixtures.output_tree import read_tree


def test_vector_scenario_produces_index_and_class_pages(full_config: GeneratorConfig) -> None:
    MarkdownGenerator(full_config).generate(vector_graph())
    tree = read_tree(full_config.output_dir)

    assert set(tree) == {"README.md", "mathutils/README.md", "mathutils/Vector.md"}
    assert tree["README.md"] == (
        "# mathutils\n\n## Libraries\n\n- [mathutils](mathutils/README.md)\n"
    )
    assert tree["mathutils/README.md"] == (
        "# mathutils library\n\n## Classes\n\n- [Vector](Vector.md) - A 2D vector.\n"
    )
    assert tree["mathutils/Vector.md"] == (
        "# Vector\n\n"
        "```dart\nclass Vector\n```\n\n"
        "A 2D vector.\n\n"
        "## Methods\n\n"
        "### add\n\n"
        "```dart\nVector add(Vector other)\n```\n\n"
        "Adds two vectors.\n"
    )


def test_class_page_renders_every_member_category(
    graph_builder: GraphBuilder, full_config: GeneratorConfig
) -> None:
    source = graph_builder.source("lib/shapes.dart")
    library = graph_builder.library("shapes", "lib/shapes.dart")
    library.classes.append(
        Container(
            name="Square",
            kind=EntityKind.CLASS,
            is_abstract=True,
            supertype=TypeRef("Polygon"),
            source_path=source,
            constructors=[
                Constructor(name="", owner="Square", parameters=[Parameter("side", "double")]),
                Constructor(name="unit", owner="Square", documentation="A unit square."),
            ],
            fields=[
                Field(name="side", type="double", documentation="Side length."),
                Field(name="count", type="int", is_static=True),
            ],
            methods=[
                Method(name="area", return_type="double"),
                Method(name="parse", return_type="Square", is_static=True,
                       parameters=[Parameter("text", "String")]),
                Method(name="==", return_type="bool", is_operator=True,
                       parameters=[Parameter("other", "Object")]),
            ],
        )
    )

    MarkdownGenerator(full_config).generate(graph_builder.build())
    page = (full_config.output_dir / "shapes" / "Square.md").read_text(encoding="utf-8")

    assert "```dart\nabstract class Square extends Polygon\n```" in page
    headings = [line for line in page.splitlines() if line.startswith("## ")]
    assert headings == [
        "## Constructors",
        "## Properties",
        "## Methods",
        "## Static Methods",
        "## Operators",
    ]
    assert "### Square\n\n```dart\nSquare(double side)\n```" in page
    assert "### unit\n\n```dart\nSquare.unit()\n```\n\nA unit square." in page
    assert "### side\n\n```dart\ndouble side\n```\n\nSide length." in page
    assert "count" not in page
    assert "```dart\nstatic Square parse(String text)\n```" in page
    assert "### operator ==\n\n```dart\nbool operator ==(Object other)\n```" in page


def test_enum_mixin_and_extension_pages(
    graph_builder: GraphBuilder, full_config: GeneratorConfig
) -> None:
    source = graph_builder.source("lib/kinds.dart")
    library = graph_builder.library("kinds", "lib/kinds.dart")
    library.enums.append(
        Container(
            name="Color",
            kind=EntityKind.ENUM,
            source_path=source,
            values=[
                Field(name="red", type="Color", documentation="Warm.", source_path=source),
                Field(name="blue", type="Color", source_path=source),
            ],
        )
    )
    library.mixins.append(
        Container(
            name="Walker",
            kind=EntityKind.MIXIN,
            source_path=source,
            methods=[Method(name="walk", source_path=source)],
        )
    )
    library.extensions.append(
        Container(
            name="Shout",
            kind=EntityKind.EXTENSION,
            source_path=source,
            extended_type=TypeRef("String"),
            methods=[Method(name="shout", return_type="String", source_path=source)],
        )
    )

    MarkdownGenerator(full_config).generate(graph_builder.build())
    tree = read_tree(full_config.output_dir)

    assert tree["kinds/Color.md"] == (
        "# Color\n\n```dart\nenum Color\n```\n\n## Values\n\n### red\n\nWarm.\n\n### blue\n"
    )
    assert "```dart\nmixin Walker\n```" in tree["kinds/Walker.md"]
    assert "## Methods\n\n### walk\n\n```dart\nvoid walk()\n```" in tree["kinds/Walker.md"]
    assert "```dart\nextension Shout\n```" in tree["kinds/Shout.md"]
    assert "String shout()" in tree["kinds/Shout.md"]

    index = tree["kinds/README.md"]
    assert "## Enums\n\n- [Color](Color.md)\n" in index
    assert "## Mixins\n\n- [Walker](Walker.md)\n" in index
    assert "## Extensions\n\n- [Shout](Shout.md)\n" in index


def test_library_index_inlines_functions_and_constants(
    graph_builder: GraphBuilder, full_config: GeneratorConfig
) -> None:
    library = graph_builder.library(
        "mathutils", "lib/mathutils.dart", documentation="Math helpers."
    )
    library.functions.append(
        Function(
            name="clamp",
            return_type="num",
            parameters=[
                Parameter("value", "num"),
                Parameter("max", "num", is_named=True, is_required=True),
            ],
            documentation="Clamps a value.",
        )
    )
    library.variables.extend(
        [
            Variable(name="pi", type="double", is_const=True, documentation="Ratio."),
            Variable(name="counter", type="int"),
        ]
    )

    MarkdownGenerator(full_config).generate(graph_builder.build())
    index = (full_config.output_dir / "mathutils" / "README.md").read_text(encoding="utf-8")

    assert index.startswith("# mathutils library\n\nMath helpers.\n\n## Functions\n")
    assert "### clamp\n\n```dart\nnum clamp(num value, required num max)\n```\n\nClamps a value." in index
    assert "## Constants\n\n### pi\n\n```dart\nconst double pi\n```\n\nRatio." in index
    assert "counter" not in index
    assert "## Classes" not in index


def test_summary_is_truncated_in_library_index(
    graph_builder: GraphBuilder, full_config: GeneratorConfig
) -> None:
    library = graph_builder.library("text", "lib/text.dart")
    summary = "Long summary " * 10
    library.classes.append(
        Container(
            name="Doc",
            kind=EntityKind.CLASS,
            one_line_doc=summary + "\nsecond line",
            source_path=graph_builder.source("lib/text.dart"),
        )
    )

    MarkdownGenerator(full_config).generate(graph_builder.build())
    index = (full_config.output_dir / "text" / "README.md").read_text(encoding="utf-8")

    entry = next(line for line in index.splitlines() if line.startswith("- [Doc]"))
    assert entry == f"- [Doc](Doc.md) - {summary[:77]}..."


def test_page_names_are_sanitized(graph_builder: GraphBuilder, full_config: GeneratorConfig) -> None:
    library = graph_builder.library("package:app/io.dart", "lib/io.dart")
    library.classes.append(
        Container(
            name="Box<T>",
            kind=EntityKind.CLASS,
            source_path=graph_builder.source("lib/io.dart"),
        )
    )

    MarkdownGenerator(full_config).generate(graph_builder.build())
    tree = read_tree(full_config.output_dir)

    assert "package_app_io.dart/README.md" in tree
    assert "package_app_io.dart/Box_T_.md" in tree
    assert "- [package:app/io.dart](package_app_io.dart/README.md)" in tree["README.md"]
    assert "- [Box<T>](Box_T_.md)" in tree["package_app_io.dart/README.md"]


def test_code_fence_language_is_configurable(tmp_path: Path) -> None:
    config = GeneratorConfig(output_dir=tmp_path / "out", code_language="kotlin")
    MarkdownGenerator(config).generate(vector_graph())
    page = (tmp_path / "out" / "mathutils" / "Vector.md").read_text(encoding="utf-8")
    assert "```kotlin\nVector add(Vector other)\n```" in page
    assert "```dart" not in page


def test_hard_line_breaks_in_documentation_survive(tmp_path: Path) -> None:
    graph = vector_graph()
    vector = graph.default_package.libraries[0].classes[0]
    vector.documentation = "Line one  \nLine two"
    config = GeneratorConfig(output_dir=tmp_path / "out")

    MarkdownGenerator(config).generate(graph)
    page = (tmp_path / "out" / "mathutils" / "Vector.md").read_text(encoding="utf-8")

    assert "Line one  \nLine two\n" in page
