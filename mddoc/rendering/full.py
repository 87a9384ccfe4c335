"""Full mode: one cross-linked page per library and per type."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..models import Container, Documentable, EntityKind, Library, Package
from ..postproc.lint import MarkdownLinter
from ..signatures import format_declaration, format_signature
from ..text import first_line, sanitize_file_name
from .buffer import Document

_TEMPLATES_DIR = Path(__file__).with_name("templates")


@dataclass
class MemberEntry:
    heading: str
    signature: Optional[str]
    documentation: str


@dataclass
class MemberSection:
    title: str
    members: List[MemberEntry] = field(default_factory=list)


@dataclass
class LinkEntry:
    name: str
    target: str
    summary: str = ""

    @property
    def suffix(self) -> str:
        return f" - {self.summary}" if self.summary else ""


@dataclass
class LinkGroup:
    title: str
    entries: List[LinkEntry] = field(default_factory=list)


def library_dir(library: Library) -> str:
    return sanitize_file_name(library.name)


def library_index_path(library: Library) -> str:
    return f"{library_dir(library)}/README.md"


def container_page_name(container: Container) -> str:
    return f"{sanitize_file_name(container.name)}.md"


class FullRenderer:
    """Renders package, library and type pages from the bundled templates."""

    def __init__(
        self,
        *,
        include: Callable[[Documentable], bool],
        code_language: str = "dart",
        root_type: str = "Object",
        summary_width: int = 80,
        linter: Optional[MarkdownLinter] = None,
    ) -> None:
        self.include = include
        self.code_language = code_language
        self.root_type = root_type
        self.summary_width = summary_width
        self.linter = linter or MarkdownLinter()
        self._env = Environment(
            loader=FileSystemLoader(str(_TEMPLATES_DIR)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render_package_index(self, package: Package, libraries: Sequence[Library]) -> Document:
        entries = [LinkEntry(lib.name, library_index_path(lib)) for lib in libraries]
        content = self._render(
            "package.md.j2",
            package=package,
            documentation=_prose(package),
            libraries=entries,
        )
        return Document(path="README.md", content=content)

    def render_library(self, library: Library) -> Document:
        link_groups = []
        for title, containers in (
            ("Classes", library.classes),
            ("Enums", library.enums),
            ("Mixins", library.mixins),
            ("Extensions", library.extensions),
        ):
            entries = [
                LinkEntry(
                    container.name,
                    container_page_name(container),
                    first_line(container.one_line_doc, self.summary_width),
                )
                for container in containers
                if self.include(container)
            ]
            if entries:
                link_groups.append(LinkGroup(title, entries))

        sections = [
            self._section("Functions", library.functions),
            self._section("Constants", library.constants, keyword="const"),
        ]
        content = self._render(
            "library.md.j2",
            library=library,
            documentation=_prose(library),
            link_groups=link_groups,
            sections=[section for section in sections if section.members],
        )
        return Document(path=library_index_path(library), content=content)

    def render_container(self, library: Library, container: Container) -> Document:
        content = self._render(
            "entity.md.j2",
            title=container.name,
            declaration=format_declaration(container, root_type=self.root_type),
            documentation=_prose(container),
            sections=[section for section in self._container_sections(container) if section.members],
        )
        return Document(
            path=f"{library_dir(library)}/{container_page_name(container)}", content=content
        )

    def _container_sections(self, container: Container) -> List[MemberSection]:
        kind = container.kind
        if kind is EntityKind.CLASS:
            constructors = MemberSection("Constructors")
            for ctor in container.constructors:
                if self.include(ctor):
                    constructors.members.append(
                        MemberEntry(
                            ctor.name or container.name, format_signature(ctor), _prose(ctor)
                        )
                    )
            operators = MemberSection("Operators")
            for op in container.operators:
                if self.include(op):
                    operators.members.append(
                        MemberEntry(f"operator {op.name}", format_signature(op), _prose(op))
                    )
            return [
                constructors,
                self._section("Properties", container.instance_fields),
                self._section("Methods", container.instance_methods),
                self._section("Static Methods", container.static_methods, keyword="static"),
                operators,
            ]
        if kind is EntityKind.ENUM:
            values = MemberSection("Values")
            for value in container.values:
                if self.include(value):
                    values.members.append(MemberEntry(value.name, None, _prose(value)))
            return [values]
        return [self._section("Methods", container.instance_methods)]

    def _section(
        self, title: str, members: Sequence[Documentable], *, keyword: Optional[str] = None
    ) -> MemberSection:
        section = MemberSection(title)
        for member in members:
            if self.include(member):
                section.members.append(
                    MemberEntry(member.name, format_signature(member, keyword), _prose(member))
                )
        return section

    def _render(self, template_name: str, **context: object) -> str:
        template = self._env.get_template(template_name)
        return self.linter.lint(template.render(language=self.code_language, **context))


def _prose(entity: Documentable) -> str:
    return entity.documentation.strip() if entity.has_documentation else ""


__all__ = [
    "FullRenderer",
    "LinkEntry",
    "LinkGroup",
    "MemberEntry",
    "MemberSection",
    "container_page_name",
    "library_dir",
    "library_index_path",
]
