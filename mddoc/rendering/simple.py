"""Simple mode: one document per source file, annotated with line numbers."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Callable, List, Optional, Sequence, Tuple

from ..models import Container, Documentable, EntityKind, Function, Variable
from ..postproc.lint import MarkdownLinter
from ..signatures import (
    field_modifiers,
    format_getter,
    format_modifiers,
    format_signature,
    method_modifiers,
    variable_modifiers,
)
from ..text import relative_source_path
from .buffer import Document, DocumentBuffer

MemberSection = Tuple[str, List[str]]


class SimpleRenderer:
    """Renders the entities declared in one source file as a flat outline."""

    def __init__(
        self,
        *,
        include: Callable[[Documentable], bool],
        project_root: str = "",
        root_type: str = "Object",
        source_extension: str = ".dart",
        doc_extension: str = ".md",
        linter: Optional[MarkdownLinter] = None,
    ) -> None:
        self.include = include
        self.project_root = project_root
        self.root_type = root_type
        self.source_extension = source_extension
        self.doc_extension = doc_extension
        self.linter = linter or MarkdownLinter()

    def output_path(self, source_path: str) -> str:
        """Mirror the source path below the output root with the doc extension."""
        relative = PurePosixPath(relative_source_path(source_path, self.project_root))
        if relative.suffix == self.source_extension:
            return str(relative.with_suffix(self.doc_extension))
        return f"{relative}{self.doc_extension}"

    def render_file(self, source_path: str, entities: Sequence[Documentable]) -> Document:
        buffer = DocumentBuffer()
        buffer.heading(1, relative_source_path(source_path, self.project_root)).blank()

        for entity in entities:
            if isinstance(entity, Container):
                self._render_container(buffer, entity, source_path)
            elif isinstance(entity, Function):
                buffer.heading(
                    2, f"Function: `{format_signature(entity)}` (line {entity.line_number})"
                ).blank()
            elif isinstance(entity, Variable):
                mods = format_modifiers(variable_modifiers(entity))
                buffer.heading(
                    2,
                    f"Variable: {mods}`{format_signature(entity)}` (line {entity.line_number})",
                ).blank()
            else:
                raise TypeError(f"Unexpected top-level entity {entity!r}")

        return Document(
            path=self.output_path(source_path),
            content=self.linter.lint(buffer.getvalue()),
        )

    def _render_container(self, buffer: DocumentBuffer, container: Container, source_path: str) -> None:
        prefix = "abstract " if container.kind is EntityKind.CLASS and container.is_abstract else ""
        buffer.heading(
            2, f"{prefix}{container.kind.value} {container.name} (line {container.line_number})"
        )
        for label, names in self._relations(container):
            if names:
                buffer.line(f"{label}: `{names}`")
        buffer.blank()

        for title, items in self._member_sections(container, source_path):
            if not items:
                continue
            buffer.heading(3, title)
            for item in items:
                buffer.bullet(item)
            buffer.blank()

    def _relations(self, container: Container) -> List[Tuple[str, str]]:
        kind = container.kind
        if kind is EntityKind.CLASS:
            return [
                ("Extends", " → ".join(self.supertype_chain(container))),
                ("Mixins", _names(container.mixins)),
                ("Implements", _names(container.interfaces)),
                ("Subclasses", _names(container.subclasses)),
            ]
        if kind is EntityKind.ENUM:
            return [
                ("Implements", _names(container.interfaces)),
                ("Mixins", _names(container.mixins)),
            ]
        if kind is EntityKind.MIXIN:
            return [
                ("On", _names(container.superclass_constraints)),
                ("Implements", _names(container.interfaces)),
            ]
        extended = container.extended_type
        return [("On", extended.name if extended is not None else "")]

    def supertype_chain(self, container: Container) -> List[str]:
        """Names from the direct supertype upward, stopping before the root type."""
        chain: List[str] = []
        visited = {id(container)}
        current = container.supertype
        while current is not None and current.name != self.root_type:
            chain.append(current.name)
            element = current.element
            if element is None or element.kind is not EntityKind.CLASS or id(element) in visited:
                break
            visited.add(id(element))
            current = element.supertype
        return chain

    def _member_sections(self, container: Container, source_path: str) -> List[MemberSection]:
        def visible(members: Sequence[Documentable]) -> list:
            return [m for m in members if self.include(m) and m.source_path == source_path]

        def located(text: str, member: Documentable) -> str:
            return f"{text} (line {member.line_number})"

        constructors = [
            located(f"`{format_signature(ctor)}`", ctor) for ctor in visible(container.constructors)
        ]
        fields = [
            located(f"{format_modifiers(field_modifiers(f))}`{format_signature(f)}`", f)
            for f in visible(container.instance_fields + container.static_fields)
        ]
        methods = [
            located(f"{format_modifiers(method_modifiers(m))}`{format_signature(m)}`", m)
            for m in visible(container.instance_methods + container.static_methods)
        ]

        kind = container.kind
        if kind is EntityKind.CLASS:
            getters = [
                located(f"`{format_getter(f)}`", f)
                for f in visible(container.instance_fields)
                if f.is_getter_only
            ]
            return [
                ("Constructors", constructors),
                ("Fields", fields),
                ("Getters", getters),
                ("Methods", methods),
            ]
        if kind is EntityKind.ENUM:
            values = [located(f"`{value.name}`", value) for value in visible(container.values)]
            return [
                ("Values", values),
                ("Constructors", constructors),
                ("Fields", fields),
                ("Methods", methods),
            ]
        return [("Fields", fields), ("Methods", methods)]


def _names(refs) -> str:
    return ", ".join(ref.name for ref in refs)


__all__ = ["SimpleRenderer"]
