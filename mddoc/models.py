"""Semantic model consumed by the renderers.

The graph is produced upstream (see ``mddoc.loader`` for the serialised form) and is
treated as read-only: rendering never mutates any of these objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, List, Optional

from .text import strip_markup


class EntityKind(str, Enum):
    """Tag shared by every documentable variant."""

    PACKAGE = "package"
    LIBRARY = "library"
    CLASS = "class"
    ENUM = "enum"
    MIXIN = "mixin"
    EXTENSION = "extension"
    FUNCTION = "function"
    VARIABLE = "variable"
    FIELD = "field"
    METHOD = "method"
    CONSTRUCTOR = "constructor"


@dataclass
class Documentable:
    """Name, prose and source location common to every entity."""

    name: str
    documentation: str = ""
    one_line_doc: str = ""
    source_path: str = ""
    line: Optional[int] = None
    documented: bool = True

    @property
    def has_documentation(self) -> bool:
        return bool(self.documentation.strip())

    @property
    def line_number(self) -> int:
        return self.line or 0


@dataclass
class TypeRef:
    """Reference to a type as rendered upstream, optionally resolved to its element."""

    linked_name: str
    element: Optional["Container"] = None

    @property
    def name(self) -> str:
        if self.element is not None:
            return self.element.name
        return strip_markup(self.linked_name)


@dataclass
class Parameter:
    name: str
    type: str = "dynamic"
    is_named: bool = False
    is_required: bool = False
    default_value: Optional[str] = None

    @property
    def is_required_named(self) -> bool:
        return self.is_named and self.is_required

    @property
    def has_default_value(self) -> bool:
        return self.default_value is not None and self.default_value != ""


@dataclass
class Field(Documentable):
    kind: ClassVar[EntityKind] = EntityKind.FIELD

    type: str = "dynamic"
    is_static: bool = False
    is_const: bool = False
    is_final: bool = False
    is_late: bool = False
    is_override: bool = False
    has_explicit_getter: bool = False
    has_explicit_setter: bool = False

    @property
    def is_getter_only(self) -> bool:
        return self.has_explicit_getter and not self.has_explicit_setter


@dataclass
class Method(Documentable):
    kind: ClassVar[EntityKind] = EntityKind.METHOD

    return_type: str = "void"
    parameters: List[Parameter] = field(default_factory=list)
    is_static: bool = False
    is_abstract: bool = False
    is_override: bool = False
    is_operator: bool = False


@dataclass
class Constructor(Documentable):
    """A constructor; ``name`` is empty for the unnamed constructor."""

    kind: ClassVar[EntityKind] = EntityKind.CONSTRUCTOR

    owner: str = ""
    parameters: List[Parameter] = field(default_factory=list)

    @property
    def qualified_name(self) -> str:
        if not self.name:
            return self.owner
        return f"{self.owner}.{self.name}"


@dataclass
class Container(Documentable):
    """A class, enum, mixin or extension together with its members."""

    kind: EntityKind = EntityKind.CLASS
    is_abstract: bool = False
    supertype: Optional[TypeRef] = None
    mixins: List[TypeRef] = field(default_factory=list)
    interfaces: List[TypeRef] = field(default_factory=list)
    subclasses: List[TypeRef] = field(default_factory=list)
    superclass_constraints: List[TypeRef] = field(default_factory=list)
    extended_type: Optional[TypeRef] = None
    constructors: List[Constructor] = field(default_factory=list)
    fields: List[Field] = field(default_factory=list)
    methods: List[Method] = field(default_factory=list)
    values: List[Field] = field(default_factory=list)

    @property
    def instance_fields(self) -> List[Field]:
        return [item for item in self.fields if not item.is_static]

    @property
    def static_fields(self) -> List[Field]:
        return [item for item in self.fields if item.is_static]

    @property
    def instance_methods(self) -> List[Method]:
        return [item for item in self.methods if not item.is_static and not item.is_operator]

    @property
    def static_methods(self) -> List[Method]:
        return [item for item in self.methods if item.is_static]

    @property
    def operators(self) -> List[Method]:
        return [item for item in self.methods if item.is_operator and not item.is_static]


@dataclass
class Function(Documentable):
    kind: ClassVar[EntityKind] = EntityKind.FUNCTION

    return_type: str = "void"
    parameters: List[Parameter] = field(default_factory=list)


@dataclass
class Variable(Documentable):
    kind: ClassVar[EntityKind] = EntityKind.VARIABLE

    type: str = "dynamic"
    is_const: bool = False
    is_final: bool = False
    is_late: bool = False


@dataclass
class Library(Documentable):
    kind: ClassVar[EntityKind] = EntityKind.LIBRARY

    classes: List[Container] = field(default_factory=list)
    enums: List[Container] = field(default_factory=list)
    mixins: List[Container] = field(default_factory=list)
    extensions: List[Container] = field(default_factory=list)
    functions: List[Function] = field(default_factory=list)
    variables: List[Variable] = field(default_factory=list)

    @property
    def constants(self) -> List[Variable]:
        return [item for item in self.variables if item.is_const]

    def containers(self) -> Iterator[Container]:
        """Yield classes, enums, mixins and extensions in that order."""
        yield from self.classes
        yield from self.enums
        yield from self.mixins
        yield from self.extensions


@dataclass
class Package(Documentable):
    kind: ClassVar[EntityKind] = EntityKind.PACKAGE

    libraries: List[Library] = field(default_factory=list)


@dataclass
class PackageGraph:
    """Root of the model: the target package plus everything reachable from it."""

    default_package: Package
    packages: List[Package] = field(default_factory=list)

    @property
    def library_count(self) -> int:
        return sum(len(package.libraries) for package in self.packages)


__all__ = [
    "Constructor",
    "Container",
    "Documentable",
    "EntityKind",
    "Field",
    "Function",
    "Library",
    "Method",
    "Package",
    "PackageGraph",
    "Parameter",
    "TypeRef",
    "Variable",
]
