"""Load a serialised package graph (JSON or YAML) into the semantic model."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .logging import get_logger
from .models import (
    Constructor,
    Container,
    EntityKind,
    Field,
    Function,
    Library,
    Method,
    Package,
    PackageGraph,
    Parameter,
    TypeRef,
    Variable,
)

_YAML_SUFFIXES = {".yml", ".yaml"}


class ModelError(ValueError):
    """Raised when a model document violates the expected input contract."""


def load_package_graph(path: Path) -> PackageGraph:
    """Read ``path`` and build the package graph it describes."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            payload = yaml.safe_load(text)
        else:
            payload = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ModelError(f"Failed to parse model file {path.name}: {exc}") from exc
    return GraphLoader().load(payload)


class GraphLoader:
    """Builds model objects from plain mappings, then resolves type references by name."""

    def __init__(self) -> None:
        self.logger = get_logger("loader")
        self._registry: Dict[str, Container] = {}
        self._refs: List[TypeRef] = []

    def load(self, payload: Any) -> PackageGraph:
        data = _require_mapping(payload, "model")
        packages_data = data.get("packages")
        if not isinstance(packages_data, list) or not packages_data:
            raise ModelError("model must define a non-empty 'packages' list")

        packages = [self._package(item) for item in packages_data]
        self._resolve_refs()

        default_name = data.get("default_package")
        if default_name is None:
            default_package = packages[0]
        else:
            matches = [package for package in packages if package.name == default_name]
            if not matches:
                raise ModelError(f"default_package '{default_name}' is not among the packages")
            default_package = matches[0]

        self.logger.debug(
            "Loaded %d packages; default package is %s", len(packages), default_package.name
        )
        return PackageGraph(default_package=default_package, packages=packages)

    def _package(self, payload: Any) -> Package:
        data = _require_mapping(payload, "package")
        libraries_data = data.get("libraries", [])
        if not isinstance(libraries_data, list):
            raise ModelError(f"package '{data.get('name')}' has a non-list 'libraries' entry")
        return Package(
            libraries=[self._library(item) for item in libraries_data],
            **_documentable(data, "package", parent_source=""),
        )

    def _library(self, payload: Any) -> Library:
        data = _require_mapping(payload, "library")
        common = _documentable(data, "library", parent_source="")
        if not common["source_path"]:
            raise ModelError(f"library '{common['name']}' is missing 'source'")
        source = common["source_path"]
        return Library(
            classes=self._containers(data, "classes", EntityKind.CLASS, source),
            enums=self._containers(data, "enums", EntityKind.ENUM, source),
            mixins=self._containers(data, "mixins", EntityKind.MIXIN, source),
            extensions=self._containers(data, "extensions", EntityKind.EXTENSION, source),
            functions=[
                self._function(item, source) for item in _list(data, "functions")
            ],
            variables=[
                self._variable(item, source) for item in _list(data, "variables")
            ],
            **common,
        )

    def _containers(
        self, data: Mapping[str, Any], key: str, kind: EntityKind, source: str
    ) -> List[Container]:
        return [self._container(item, kind, source) for item in _list(data, key)]

    def _container(self, payload: Any, kind: EntityKind, parent_source: str) -> Container:
        data = _require_mapping(payload, kind.value)
        common = _documentable(data, kind.value, parent_source=parent_source)
        name = common["name"]
        source = common["source_path"]

        superclass_constraints: List[TypeRef] = []
        extended_type: Optional[TypeRef] = None
        on_value = data.get("on")
        if kind is EntityKind.EXTENSION and on_value is not None:
            extended_type = self._ref(on_value)
        elif on_value is not None:
            superclass_constraints = self._refs_for(on_value)

        extends = data.get("extends")
        container = Container(
            kind=kind,
            is_abstract=bool(data.get("abstract", False)),
            supertype=self._ref(extends) if extends else None,
            mixins=self._refs_for(data.get("mixins")),
            interfaces=self._refs_for(data.get("implements")),
            subclasses=self._refs_for(data.get("subclasses")),
            superclass_constraints=superclass_constraints,
            extended_type=extended_type,
            constructors=[
                self._constructor(item, name, source) for item in _list(data, "constructors")
            ],
            fields=[self._field(item, source) for item in _list(data, "fields")],
            methods=[self._method(item, source) for item in _list(data, "methods")],
            values=[
                self._field(item, source, default_type=name, enum_value=True)
                for item in _list(data, "values")
            ],
            **common,
        )
        self._registry.setdefault(_base_name(name), container)
        return container

    def _constructor(self, payload: Any, owner: str, parent_source: str) -> Constructor:
        data = _require_mapping(payload, "constructor")
        return Constructor(
            owner=owner,
            parameters=_parameters(data),
            **_documentable(data, "constructor", parent_source=parent_source, allow_unnamed=True),
        )

    def _field(
        self,
        payload: Any,
        parent_source: str,
        *,
        default_type: str = "dynamic",
        enum_value: bool = False,
    ) -> Field:
        data = _require_mapping(payload, "field")
        return Field(
            type=str(data.get("type", default_type)),
            is_static=bool(data.get("static", enum_value)),
            is_const=bool(data.get("const", enum_value)),
            is_final=bool(data.get("final", enum_value)),
            is_late=bool(data.get("late", False)),
            is_override=bool(data.get("override", False)),
            has_explicit_getter=bool(data.get("getter", False)),
            has_explicit_setter=bool(data.get("setter", False)),
            **_documentable(data, "field", parent_source=parent_source),
        )

    def _method(self, payload: Any, parent_source: str) -> Method:
        data = _require_mapping(payload, "method")
        return Method(
            return_type=str(data.get("return_type", "void")),
            parameters=_parameters(data),
            is_static=bool(data.get("static", False)),
            is_abstract=bool(data.get("abstract", False)),
            is_override=bool(data.get("override", False)),
            is_operator=bool(data.get("operator", False)),
            **_documentable(data, "method", parent_source=parent_source),
        )

    def _function(self, payload: Any, parent_source: str) -> Function:
        data = _require_mapping(payload, "function")
        return Function(
            return_type=str(data.get("return_type", "void")),
            parameters=_parameters(data),
            **_documentable(data, "function", parent_source=parent_source),
        )

    def _variable(self, payload: Any, parent_source: str) -> Variable:
        data = _require_mapping(payload, "variable")
        return Variable(
            type=str(data.get("type", "dynamic")),
            is_const=bool(data.get("const", False)),
            is_final=bool(data.get("final", False)),
            is_late=bool(data.get("late", False)),
            **_documentable(data, "variable", parent_source=parent_source),
        )

    def _ref(self, value: Any) -> TypeRef:
        if not isinstance(value, str) or not value:
            raise ModelError(f"type reference must be a non-empty string, got {value!r}")
        ref = TypeRef(linked_name=value)
        self._refs.append(ref)
        return ref

    def _refs_for(self, value: Any) -> List[TypeRef]:
        if value is None:
            return []
        if isinstance(value, str):
            return [self._ref(value)]
        if not isinstance(value, list):
            raise ModelError(f"expected a list of type references, got {value!r}")
        return [self._ref(item) for item in value]

    def _resolve_refs(self) -> None:
        unresolved = 0
        for ref in self._refs:
            ref.element = self._registry.get(_base_name(ref.name))
            if ref.element is None:
                unresolved += 1
        if unresolved:
            self.logger.debug("%d type references have no declaration in the model", unresolved)


def _documentable(
    data: Mapping[str, Any],
    what: str,
    *,
    parent_source: str,
    allow_unnamed: bool = False,
) -> Dict[str, Any]:
    name = data.get("name", "" if allow_unnamed else None)
    if not isinstance(name, str) or (not name and not allow_unnamed):
        raise ModelError(f"{what} entry is missing a 'name': {dict(data)!r}")
    documentation = str(data.get("documentation") or "")
    line = data.get("line")
    if line is not None and (isinstance(line, bool) or not isinstance(line, int)):
        raise ModelError(f"{what} '{name}' has a non-integer line: {line!r}")
    return {
        "name": name,
        "documentation": documentation,
        "one_line_doc": str(data.get("summary") or documentation),
        "source_path": str(data.get("source") or parent_source),
        "line": line,
        "documented": bool(data.get("documented", True)),
    }


def _parameters(data: Mapping[str, Any]) -> List[Parameter]:
    parameters: List[Parameter] = []
    for item in _list(data, "parameters"):
        entry = _require_mapping(item, "parameter")
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise ModelError(f"parameter entry is missing a 'name': {entry!r}")
        default = _default_value(entry.get("default"), name)
        parameters.append(
            Parameter(
                name=name,
                type=str(entry.get("type", "dynamic")),
                is_named=bool(entry.get("named", False)),
                is_required=bool(entry.get("required", False)),
                default_value=default,
            )
        )
    return parameters


def _default_value(value: Any, parameter: str) -> Optional[str]:
    """Default values are source expressions; scalars are written as the source would."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise ModelError(f"parameter '{parameter}' has a non-scalar default: {value!r}")


def _base_name(name: str) -> str:
    return name.split("<", 1)[0].strip()


def _list(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ModelError(f"'{key}' must be a list")
    return value


def _require_mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ModelError(f"{what} entry must be a mapping, got {type(value).__name__}")
    return value


__all__ = ["GraphLoader", "ModelError", "load_package_graph"]
