"""Single-line declaration signatures for callables, fields and types."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import Container, Documentable, EntityKind, Field, Method, Parameter, Variable
from .text import strip_markup


def format_parameters(parameters: Sequence[Parameter]) -> str:
    """Render a parameter list without the surrounding parentheses."""
    rendered: List[str] = []
    for parameter in parameters:
        text = f"{strip_markup(parameter.type)} {parameter.name}"
        if parameter.is_required_named:
            text = f"required {text}"
        if parameter.has_default_value:
            text = f"{text} = {parameter.default_value}"
        rendered.append(text)
    return ", ".join(rendered)


def format_signature(entity: Documentable, keyword: Optional[str] = None) -> str:
    """Return ``entity`` as a one-line declaration.

    ``keyword`` (``static``, ``const`` ...) is prepended when given. Operators get the
    ``operator`` keyword in front of their name.
    """
    kind = getattr(entity, "kind", None)
    if kind in (EntityKind.METHOD, EntityKind.FUNCTION):
        return_type = strip_markup(entity.return_type)  # type: ignore[attr-defined]
        name = entity.name
        if kind is EntityKind.METHOD and entity.is_operator:  # type: ignore[attr-defined]
            name = f"operator {name}"
        params = format_parameters(entity.parameters)  # type: ignore[attr-defined]
        body = f"{return_type} {name}({params})"
    elif kind is EntityKind.CONSTRUCTOR:
        params = format_parameters(entity.parameters)  # type: ignore[attr-defined]
        body = f"{entity.qualified_name}({params})"  # type: ignore[attr-defined]
    elif kind in (EntityKind.FIELD, EntityKind.VARIABLE):
        body = f"{strip_markup(entity.type)} {entity.name}"  # type: ignore[attr-defined]
    else:
        raise TypeError(f"Cannot format a signature for {kind!r} entity '{entity.name}'")
    if keyword:
        return f"{keyword} {body}"
    return body


def format_getter(field: Field) -> str:
    return f"{strip_markup(field.type)} get {field.name}"


def format_declaration(container: Container, *, root_type: str = "Object") -> str:
    """Declaration line for a page header, e.g. ``abstract class Foo extends Bar``."""
    if container.kind is not EntityKind.CLASS:
        return f"{container.kind.value} {container.name}"
    declaration = f"class {container.name}"
    if container.is_abstract:
        declaration = f"abstract {declaration}"
    supertype = container.supertype
    if supertype is not None and supertype.name != root_type:
        declaration += f" extends {supertype.name}"
    return declaration


def field_modifiers(field: Field) -> List[str]:
    flags = (
        ("static", field.is_static),
        ("const", field.is_const),
        ("final", field.is_final),
        ("late", field.is_late),
        ("override", field.is_override),
    )
    return [name for name, enabled in flags if enabled]


def method_modifiers(method: Method) -> List[str]:
    flags = (
        ("static", method.is_static),
        ("abstract", method.is_abstract),
        ("override", method.is_override),
    )
    return [name for name, enabled in flags if enabled]


def variable_modifiers(variable: Variable) -> List[str]:
    flags = (
        ("const", variable.is_const),
        ("final", variable.is_final),
        ("late", variable.is_late),
    )
    return [name for name, enabled in flags if enabled]


def format_modifiers(modifiers: Iterable[str]) -> str:
    """``["static", "final"]`` -> ``"[static, final] "``; empty input -> ``""``."""
    items = list(modifiers)
    if not items:
        return ""
    return f"[{', '.join(items)}] "


__all__ = [
    "field_modifiers",
    "format_declaration",
    "format_getter",
    "format_modifiers",
    "format_parameters",
    "format_signature",
    "method_modifiers",
    "variable_modifiers",
]
