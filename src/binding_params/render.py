"""Canonical text rendering of parameter descriptors.

Rendering is a pure recursive walk over the descriptor tree and never looks at
the original AST. Output has no leading or trailing whitespace:

==========  ===========================================================
identifier  ``name`` + ``?`` if optional + ``: type`` if typed
array       ``[a, , b]`` + ``?`` + ``: type`` (holes render empty)
object      ``{a, b, ...c}`` + ``?`` + ``: type``
rest        ``...`` + inner + ``: type``
assign      target + ``: type`` (the default value is omitted)
keyValue    ``key`` only; the rebinding target is not part of a signature
assign      ``key`` only, with or without a default
rest        ``...`` + inner
==========  ===========================================================
"""

from __future__ import annotations

from collections.abc import Iterable

from binding_params.descriptors import (
    ArrayDef,
    AssignDef,
    AssignPropDef,
    IdentifierDef,
    KeyValuePropDef,
    ObjectDef,
    ParamDef,
    PropDef,
    RestDef,
    RestPropDef,
    TypeDef,
)

__all__ = ["render", "render_params"]


def render(node: ParamDef | PropDef) -> str:
    """Render a parameter or property descriptor.

    Raises:
        TypeError: If ``node`` is not a descriptor.
    """
    if isinstance(node, IdentifierDef):
        return f"{node.name}{_optional(node.optional)}{_type_suffix(node.ts_type)}"

    if isinstance(node, ArrayDef):
        elements = ", ".join("" if el is None else render(el) for el in node.elements)
        return f"[{elements}]{_optional(node.optional)}{_type_suffix(node.ts_type)}"

    if isinstance(node, ObjectDef):
        props = ", ".join(render(prop) for prop in node.properties)
        return f"{{{props}}}{_optional(node.optional)}{_type_suffix(node.ts_type)}"

    if isinstance(node, RestDef):
        return f"...{render(node.inner)}{_type_suffix(node.ts_type)}"

    if isinstance(node, AssignDef):
        # Default values are not representable, so only the target is shown
        return f"{render(node.target)}{_type_suffix(node.ts_type)}"

    if isinstance(node, (KeyValuePropDef, AssignPropDef)):
        return node.key

    if isinstance(node, RestPropDef):
        return f"...{render(node.inner)}"

    raise TypeError(f"Unsupported descriptor type: {type(node)!r}")


def render_params(params: Iterable[ParamDef]) -> str:
    """Render a whole parameter list, e.g. ``(a, {b, c}?, ...rest: T[])``."""
    return "(" + ", ".join(render(param) for param in params) + ")"


def _optional(optional: bool) -> str:
    return "?" if optional else ""


def _type_suffix(ts_type: TypeDef | None) -> str:
    return "" if ts_type is None else f": {ts_type}"
