"""EstreeReader: converts ESTree-shaped JSON pattern nodes into typed Pattern nodes.

ESTree is the JSON AST format emitted by acorn, esprima, Babel (with the
``estree`` plugin) and typescript-estree. The reader accepts the parsed JSON
(Python dicts and lists) and uses recursive dispatch on the ``type`` member:

- Identifier          -> BindingIdent
- ArrayPattern        -> ArrayPat (``null`` elements become elided slots)
- ObjectPattern       -> ObjectPat
- RestElement         -> RestPat / RestPatProp
- AssignmentPattern   -> AssignPat
- TSParameterProperty -> the wrapped parameter (modifiers are dropped)
- anything else       -> ExprPat (the converter decides whether it is legal)

Babel's native node names (ObjectProperty, StringLiteral, NumericLiteral,
BigIntLiteral) are accepted alongside their ESTree equivalents.

Spans are read from ``range`` (esprima, typescript-estree) or ``start``/``end``
(acorn, Babel), plus ``loc.start`` for line/column when present.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from binding_params.ast.nodes import (
    ArrayPat,
    AssignPat,
    AssignPatProp,
    BigIntKey,
    BindingIdent,
    ComputedKey,
    Expr,
    ExprPat,
    IdentKey,
    KeyValuePatProp,
    NumKey,
    ObjectPat,
    ObjectPatProp,
    Pattern,
    PropName,
    RestPat,
    RestPatProp,
    Span,
    StrKey,
    TypeAnn,
)
from binding_params.errors import UnsupportedPatternError

# Type alias for a single ESTree node as parsed from JSON
EstreeNode = dict[str, Any]

_PROPERTY_TYPES = frozenset({"Property", "ObjectProperty"})
_ANNOTATION_WRAPPERS = frozenset({"TSTypeAnnotation", "TypeAnnotation"})


def span_of(node: EstreeNode) -> Span | None:
    """Return the Span of an ESTree node, or None if it carries no offsets."""
    line: int | None = None
    column: int | None = None
    loc = node.get("loc")
    if isinstance(loc, dict) and isinstance(loc.get("start"), dict):
        line = loc["start"].get("line")
        column = loc["start"].get("column")

    rng = node.get("range")
    if isinstance(rng, (list, tuple)) and len(rng) == 2:
        return Span(start=rng[0], end=rng[1], line=line, column=column)
    if isinstance(node.get("start"), int) and isinstance(node.get("end"), int):
        return Span(start=node["start"], end=node["end"], line=line, column=column)
    return None


@dataclass
class EstreeReader:
    """Builds Pattern trees from ESTree JSON.

    The reader is stateless; one instance may be reused for any number of
    nodes.

    Example::
        reader = EstreeReader()
        pattern = reader.build({"type": "Identifier", "name": "x", "optional": True})
        # pattern: BindingIdent(name="x", optional=True)
    """

    def build(self, node: EstreeNode) -> Pattern:
        """Convert one ESTree pattern node to a Pattern.

        Args:
            node: An ESTree node (dict with a ``type`` member).

        Returns:
            The corresponding Pattern node.

        Raises:
            ValueError: If ``node`` is not a dict with a ``type`` member, or a
                required member is missing.
        """
        node_type = _node_type(node)

        if node_type == "Identifier":
            return BindingIdent(
                name=_member(node, "name"),
                optional=bool(node.get("optional", False)),
                type_ann=self._type_ann(node),
                span=span_of(node),
            )

        if node_type == "ArrayPattern":
            return self._build_array(node)

        if node_type == "ObjectPattern":
            return self._build_object(node)

        if node_type == "RestElement":
            return RestPat(
                arg=self.build(_member(node, "argument")),
                type_ann=self._type_ann(node),
                span=span_of(node),
            )

        if node_type == "AssignmentPattern":
            right = _member(node, "right")
            return AssignPat(
                left=self.build(_member(node, "left")),
                right=Expr(node=right, span=span_of(right)),
                type_ann=self._type_ann(node),
                span=span_of(node),
            )

        if node_type == "TSParameterProperty":
            return self.build(_member(node, "parameter"))

        return ExprPat(expr=Expr(node=node, span=span_of(node)), span=span_of(node))

    def build_params(self, nodes: list[EstreeNode]) -> list[Pattern]:
        """Convert a function's ``params`` list, preserving order."""
        return [self.build(node) for node in nodes]

    def _build_array(self, node: EstreeNode) -> ArrayPat:
        elems = tuple(
            None if elem is None else self.build(elem)
            for elem in _member(node, "elements")
        )
        return ArrayPat(
            elems=elems,
            optional=bool(node.get("optional", False)),
            type_ann=self._type_ann(node),
            span=span_of(node),
        )

    def _build_object(self, node: EstreeNode) -> ObjectPat:
        props = tuple(self._build_prop(prop) for prop in _member(node, "properties"))
        return ObjectPat(
            props=props,
            optional=bool(node.get("optional", False)),
            type_ann=self._type_ann(node),
            span=span_of(node),
        )

    def _build_prop(self, prop: EstreeNode) -> ObjectPatProp:
        """Build one object-pattern property.

        Shorthand properties (``{a}``, ``{a = 1}``) become AssignPatProp;
        everything else written as ``key: pattern`` becomes KeyValuePatProp.
        """
        prop_type = _node_type(prop)

        if prop_type == "RestElement":
            return RestPatProp(
                arg=self.build(_member(prop, "argument")), span=span_of(prop)
            )

        if prop_type not in _PROPERTY_TYPES:
            raise UnsupportedPatternError(
                prop_type, span_of(prop), position="object pattern property"
            )

        value = _member(prop, "value")
        if prop.get("shorthand", False):
            key = _member(_member(prop, "key"), "name")
            if _node_type(value) == "AssignmentPattern":
                right = _member(value, "right")
                return AssignPatProp(
                    key=key,
                    value=Expr(node=right, span=span_of(right)),
                    span=span_of(prop),
                )
            return AssignPatProp(key=key, span=span_of(prop))

        return KeyValuePatProp(
            key=self._build_key(prop),
            value=self.build(value),
            span=span_of(prop),
        )

    def _build_key(self, prop: EstreeNode) -> PropName:
        key = _member(prop, "key")
        if prop.get("computed", False):
            return ComputedKey(expr=Expr(node=key, span=span_of(key)))

        key_type = _node_type(key)
        if key_type == "Identifier":
            return IdentKey(name=_member(key, "name"))
        if key_type == "StringLiteral":
            return StrKey(value=_member(key, "value"))
        if key_type == "NumericLiteral":
            return NumKey(value=float(_member(key, "value")))
        if key_type == "BigIntLiteral":
            return BigIntKey(value=int(_member(key, "value")))
        if key_type == "Literal":
            # ESTree marks bigint literals with a ``bigint`` member holding the digits
            if key.get("bigint") is not None:
                return BigIntKey(value=int(key["bigint"]))
            value = key.get("value")
            # bool subclasses int
            if isinstance(value, str):
                return StrKey(value=value)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return NumKey(value=float(value))

        msg = f"Unsupported property key: {key_type!r}"
        raise ValueError(msg)

    def _type_ann(self, node: EstreeNode) -> TypeAnn | None:
        """Unwrap ``typeAnnotation`` down to the type node itself.

        The TSTypeAnnotation wrapper's span includes the leading colon, so the
        inner node's span is used instead.
        """
        ann = node.get("typeAnnotation")
        if not isinstance(ann, dict):
            return None
        if ann.get("type") in _ANNOTATION_WRAPPERS and isinstance(
            ann.get("typeAnnotation"), dict
        ):
            ann = ann["typeAnnotation"]
        return TypeAnn(node=ann, span=span_of(ann))


def _node_type(node: Any) -> str:
    if not isinstance(node, dict) or not isinstance(node.get("type"), str):
        msg = f"Expected an ESTree node with a 'type' member, got {node!r}"
        raise ValueError(msg)
    return node["type"]


def _member(node: EstreeNode, name: str) -> Any:
    if name not in node:
        msg = f"ESTree {node.get('type', '?')} node is missing required member {name!r}"
        raise ValueError(msg)
    return node[name]
