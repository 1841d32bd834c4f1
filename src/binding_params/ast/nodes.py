"""Typed binding-pattern nodes and the PatternKind StrEnum.

These are the input nodes consumed by PatternConverter. They mirror the
shapes a JavaScript/TypeScript parser produces for the left-hand side of
parameters and destructuring assignments:

- BindingIdent -> ``x``, ``x?: T``
- ArrayPat     -> ``[a, , b]``
- ObjectPat    -> ``{a, b: c, ...rest}``
- RestPat      -> ``...args``
- AssignPat    -> ``x = 1``
- ExprPat      -> ``a.b`` (an assignment target that is not a binding pattern)

Expressions and type annotations are opaque to this package. They are carried
in ``Expr`` / ``TypeAnn`` wrappers together with their source span so that the
original text can be recovered from a SourceProvider when one is available.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, ClassVar


class PatternKind(StrEnum):
    """Enumeration of pattern node kinds.

    The first five are legal binding patterns. EXPR is a valid assignment
    target but never a legal parameter, so the converter rejects it.
    """

    IDENT = auto()
    ARRAY = auto()
    OBJECT = auto()
    REST = auto()
    ASSIGN = auto()
    EXPR = auto()


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` character range into the original source.

    Attributes:
        start:  Offset of the first character.
        end:    Offset one past the last character.
        line:   1-based line of ``start``, when the parser reports it.
        column: 0-based column of ``start``, when the parser reports it.
    """

    start: int
    end: int
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        if self.line is not None:
            return f"{self.line}:{self.column or 0}"
        return f"{self.start}..{self.end}"


@dataclass(frozen=True, slots=True)
class Expr:
    """An opaque expression node (default values, computed keys, targets)."""

    node: Any = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class TypeAnn:
    """An opaque type-annotation node, handed to the TypeConverter as-is."""

    node: Any = None
    span: Span | None = None


# ---------------------------------------------------------------------------
# Property names
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class IdentKey:
    name: str


@dataclass(frozen=True, slots=True)
class StrKey:
    value: str


@dataclass(frozen=True, slots=True)
class NumKey:
    value: float


@dataclass(frozen=True, slots=True)
class BigIntKey:
    value: int


@dataclass(frozen=True, slots=True)
class ComputedKey:
    """A bracketed key. ``expr.span`` covers the expression, not the brackets."""

    expr: Expr


PropName = IdentKey | StrKey | NumKey | BigIntKey | ComputedKey


# ---------------------------------------------------------------------------
# Object pattern properties
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class KeyValuePatProp:
    """``key: value`` where ``value`` is any nested pattern."""

    key: PropName
    value: Pattern
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class AssignPatProp:
    """Shorthand ``key`` or ``key = default``; ``value`` is None without default."""

    key: str
    value: Expr | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class RestPatProp:
    arg: Pattern
    span: Span | None = None


ObjectPatProp = KeyValuePatProp | AssignPatProp | RestPatProp


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class BindingIdent:
    kind: ClassVar[PatternKind] = PatternKind.IDENT

    name: str
    optional: bool = False
    type_ann: TypeAnn | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class ArrayPat:
    """Array destructuring. ``None`` entries in ``elems`` are elided slots."""

    kind: ClassVar[PatternKind] = PatternKind.ARRAY

    elems: tuple[Pattern | None, ...] = ()
    optional: bool = False
    type_ann: TypeAnn | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class ObjectPat:
    kind: ClassVar[PatternKind] = PatternKind.OBJECT

    props: tuple[ObjectPatProp, ...] = ()
    optional: bool = False
    type_ann: TypeAnn | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class RestPat:
    kind: ClassVar[PatternKind] = PatternKind.REST

    arg: Pattern
    type_ann: TypeAnn | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class AssignPat:
    """``left = right``. ``right`` is never evaluated."""

    kind: ClassVar[PatternKind] = PatternKind.ASSIGN

    left: Pattern
    right: Expr
    type_ann: TypeAnn | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class ExprPat:
    """An expression used as an assignment target, e.g. ``[obj.prop] = xs``."""

    kind: ClassVar[PatternKind] = PatternKind.EXPR

    expr: Expr
    span: Span | None = None


Pattern = BindingIdent | ArrayPat | ObjectPat | RestPat | AssignPat | ExprPat

# Patterns that may appear directly in a function-type parameter list.
FnParam = BindingIdent | ArrayPat | ObjectPat | RestPat
