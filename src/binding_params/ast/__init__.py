"""AST subpackage: binding-pattern input nodes and the ESTree reader.

Re-exports the public API for the ast module:
- PatternKind: StrEnum of pattern node kinds
- BindingIdent, ArrayPat, ObjectPat, RestPat, AssignPat, ExprPat: pattern nodes
- KeyValuePatProp, AssignPatProp, RestPatProp: object pattern properties
- IdentKey, StrKey, NumKey, BigIntKey, ComputedKey: property names
- Span, Expr, TypeAnn: source locations and opaque wrappers
- EstreeReader: converts ESTree JSON into pattern nodes
"""

from binding_params.ast.estree import EstreeReader
from binding_params.ast.nodes import (
    ArrayPat,
    AssignPat,
    AssignPatProp,
    BigIntKey,
    BindingIdent,
    ComputedKey,
    Expr,
    ExprPat,
    FnParam,
    IdentKey,
    KeyValuePatProp,
    NumKey,
    ObjectPat,
    ObjectPatProp,
    Pattern,
    PatternKind,
    PropName,
    RestPat,
    RestPatProp,
    Span,
    StrKey,
    TypeAnn,
)

__all__ = [
    "ArrayPat",
    "AssignPat",
    "AssignPatProp",
    "BigIntKey",
    "BindingIdent",
    "ComputedKey",
    "EstreeReader",
    "Expr",
    "ExprPat",
    "FnParam",
    "IdentKey",
    "KeyValuePatProp",
    "NumKey",
    "ObjectPat",
    "ObjectPatProp",
    "Pattern",
    "PatternKind",
    "PropName",
    "RestPat",
    "RestPatProp",
    "Span",
    "StrKey",
    "TypeAnn",
]
