"""Stock collaborator implementations backed by the original source text.

SourceText satisfies the ``SourceProvider`` protocol; SourceTypeConverter
satisfies ``TypeConverter`` by printing an annotation exactly as written.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from binding_params.descriptors import UNAVAILABLE_KEY, TypeDef

if TYPE_CHECKING:
    from binding_params.ast.nodes import Span, TypeAnn
    from binding_params.protocols import SourceProvider

__all__ = ["SourceText", "SourceTypeConverter"]


@dataclass(frozen=True, slots=True)
class SourceText:
    """An already-loaded source buffer.

    Offsets are character offsets into ``text``. A span reaching past the end
    is truncated rather than rejected.

    Example::
        source = SourceText("function f({[1+1]: x}) {}")
        source.span_text(Span(13, 16))   # "1+1"
    """

    text: str

    def span_text(self, span: Span) -> str:
        return self.text[span.start : span.end]


@dataclass(frozen=True, slots=True)
class SourceTypeConverter:
    """TypeConverter that uses the annotation's own source text as ``repr``.

    ``kind`` is taken from the annotation node's ``type`` member when the node
    is an ESTree dict (e.g. ``"TSNumberKeyword"``). Annotations without a
    span get ``unavailable`` as their ``repr``; pass
    ``config.unavailable_key`` to match a ConverterConfig.
    """

    source: SourceProvider
    unavailable: str = UNAVAILABLE_KEY

    def __call__(self, type_ann: TypeAnn) -> TypeDef:
        kind = None
        if isinstance(type_ann.node, dict):
            kind = type_ann.node.get("type")
        if type_ann.span is None:
            return TypeDef(repr=self.unavailable, kind=kind)
        return TypeDef(repr=self.source.span_text(type_ann.span), kind=kind)
