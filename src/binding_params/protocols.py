"""Collaborator protocols for binding-params.

Defines the structural interfaces of the two injected collaborators:

- ``TypeConverter``: turns a type-annotation node into a ``TypeDef``.
- ``SourceProvider``: returns the original source text of a span.

Users can plug in their own implementations without inheriting from any base
class; any conformant object passes ``isinstance`` checks.

Example::

    from binding_params.descriptors import TypeDef
    from binding_params.protocols import TypeConverter

    def my_converter(type_ann):
        return TypeDef(repr=type_ann.node["typeName"]["name"])

    assert isinstance(my_converter, TypeConverter)  # any callable conforms
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from binding_params.ast.nodes import Span, TypeAnn
    from binding_params.descriptors import TypeDef


@runtime_checkable
class TypeConverter(Protocol):
    """Structural protocol for type-annotation converters.

    Called with the ``TypeAnn`` of a pattern node; must return a ``TypeDef``
    whose ``repr`` is the printable type. The result is attached to the
    descriptor verbatim.
    """

    def __call__(self, type_ann: TypeAnn) -> TypeDef: ...


@runtime_checkable
class SourceProvider(Protocol):
    """Structural protocol for read-only access to the parsed source text."""

    def span_text(self, span: Span) -> str: ...
