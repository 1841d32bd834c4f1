"""PatternConverter: converts binding-pattern nodes into parameter descriptors.

Uses recursive dispatch over the pattern node variants:

- BindingIdent -> IdentifierDef
- ArrayPat     -> ArrayDef (elided slots stay ``None``, positions preserved)
- ObjectPat    -> ObjectDef (property order preserved)
- RestPat      -> RestDef
- AssignPat    -> AssignDef (default expression replaced by a placeholder)

Type annotations go through the injected TypeConverter; object keys through
``prop_name_to_string``. Any other node kind (e.g. an ExprPat such as ``a.b``)
raises UnsupportedPatternError with the node's location.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from binding_params.ast.nodes import (
    ArrayPat,
    AssignPat,
    AssignPatProp,
    BindingIdent,
    KeyValuePatProp,
    ObjectPat,
    RestPat,
    RestPatProp,
)
from binding_params.config import ConverterConfig
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
from binding_params.errors import UnsupportedPatternError
from binding_params.keys import prop_name_to_string

if TYPE_CHECKING:
    from binding_params.ast.nodes import Expr, ObjectPatProp, Pattern, TypeAnn
    from binding_params.protocols import SourceProvider, TypeConverter

__all__ = ["PatternConverter"]

_FN_PARAM_TYPES = (BindingIdent, ArrayPat, ObjectPat, RestPat)


class PatternConverter:
    """Converts pattern nodes to ParamDef trees.

    The converter holds only its injected collaborators and configuration, so
    one instance may convert any number of patterns, from any thread.

    Example::

        converter = PatternConverter()
        param = converter.convert(
            ObjectPat(props=(KeyValuePatProp(IdentKey("a"), BindingIdent("b")),))
        )
        # param: ObjectDef(properties=(KeyValuePropDef(key="a", value=...),))
    """

    def __init__(
        self,
        type_converter: TypeConverter | None = None,
        source: SourceProvider | None = None,
        config: ConverterConfig | None = None,
    ) -> None:
        """Initialise the converter.

        Args:
            type_converter: Resolves type annotations. When None, annotated
                patterns produce descriptors without a type.
            source: Source text of the parsed file. Used for computed keys and,
                if enabled in ``config``, default-value text.
            config: Placeholder settings. Defaults to ``ConverterConfig()``.
        """
        self._type_converter = type_converter
        self._source = source
        self._config = config if config is not None else ConverterConfig()

    @property
    def config(self) -> ConverterConfig:
        return self._config

    def convert(self, pattern: Pattern) -> ParamDef:
        """Convert any binding pattern, recursing into nested patterns.

        Raises:
            UnsupportedPatternError: If ``pattern`` (or any nested pattern) is
                not one of the five binding-pattern kinds.
        """
        if isinstance(pattern, BindingIdent):
            return IdentifierDef(
                name=pattern.name,
                optional=pattern.optional,
                ts_type=self._type_def(pattern.type_ann),
            )

        if isinstance(pattern, ArrayPat):
            return ArrayDef(
                elements=tuple(
                    None if elem is None else self.convert(elem)
                    for elem in pattern.elems
                ),
                optional=pattern.optional,
                ts_type=self._type_def(pattern.type_ann),
            )

        if isinstance(pattern, ObjectPat):
            return ObjectDef(
                properties=tuple(self.convert_prop(prop) for prop in pattern.props),
                optional=pattern.optional,
                ts_type=self._type_def(pattern.type_ann),
            )

        if isinstance(pattern, RestPat):
            return RestDef(
                inner=self.convert(pattern.arg),
                ts_type=self._type_def(pattern.type_ann),
            )

        if isinstance(pattern, AssignPat):
            return AssignDef(
                target=self.convert(pattern.left),
                default_text=self._default_text(pattern.right),
                ts_type=self._type_def(pattern.type_ann),
            )

        raise UnsupportedPatternError(
            _kind_of(pattern), getattr(pattern, "span", None)
        )

    def convert_fn_param(self, pattern: Pattern) -> ParamDef:
        """Convert a top-level function-type parameter.

        Only BindingIdent, ArrayPat, ObjectPat and RestPat are legal here; a
        default value is not allowed at the top level of a function type's
        parameter list (``(x = 1) => void`` is not valid). Nested patterns are
        converted with ``convert`` and may carry defaults.

        Raises:
            UnsupportedPatternError: For any other kind, including AssignPat.
        """
        if not isinstance(pattern, _FN_PARAM_TYPES):
            raise UnsupportedPatternError(
                _kind_of(pattern),
                getattr(pattern, "span", None),
                position="function parameter",
            )
        return self.convert(pattern)

    def convert_prop(self, prop: ObjectPatProp) -> PropDef:
        """Convert one object-pattern property.

        The rebinding target of ``key: value`` is kept in the ``value``
        descriptor; shorthand defaults record only their presence.
        """
        if isinstance(prop, KeyValuePatProp):
            return KeyValuePropDef(
                key=prop_name_to_string(prop.key, self._source, self._config),
                value=self.convert(prop.value),
            )

        if isinstance(prop, AssignPatProp):
            return AssignPropDef(key=prop.key, has_default=prop.value is not None)

        if isinstance(prop, RestPatProp):
            return RestPropDef(inner=self.convert(prop.arg))

        raise UnsupportedPatternError(
            _kind_of(prop),
            getattr(prop, "span", None),
            position="object pattern property",
        )

    def _type_def(self, type_ann: TypeAnn | None) -> TypeDef | None:
        if type_ann is None or self._type_converter is None:
            return None
        return self._type_converter(type_ann)

    def _default_text(self, expr: Expr) -> str:
        if (
            self._config.capture_default_source
            and self._source is not None
            and expr.span is not None
        ):
            return self._source.span_text(expr.span)
        return self._config.default_placeholder


def _kind_of(node: object) -> str:
    kind = getattr(node, "kind", None)
    return str(kind) if kind is not None else type(node).__name__
