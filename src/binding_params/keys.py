"""Property-name resolution for object-pattern keys.

Maps each PropName variant to the text shown in descriptors:

- IdentKey    -> the identifier          ``{foo: x}``    -> ``"foo"``
- StrKey      -> the unescaped value     ``{"a-b": x}``  -> ``"a-b"``
- NumKey      -> canonical decimal text  ``{1.0: x}``    -> ``"1"``
- BigIntKey   -> decimal digits          ``{10n: x}``    -> ``"10"``
- ComputedKey -> source text of the expression, or the ``<UNAVAILABLE>``
  sentinel when no source provider is given. Never evaluated, never fails.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from binding_params.ast.nodes import BigIntKey, ComputedKey, IdentKey, NumKey, StrKey
from binding_params.config import ConverterConfig

if TYPE_CHECKING:
    from binding_params.ast.nodes import PropName
    from binding_params.protocols import SourceProvider

__all__ = ["format_number", "prop_name_to_string"]

_DEFAULT_CONFIG = ConverterConfig()


def format_number(value: float) -> str:
    """Return the canonical decimal text of a numeric key.

    Uses the shortest digits that round-trip the float, printed without a
    fraction when integral and never in exponent notation. Negative zero
    keeps its sign::

        format_number(1.0)    # "1"
        format_number(1.5)    # "1.5"
        format_number(1e23)   # "100000000000000000000000"
        format_number(1e-7)   # "0.0000001"
        format_number(-0.0)   # "-0"
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr() gives the shortest round-tripping digits; Decimal drops the exponent
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def prop_name_to_string(
    prop_name: PropName,
    source: SourceProvider | None = None,
    config: ConverterConfig | None = None,
) -> str:
    """Return the canonical text of an object-pattern key.

    Args:
        prop_name: The key node.
        source:    Optional source provider, used only for computed keys.
        config:    Supplies the unavailable-key sentinel. Defaults to
                   ``ConverterConfig()`` when None.

    Returns:
        The key text. For a computed key this is the exact source of the
        bracketed expression (``[1+1]`` -> ``"1+1"``).

    Raises:
        TypeError: If ``prop_name`` is not a PropName variant.
    """
    if isinstance(prop_name, IdentKey):
        return prop_name.name
    if isinstance(prop_name, StrKey):
        return prop_name.value
    if isinstance(prop_name, NumKey):
        return format_number(prop_name.value)
    if isinstance(prop_name, BigIntKey):
        return str(prop_name.value)
    if isinstance(prop_name, ComputedKey):
        span = prop_name.expr.span
        if source is None or span is None:
            return (config or _DEFAULT_CONFIG).unavailable_key
        return source.span_text(span)

    raise TypeError(f"Unsupported property name type: {type(prop_name)!r}")
