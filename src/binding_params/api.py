"""Public API functions for binding-params.

This module provides the user-facing entry points: single-pattern conversion
(pat_to_param_def, fn_param_to_param_def, param_from_estree) and the
per-entry documentation build (build_entry, build_entries). Each call creates
a fresh PatternConverter so that no state is shared between calls.

build_entries isolates failures: a malformed parameter list in one entry is
recorded on that entry's ParamsResult and logged, and the remaining entries
are still converted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from binding_params.ast.estree import EstreeReader
from binding_params.converter import PatternConverter
from binding_params.errors import UnsupportedPatternError
from binding_params.result import ParamsResult

if TYPE_CHECKING:
    from binding_params.ast.nodes import Pattern
    from binding_params.config import ConverterConfig
    from binding_params.descriptors import ParamDef
    from binding_params.protocols import SourceProvider, TypeConverter

__all__ = [
    "build_entries",
    "build_entry",
    "fn_param_to_param_def",
    "param_from_estree",
    "pat_to_param_def",
]

logger = logging.getLogger(__name__)

# Stateless, safe to share across calls
_reader = EstreeReader()

# A parameter given either as a typed Pattern node or as ESTree JSON
ParamInput = Any


def pat_to_param_def(
    pattern: Pattern,
    type_converter: TypeConverter | None = None,
    source: SourceProvider | None = None,
    config: ConverterConfig | None = None,
) -> ParamDef:
    """Convert any binding pattern (including defaults) to a descriptor.

    Args:
        pattern:        The pattern node.
        type_converter: Resolves type annotations. Optional.
        source:         Source text, used for computed keys. Optional.
        config:         Placeholder settings. Defaults to ``ConverterConfig()``.

    Returns:
        The descriptor tree.

    Raises:
        UnsupportedPatternError: If the pattern contains an illegal node kind.
    """
    converter = PatternConverter(type_converter, source, config)
    return converter.convert(pattern)


def fn_param_to_param_def(
    pattern: Pattern,
    type_converter: TypeConverter | None = None,
    source: SourceProvider | None = None,
    config: ConverterConfig | None = None,
) -> ParamDef:
    """Convert a top-level function-type parameter (no default allowed).

    Raises:
        UnsupportedPatternError: If ``pattern`` is an AssignPat or another
            illegal kind.
    """
    converter = PatternConverter(type_converter, source, config)
    return converter.convert_fn_param(pattern)


def param_from_estree(
    node: dict[str, Any],
    type_converter: TypeConverter | None = None,
    source: SourceProvider | None = None,
    config: ConverterConfig | None = None,
) -> ParamDef:
    """Read an ESTree pattern node and convert it in one step.

    Raises:
        UnsupportedPatternError: If the node is not a legal binding pattern.
        ValueError: If the ESTree JSON is malformed.
    """
    return pat_to_param_def(_reader.build(node), type_converter, source, config)


def build_entry(
    name: str,
    params: Sequence[ParamInput],
    type_converter: TypeConverter | None = None,
    source: SourceProvider | None = None,
    config: ConverterConfig | None = None,
    fn_type: bool = False,
) -> ParamsResult:
    """Convert the parameter list of one documentation entry.

    Never raises for bad input: an illegal node kind or malformed ESTree JSON
    is returned on ``ParamsResult.error``.

    Args:
        name:    Entry name, used in the result and in log messages.
        params:  Parameters in declaration order, each a Pattern node or an
                 ESTree dict.
        type_converter, source, config: As for ``pat_to_param_def``.
        fn_type: True for a function *type* signature, where top-level
                 defaults are illegal (uses ``convert_fn_param``).

    Returns:
        A ParamsResult with either ``params`` or ``error`` populated.
    """
    converter = PatternConverter(type_converter, source, config)
    convert = converter.convert_fn_param if fn_type else converter.convert
    try:
        converted = tuple(
            convert(_reader.build(param) if isinstance(param, dict) else param)
            for param in params
        )
    except (UnsupportedPatternError, ValueError) as exc:
        logger.warning("Skipping parameters of %s: %s", name, exc)
        return ParamsResult(name=name, error=exc)
    return ParamsResult(name=name, params=converted)


def build_entries(
    entries: Mapping[str, Sequence[ParamInput]]
    | Iterable[tuple[str, Sequence[ParamInput]]],
    type_converter: TypeConverter | None = None,
    source: SourceProvider | None = None,
    config: ConverterConfig | None = None,
    fn_type: bool = False,
) -> list[ParamsResult]:
    """Convert many entries, isolating failures per entry.

    Args:
        entries: ``{name: params}`` mapping, or an iterable of
                 ``(name, params)`` pairs when names may repeat (overloads).
        type_converter, source, config, fn_type: As for ``build_entry``.

    Returns:
        One ParamsResult per entry, in input order.
    """
    items = entries.items() if isinstance(entries, Mapping) else entries
    results = [
        build_entry(name, params, type_converter, source, config, fn_type)
        for name, params in items
    ]
    failed = sum(1 for result in results if not result.ok)
    logger.debug("Converted %d entries, %d failed", len(results), failed)
    return results
