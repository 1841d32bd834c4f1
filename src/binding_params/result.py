"""ParamsResult dataclass for per-entry parameter conversion output.

This module provides the result type returned by build_entry() and
build_entries() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from binding_params.render import render_params

if TYPE_CHECKING:
    from binding_params.descriptors import ParamDef

__all__ = ["ParamsResult"]


@dataclass(frozen=True, slots=True)
class ParamsResult:
    """Outcome of converting one documentation entry's parameter list.

    Attributes:
        name:   The entry's name (e.g. the function it documents).
        params: Converted descriptors in declaration order. Empty when
            ``error`` is set.
        error:  The exception that stopped conversion of this entry, or None.
            Either an UnsupportedPatternError (illegal node kind) or a
            ValueError (malformed ESTree input).
    """

    name: str
    params: tuple[ParamDef, ...] = ()
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def signature(self) -> str | None:
        """Rendered parameter list, or None if the entry failed."""
        if self.error is not None:
            return None
        return render_params(self.params)
