"""Exception types raised by binding-params."""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from binding_params.ast.nodes import Span

__all__ = ["UnsupportedPatternError"]


class UnsupportedPatternError(TypeError):
    """A node of a kind that cannot legally occur where it was found.

    The parser is expected to hand over only legal binding patterns, so this
    signals a caller contract violation. It is raised instead of aborting so
    that a batch build can skip the one offending entry.

    Attributes:
        kind:     The offending node's kind (PatternKind value or ESTree type).
        span:     Source location of the node, when known.
        position: Where the node was found, e.g. ``"pattern"`` or
                  ``"function parameter"``.
    """

    def __init__(
        self, kind: str, span: Span | None = None, position: str = "pattern"
    ) -> None:
        self.kind = kind
        self.span = span
        self.position = position
        location = f" at {span}" if span is not None else ""
        super().__init__(f"Unsupported {position} kind {kind!r}{location}")

    def __reduce__(self) -> tuple[type[Self], tuple[str, Span | None, str]]:
        return (type(self), (self.kind, self.span, self.position))
