"""ConverterConfig for pattern conversion.

ConverterConfig is a frozen (immutable) dataclass holding the placeholder
texts used where content cannot be reconstructed, and whether default-value
source text should be captured.
"""

from __future__ import annotations

from dataclasses import dataclass

from binding_params.descriptors import DEFAULT_PLACEHOLDER, UNAVAILABLE_KEY

__all__ = ["ConverterConfig"]


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    """Immutable configuration for PatternConverter.

    Attributes:
        default_placeholder: Stored as ``default_text`` of assign descriptors.
        unavailable_key: Text of a computed key when no source is available.
        capture_default_source: When True and a source provider is supplied,
            assign descriptors store the default expression's source text
            instead of ``default_placeholder``.  Rendering still omits it.
            Default False.
    """

    default_placeholder: str = DEFAULT_PLACEHOLDER
    unavailable_key: str = UNAVAILABLE_KEY
    capture_default_source: bool = False

    def __post_init__(self) -> None:
        if not self.default_placeholder:
            msg = "default_placeholder must be a non-empty string"
            raise ValueError(msg)
        if not self.unavailable_key:
            msg = "unavailable_key must be a non-empty string"
            raise ValueError(msg)
