"""Parameter and property descriptor models.

Descriptors are the canonical, serializable form of a binding pattern. Each
family is a closed tagged union discriminated on ``kind``:

ParamDef
    identifier, array, object, rest, assign
PropDef (only inside an ``object`` descriptor)
    keyValue, assign, rest

All models are frozen and hold their children in tuples, so a tree is
immutable once built and can be shared between readers freely.

Field names serialize in camelCase (``defaultText``, ``hasDefault``); the
type descriptor is stored on ``ts_type`` and serialized as ``type``.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

__all__ = [
    "ArrayDef",
    "AssignDef",
    "AssignPropDef",
    "DEFAULT_PLACEHOLDER",
    "IdentifierDef",
    "KeyValuePropDef",
    "ObjectDef",
    "ParamDef",
    "PropDef",
    "RestDef",
    "RestPropDef",
    "TypeDef",
    "UNAVAILABLE_KEY",
]

# Stand-in for default-value expressions, which are never reconstructed
DEFAULT_PLACEHOLDER = "[UNSUPPORTED]"

# Stand-in for computed keys when no source text is available
UNAVAILABLE_KEY = "<UNAVAILABLE>"


class TypeDef(BaseModel):
    """Opaque type descriptor produced by a TypeConverter.

    Only ``repr`` (the printable form) is required. Any other fields a
    converter attaches are kept as extras so they survive serialization,
    ``None`` values included. An unset ``kind`` is left out.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    repr: str
    kind: str | None = None

    def __str__(self) -> str:
        return self.repr

    @model_serializer(mode="wrap")
    def _omit_absent_kind(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if self.kind is None and isinstance(data, dict):
            data.pop("kind", None)
        return data


class _Descriptor(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_serializer(mode="wrap")
    def _omit_absent_type(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        # a missing annotation has no member at all, not a null
        if getattr(self, "ts_type", None) is None and isinstance(data, dict):
            data.pop("type", None)
            data.pop("ts_type", None)
        return data


# ---------------------------------------------------------------------------
# Parameter descriptors
# ---------------------------------------------------------------------------


class IdentifierDef(_Descriptor):
    """A simple bound name, e.g. ``x``, ``x?``, ``x: number``."""

    kind: Literal["identifier"] = "identifier"
    name: str
    optional: bool = False
    ts_type: TypeDef | None = Field(default=None, alias="type")


class ArrayDef(_Descriptor):
    """Array destructuring. A ``None`` element is an elided slot."""

    kind: Literal["array"] = "array"
    elements: tuple[ParamDef | None, ...] = ()
    optional: bool = False
    ts_type: TypeDef | None = Field(default=None, alias="type")


class ObjectDef(_Descriptor):
    """Object destructuring. ``properties`` keep declaration order."""

    kind: Literal["object"] = "object"
    properties: tuple[PropDef, ...] = ()
    optional: bool = False
    ts_type: TypeDef | None = Field(default=None, alias="type")


class RestDef(_Descriptor):
    kind: Literal["rest"] = "rest"
    inner: ParamDef
    ts_type: TypeDef | None = Field(default=None, alias="type")


class AssignDef(_Descriptor):
    """A pattern with a default value.

    ``default_text`` holds a placeholder unless the converter was configured
    to capture the default's source text.
    """

    kind: Literal["assign"] = "assign"
    target: ParamDef
    default_text: str = DEFAULT_PLACEHOLDER
    ts_type: TypeDef | None = Field(default=None, alias="type")


# ---------------------------------------------------------------------------
# Property descriptors
# ---------------------------------------------------------------------------


class KeyValuePropDef(_Descriptor):
    """``key: value``. ``key`` is the externally visible property name."""

    kind: Literal["keyValue"] = "keyValue"
    key: str
    value: ParamDef


class AssignPropDef(_Descriptor):
    """Shorthand ``{key}`` or ``{key = default}``."""

    kind: Literal["assign"] = "assign"
    key: str
    has_default: bool = False


class RestPropDef(_Descriptor):
    kind: Literal["rest"] = "rest"
    inner: ParamDef


ParamDef = Annotated[
    IdentifierDef | ArrayDef | ObjectDef | RestDef | AssignDef,
    Field(discriminator="kind"),
]

PropDef = Annotated[
    KeyValuePropDef | AssignPropDef | RestPropDef,
    Field(discriminator="kind"),
]

for _model in (
    IdentifierDef,
    ArrayDef,
    ObjectDef,
    RestDef,
    AssignDef,
    KeyValuePropDef,
    AssignPropDef,
    RestPropDef,
):
    _model.model_rebuild()
