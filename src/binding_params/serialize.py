"""Tagged-union document form of descriptor trees.

Documents use ``kind`` as the discriminator and camelCase field names. A
descriptor without a type annotation has no ``type`` member at all::

    {"kind": "rest", "inner": {"kind": "identifier", "name": "args",
                               "optional": false}}

Array holes serialize as ``null`` list entries and come back as ``None``.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from binding_params.descriptors import ParamDef

__all__ = ["from_document", "from_json", "to_document", "to_json"]

_PARAM_ADAPTER: TypeAdapter[ParamDef] = TypeAdapter(ParamDef)


def to_document(param: ParamDef) -> dict[str, Any]:
    """Return the JSON-compatible dict form of a descriptor tree."""
    return _PARAM_ADAPTER.dump_python(param, mode="json", by_alias=True)


def to_json(param: ParamDef, indent: int | None = None) -> str:
    """Return the JSON text form of a descriptor tree."""
    return _PARAM_ADAPTER.dump_json(param, by_alias=True, indent=indent).decode()


def from_document(document: dict[str, Any]) -> ParamDef:
    """Rebuild a descriptor tree from its dict form.

    Raises:
        pydantic.ValidationError: If the document is not a valid descriptor.
    """
    return _PARAM_ADAPTER.validate_python(document)


def from_json(text: str | bytes) -> ParamDef:
    """Rebuild a descriptor tree from JSON text.

    Raises:
        pydantic.ValidationError: If the text is not a valid descriptor.
    """
    return _PARAM_ADAPTER.validate_json(text)
