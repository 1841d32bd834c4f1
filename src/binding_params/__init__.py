"""Binding params - parameter descriptors and signatures for destructuring patterns."""

from __future__ import annotations

from binding_params.api import (
    build_entries,
    build_entry,
    fn_param_to_param_def,
    param_from_estree,
    pat_to_param_def,
)
from binding_params.config import ConverterConfig
from binding_params.converter import PatternConverter
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
from binding_params.render import render, render_params
from binding_params.result import ParamsResult
from binding_params.serialize import from_document, from_json, to_document, to_json
from binding_params.source import SourceText, SourceTypeConverter

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayDef",
    "AssignDef",
    "AssignPropDef",
    "ConverterConfig",
    "IdentifierDef",
    "KeyValuePropDef",
    "ObjectDef",
    "ParamDef",
    "ParamsResult",
    "PatternConverter",
    "PropDef",
    "RestDef",
    "RestPropDef",
    "SourceText",
    "SourceTypeConverter",
    "TypeDef",
    "UnsupportedPatternError",
    "build_entries",
    "build_entry",
    "fn_param_to_param_def",
    "from_document",
    "from_json",
    "param_from_estree",
    "pat_to_param_def",
    "render",
    "render_params",
    "to_document",
    "to_json",
]
