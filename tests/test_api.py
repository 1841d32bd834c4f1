"""Tests for the public API functions.

Covers single-pattern conversion, ESTree input, the function-parameter entry
point, and the per-entry batch build: failures stay with their entry, are
logged, and do not stop the remaining entries.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from binding_params.api import (
    build_entries,
    build_entry,
    fn_param_to_param_def,
    param_from_estree,
    pat_to_param_def,
)
from binding_params.ast.nodes import (
    AssignPat,
    BindingIdent,
    Expr,
    ExprPat,
    ObjectPat,
    RestPat,
    Span,
)
from binding_params.config import ConverterConfig
from binding_params.descriptors import AssignDef, IdentifierDef, ObjectDef, RestDef
from binding_params.errors import UnsupportedPatternError
from binding_params.render import render
from binding_params.source import SourceText, SourceTypeConverter

# ---------------------------------------------------------------------------
# ESTree fixtures for: function f({a: [b, ...c]}, x = compute(), ...rest: number[]) {}
# ---------------------------------------------------------------------------

CODE = "function f({a: [b, ...c]}, x = compute(), ...rest: number[]) {}"


def _ident(name: str, start: int) -> dict[str, Any]:
    return {"type": "Identifier", "name": name, "start": start, "end": start + len(name)}


OBJECT_PARAM: dict[str, Any] = {
    "type": "ObjectPattern",
    "start": 11,
    "end": 25,
    "properties": [
        {
            "type": "Property",
            "key": _ident("a", 12),
            "value": {
                "type": "ArrayPattern",
                "start": 15,
                "end": 24,
                "elements": [
                    _ident("b", 16),
                    {"type": "RestElement", "start": 19, "end": 23, "argument": _ident("c", 22)},
                ],
            },
            "computed": False,
            "shorthand": False,
        }
    ],
}

DEFAULT_PARAM: dict[str, Any] = {
    "type": "AssignmentPattern",
    "start": 27,
    "end": 40,
    "left": _ident("x", 27),
    "right": {"type": "CallExpression", "start": 31, "end": 40},
}

REST_PARAM: dict[str, Any] = {
    "type": "RestElement",
    "start": 42,
    "end": 60,
    "argument": _ident("rest", 45),
    "typeAnnotation": {
        "type": "TSTypeAnnotation",
        "start": 49,
        "end": 60,
        "typeAnnotation": {"type": "TSArrayType", "start": 51, "end": 59},
    },
}

MEMBER_PARAM: dict[str, Any] = {
    "type": "MemberExpression",
    "start": 1,
    "end": 4,
    "loc": {"start": {"line": 7, "column": 1}},
}


# ---------------------------------------------------------------------------
# Single-pattern conversion
# ---------------------------------------------------------------------------


class TestPatToParamDef:
    def test_simple(self) -> None:
        assert pat_to_param_def(BindingIdent("x")) == IdentifierDef(name="x")

    def test_default_allowed(self) -> None:
        param = pat_to_param_def(AssignPat(BindingIdent("x"), Expr()))
        assert isinstance(param, AssignDef)

    def test_config_is_forwarded(self) -> None:
        param = pat_to_param_def(
            AssignPat(BindingIdent("x"), Expr()),
            config=ConverterConfig(default_placeholder="?"),
        )
        assert isinstance(param, AssignDef)
        assert param.default_text == "?"

    def test_illegal_kind_raises(self) -> None:
        with pytest.raises(UnsupportedPatternError):
            pat_to_param_def(ExprPat(Expr()))


class TestFnParamToParamDef:
    def test_rest(self) -> None:
        param = fn_param_to_param_def(RestPat(BindingIdent("xs")))
        assert param == RestDef(inner=IdentifierDef(name="xs"))

    def test_top_level_default_raises(self) -> None:
        with pytest.raises(UnsupportedPatternError, match="function parameter"):
            fn_param_to_param_def(AssignPat(BindingIdent("x"), Expr()))


class TestParamFromEstree:
    def test_nested_object(self) -> None:
        param = param_from_estree(OBJECT_PARAM)
        assert isinstance(param, ObjectDef)
        assert render(param) == "{a}"

    def test_typed_rest_with_source(self) -> None:
        source = SourceText(CODE)
        param = param_from_estree(REST_PARAM, SourceTypeConverter(source), source)
        assert render(param) == "...rest: number[]"

    def test_default_never_leaks(self) -> None:
        source = SourceText(CODE)
        param = param_from_estree(DEFAULT_PARAM, source=source)
        assert render(param) == "x"
        assert "compute()" not in render(param)

    def test_malformed_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            param_from_estree({"type": "ArrayPattern"})


# ---------------------------------------------------------------------------
# Per-entry build
# ---------------------------------------------------------------------------


class TestBuildEntry:
    def test_estree_params(self) -> None:
        source = SourceText(CODE)
        result = build_entry(
            "f",
            [OBJECT_PARAM, DEFAULT_PARAM, REST_PARAM],
            type_converter=SourceTypeConverter(source),
            source=source,
        )
        assert result.ok
        assert result.signature == "({a}, x, ...rest: number[])"

    def test_mixed_node_and_estree_params(self) -> None:
        result = build_entry("g", [BindingIdent("a"), {"type": "Identifier", "name": "b"}])
        assert result.signature == "(a, b)"

    def test_illegal_kind_is_captured(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="binding_params.api"):
            result = build_entry("broken", [BindingIdent("a"), MEMBER_PARAM])
        assert not result.ok
        assert result.params == ()
        assert isinstance(result.error, UnsupportedPatternError)
        assert result.error.span == Span(1, 4, line=7, column=1)
        assert "broken" in caplog.text
        assert "7:1" in caplog.text

    def test_malformed_estree_is_captured(self) -> None:
        result = build_entry("bad", [{"type": "RestElement"}])
        assert isinstance(result.error, ValueError)

    def test_fn_type_rejects_top_level_default(self) -> None:
        result = build_entry("F", [DEFAULT_PARAM], fn_type=True)
        assert isinstance(result.error, UnsupportedPatternError)
        assert result.error.position == "function parameter"

    def test_fn_type_accepts_legal_kinds(self) -> None:
        param = ObjectPat()
        result = build_entry("F", [param, RestPat(BindingIdent("r"))], fn_type=True)
        assert result.signature == "({}, ...r)"


class TestBuildEntries:
    def test_failure_is_isolated(self) -> None:
        results = build_entries(
            {
                "first": [BindingIdent("a")],
                "broken": [ExprPat(Expr())],
                "third": [RestPat(BindingIdent("xs"))],
            }
        )
        assert [r.name for r in results] == ["first", "broken", "third"]
        assert [r.ok for r in results] == [True, False, True]
        assert results[0].signature == "(a)"
        assert results[2].signature == "(...xs)"

    def test_pairs_allow_repeated_names(self) -> None:
        """Overloads share a name, so entries may be given as pairs."""
        results = build_entries(
            [("f", [BindingIdent("a")]), ("f", [BindingIdent("a"), BindingIdent("b")])]
        )
        assert [r.signature for r in results] == ["(a)", "(a, b)"]

    def test_empty(self) -> None:
        assert build_entries({}) == []

    def test_debug_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="binding_params.api"):
            build_entries({"ok": [BindingIdent("a")], "bad": [ExprPat(Expr())]})
        assert "Converted 2 entries, 1 failed" in caplog.text
