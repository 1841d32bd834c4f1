"""Tests for the tagged-union document form.

Covers the exact document shape (``kind`` tags, camelCase fields, absent
``type``), holes as nulls, type descriptor extras, round trips that render
identically, and rejection of malformed documents.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from binding_params.ast.nodes import (
    ArrayPat,
    AssignPat,
    AssignPatProp,
    BindingIdent,
    ComputedKey,
    Expr,
    IdentKey,
    KeyValuePatProp,
    ObjectPat,
    RestPat,
    RestPatProp,
    Span,
    TypeAnn,
)
from binding_params.converter import PatternConverter
from binding_params.descriptors import (
    ArrayDef,
    AssignDef,
    AssignPropDef,
    IdentifierDef,
    KeyValuePropDef,
    ObjectDef,
    RestDef,
    RestPropDef,
    TypeDef,
)
from binding_params.render import render
from binding_params.serialize import from_document, from_json, to_document, to_json
from binding_params.source import SourceText


class TestDocumentShape:
    def test_identifier_without_type_has_no_type_member(self) -> None:
        assert to_document(IdentifierDef(name="x")) == {
            "kind": "identifier",
            "name": "x",
            "optional": False,
        }

    def test_identifier_with_type(self) -> None:
        doc = to_document(IdentifierDef(name="x", ts_type=TypeDef(repr="number")))
        assert doc["type"] == {"repr": "number"}

    def test_array_holes_are_null(self) -> None:
        doc = to_document(ArrayDef(elements=(None, IdentifierDef(name="b"))))
        assert doc == {
            "kind": "array",
            "elements": [None, {"kind": "identifier", "name": "b", "optional": False}],
            "optional": False,
        }

    def test_assign_uses_camel_case(self) -> None:
        doc = to_document(AssignDef(target=IdentifierDef(name="x")))
        assert doc["kind"] == "assign"
        assert doc["defaultText"] == "[UNSUPPORTED]"
        assert "default_text" not in doc

    def test_object_properties(self) -> None:
        doc = to_document(
            ObjectDef(
                properties=(
                    KeyValuePropDef(key="a", value=IdentifierDef(name="b")),
                    AssignPropDef(key="c", has_default=True),
                    RestPropDef(inner=IdentifierDef(name="d")),
                )
            )
        )
        assert [p["kind"] for p in doc["properties"]] == ["keyValue", "assign", "rest"]
        assert doc["properties"][1] == {"kind": "assign", "key": "c", "hasDefault": True}
        assert doc["properties"][2]["inner"]["name"] == "d"

    def test_rest_has_no_optional_member(self) -> None:
        doc = to_document(RestDef(inner=IdentifierDef(name="r")))
        assert set(doc) == {"kind", "inner"}

    def test_type_extras_are_kept(self) -> None:
        type_def = TypeDef(repr="Foo<T>", kind="typeRef", typeRef={"typeName": "Foo"})
        doc = to_document(IdentifierDef(name="x", ts_type=type_def))
        assert doc["type"] == {
            "repr": "Foo<T>",
            "kind": "typeRef",
            "typeRef": {"typeName": "Foo"},
        }

    def test_none_valued_type_extras_are_kept(self) -> None:
        type_def = TypeDef(repr="T", params=None)
        param = IdentifierDef(name="x", ts_type=type_def)
        doc = to_document(param)
        assert doc == {
            "kind": "identifier",
            "name": "x",
            "optional": False,
            "type": {"repr": "T", "params": None},
        }
        assert from_document(doc) == param
        assert from_json(to_json(param)) == param

    def test_nested_descriptors_without_type_have_no_type_member(self) -> None:
        doc = to_document(
            RestDef(inner=IdentifierDef(name="r"), ts_type=TypeDef(repr="any[]"))
        )
        assert doc["type"] == {"repr": "any[]"}
        assert "type" not in doc["inner"]
        assert '"type":null' not in to_json(RestDef(inner=IdentifierDef(name="r")))


class TestRoundTrip:
    def _sample(self) -> ArrayPat:
        """``[ , {a: [b, ...c], d = 1, [k]: e, ...f}?, g = 2, ...h: number[]]``"""
        return ArrayPat(
            elems=(
                None,
                ObjectPat(
                    props=(
                        KeyValuePatProp(
                            IdentKey("a"),
                            ArrayPat(elems=(BindingIdent("b"), RestPat(BindingIdent("c")))),
                        ),
                        AssignPatProp("d", value=Expr()),
                        KeyValuePatProp(ComputedKey(Expr(span=Span(0, 1))), BindingIdent("e")),
                        RestPatProp(BindingIdent("f")),
                    ),
                    optional=True,
                ),
                AssignPat(BindingIdent("g"), Expr()),
                RestPat(BindingIdent("h"), type_ann=TypeAnn("number[]")),
            )
        )

    def _convert(self) -> ArrayDef:
        converter = PatternConverter(
            type_converter=lambda ann: TypeDef(repr=str(ann.node)),
            source=SourceText("k"),
        )
        param = converter.convert(self._sample())
        assert isinstance(param, ArrayDef)
        return param

    def test_document_round_trip_renders_identically(self) -> None:
        param = self._convert()
        restored = from_document(to_document(param))
        assert render(restored) == render(param)
        assert render(restored) == "[, {a, d, k, ...f}?, g, ...h: number[]]"

    def test_document_round_trip_is_equal(self) -> None:
        param = self._convert()
        assert from_document(to_document(param)) == param

    def test_json_round_trip(self) -> None:
        param = self._convert()
        text = to_json(param)
        assert json.loads(text) == to_document(param)
        assert from_json(text) == param

    def test_json_indent(self) -> None:
        text = to_json(IdentifierDef(name="x"), indent=2)
        assert text.startswith("{\n  ")

    def test_restored_tree_is_frozen(self) -> None:
        restored = from_document({"kind": "identifier", "name": "x"})
        with pytest.raises(ValidationError):
            restored.name = "y"  # type: ignore[misc]

    def test_from_document_accepts_missing_optional_fields(self) -> None:
        restored = from_document({"kind": "rest", "inner": {"kind": "identifier", "name": "x"}})
        assert restored == RestDef(inner=IdentifierDef(name="x"))


class TestMalformedDocuments:
    def test_unknown_kind(self) -> None:
        with pytest.raises(ValidationError):
            from_document({"kind": "tuple", "name": "x"})

    def test_missing_kind(self) -> None:
        with pytest.raises(ValidationError):
            from_document({"name": "x"})

    def test_missing_required_field(self) -> None:
        with pytest.raises(ValidationError):
            from_document({"kind": "rest"})

    def test_bad_property_kind(self) -> None:
        with pytest.raises(ValidationError):
            from_document({"kind": "object", "properties": [{"kind": "spread"}]})

    def test_invalid_json(self) -> None:
        with pytest.raises(ValidationError):
            from_json("{not json")
