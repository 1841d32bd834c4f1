"""Shared fixtures for binding-params tests.

Provides fake collaborators so that converter tests do not depend on any
particular parser's annotation format.
"""

from __future__ import annotations

import pytest

from binding_params.ast.nodes import TypeAnn
from binding_params.descriptors import TypeDef


class FakeTypeConverter:
    """TypeConverter that reads ``TypeAnn.node`` as the type text.

    Records every annotation it was called with.
    """

    def __init__(self) -> None:
        self.calls: list[TypeAnn] = []

    def __call__(self, type_ann: TypeAnn) -> TypeDef:
        self.calls.append(type_ann)
        return TypeDef(repr=str(type_ann.node), kind="fake")


@pytest.fixture
def fake_types() -> FakeTypeConverter:
    """A fresh FakeTypeConverter for each test."""
    return FakeTypeConverter()
