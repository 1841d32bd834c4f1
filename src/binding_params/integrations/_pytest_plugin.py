"""pytest plugin for binding-params.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from binding_params import (
    ConverterConfig,
    SourceText,
    SourceTypeConverter,
    param_from_estree,
    pat_to_param_def,
    render,
)


@pytest.fixture(scope="session")
def assert_param_renders() -> Any:
    """Fixture that returns a callable signature asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to pat_to_param_def() which creates a fresh PatternConverter
    per call).

    Usage in tests::

        def test_optional(assert_param_renders):
            node = {"type": "Identifier", "name": "x", "optional": True}
            assert_param_renders(node, "x?")

        def test_typed(assert_param_renders):
            code = "function f(x: number) {}"
            assert_param_renders(estree_param, "x: number", source=code)

    Returns:
        A callable ``_assert(pattern, expected, source=None, type_converter=None,
        config=None) -> None`` that raises ``AssertionError`` when the rendered
        signature differs from ``expected``.
    """

    def _assert(
        pattern: Any,
        expected: str,
        source: str | None = None,
        type_converter: Any = None,
        config: ConverterConfig | None = None,
    ) -> None:
        """Assert that a pattern renders to the expected signature text.

        Args:
            pattern:        A Pattern node or an ESTree dict.
            expected:       The expected rendering.
            source:         Original source code. When given, computed keys
                            resolve to their source text and, unless
                            ``type_converter`` is set, annotations print as
                            written.
            type_converter: Optional TypeConverter.
            config:         Optional ConverterConfig.

        Raises:
            AssertionError: When the rendering differs, with a message
                including both strings and the descriptor tree.
        """
        source_text = SourceText(source) if source is not None else None
        if type_converter is None and source_text is not None:
            if config is not None:
                type_converter = SourceTypeConverter(
                    source_text, unavailable=config.unavailable_key
                )
            else:
                type_converter = SourceTypeConverter(source_text)

        if isinstance(pattern, dict):
            param = param_from_estree(pattern, type_converter, source_text, config)
        else:
            param = pat_to_param_def(pattern, type_converter, source_text, config)

        actual = render(param)
        if actual != expected:
            raise AssertionError(
                f"Parameter rendering mismatch:\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}\n"
                f"  descriptor: {param!r}"
            )

    return _assert
