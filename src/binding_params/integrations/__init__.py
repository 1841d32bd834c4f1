"""Integrations subpackage for binding-params.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_param_renders`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
