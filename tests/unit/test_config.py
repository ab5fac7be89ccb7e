"""
tests/unit/test_config.py

Unit tests for lngraph.config.Settings.

Coverage
--------
  - Defaults: compact JSON
  - LNGRAPH_-prefixed environment variables override defaults
  - Negative indentation is rejected
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from lngraph.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LNGRAPH_JSON_INDENT", raising=False)
        cfg = Settings(_env_file=None)
        assert cfg.json_indent is None

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LNGRAPH_JSON_INDENT", "2")
        assert Settings(_env_file=None).json_indent == 2

    def test_env_prefix_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LNGRAPH_JSON_INDENT", raising=False)
        monkeypatch.setenv("JSON_INDENT", "2")
        assert Settings(_env_file=None).json_indent is None

    def test_negative_indent_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, json_indent=-1)
