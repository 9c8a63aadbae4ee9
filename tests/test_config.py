"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from addimport.config import AddImportConfig, CursorMode, load_config
from addimport.editing.models import SourceDialect


class TestAddImportConfig:
    """Test AddImportConfig defaults."""

    def test_defaults(self) -> None:
        config = AddImportConfig()
        assert config.default_dialect is None
        assert config.cursor_mode == CursorMode.ABOVE
        assert config.encoding == "utf-8"

    def test_frozen(self) -> None:
        config = AddImportConfig()
        with pytest.raises(ValidationError):
            config.encoding = "latin-1"  # type: ignore[misc]


class TestLoadConfig:
    """Test load_config environment handling."""

    def test_empty_environment(self) -> None:
        assert load_config({}) == AddImportConfig()

    def test_reads_all_variables(self) -> None:
        config = load_config(
            {
                "ADDIMPORT_DIALECT": "Swift",
                "ADDIMPORT_CURSOR_MODE": " legacy ",
                "ADDIMPORT_ENCODING": "UTF-16",
            }
        )
        assert config.default_dialect == SourceDialect.SWIFT_FAMILY
        assert config.cursor_mode == CursorMode.LEGACY
        assert config.encoding == "UTF-16"

    def test_blank_values_ignored(self) -> None:
        assert load_config({"ADDIMPORT_DIALECT": "  "}).default_dialect is None

    def test_unknown_dialect(self) -> None:
        with pytest.raises(ValidationError):
            load_config({"ADDIMPORT_DIALECT": "kotlin"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADDIMPORT_CURSOR_MODE", "legacy")
        assert load_config().cursor_mode == CursorMode.LEGACY
