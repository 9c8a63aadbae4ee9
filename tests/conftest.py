"""Shared test fixtures."""

import pytest

from addimport.editing.models import LineBuffer


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Safety: keep ADDIMPORT_* variables from the developer's shell out of tests."""
    for name in ("ADDIMPORT_DIALECT", "ADDIMPORT_CURSOR_MODE", "ADDIMPORT_ENCODING"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def objc_buffer() -> LineBuffer:
    """Objective-C implementation file with a stray import at line 9."""
    return LineBuffer.from_text(
        "//\n"
        "//  ViewController.m\n"
        "//\n"
        "\n"
        '#import "ViewController.h"\n'
        "#import <UIKit/UIKit.h>\n"
        "\n"
        "@implementation ViewController\n"
        "\n"
        '#import "Model.h"\n'
        "\n"
        "@end\n",
        cursor_line=9,
    )
