"""Configuration for add-import operations.

Uses BaseModel (not BaseSettings); values come from keyword arguments or from
ADDIMPORT_* environment variables via load_config().
"""

import os
from collections.abc import Mapping
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from addimport.editing.models import SourceDialect

ENV_PREFIX = "ADDIMPORT_"


class CursorMode(StrEnum):
    """How the caret line is corrected after duplicate removal.

    - above: subtract removed copies that sat above the selected line
    - legacy: subtract every removed copy except one, wherever it was
    """

    ABOVE = "above"
    LEGACY = "legacy"


class AddImportConfig(BaseModel):
    """Settings shared by the inserter, file helpers and CLI."""

    default_dialect: SourceDialect | None = None
    cursor_mode: CursorMode = CursorMode.ABOVE
    encoding: str = "utf-8"

    model_config = ConfigDict(frozen=True)


def load_config(environ: Mapping[str, str] | None = None) -> AddImportConfig:
    """Build configuration from ADDIMPORT_* environment variables.

    Recognized: ADDIMPORT_DIALECT, ADDIMPORT_CURSOR_MODE, ADDIMPORT_ENCODING.
    Unset or empty variables keep the model defaults.

    Raises:
        pydantic.ValidationError: If a variable holds an unknown value
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    values: dict[str, str] = {}

    for key, field_name in (
        ("DIALECT", "default_dialect"),
        ("CURSOR_MODE", "cursor_mode"),
        ("ENCODING", "encoding"),
    ):
        raw = env.get(ENV_PREFIX + key, "").strip()
        if raw:
            values[field_name] = raw.lower() if key != "ENCODING" else raw

    return AddImportConfig.model_validate(values)
