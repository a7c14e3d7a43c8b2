"""
Settings for a sandbox session.

Sources, from lowest to highest priority: defaults, environment variables, command line overrides.
"""

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from src.chess.layout import is_valid_layout
from src.core.exceptions import InvalidSettingsError
from src.core.shared_types import GlyphStyle

ENV_PREFIX = "CHESS_SANDBOX_"
ENV_VARIABLES: dict[str, str] = {
    "glyph_style": f"{ENV_PREFIX}GLYPHS",
    "starting_layout": f"{ENV_PREFIX}LAYOUT",
    "log_file": f"{ENV_PREFIX}LOG_FILE",
    "log_level": f"{ENV_PREFIX}LOG_LEVEL",
}


class Settings(BaseModel):
    glyph_style: GlyphStyle = GlyphStyle.UNICODE
    starting_layout: Optional[str] = None
    log_file: Optional[Path] = None
    log_level: str = "INFO"

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_layout(value):
            raise ValueError(
                f"{value!r} is not a valid piece placement (ex. 'rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR')."
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level_name = value.strip().upper()
        if level_name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level_name


def settings_from_env(environ: Mapping[str, str]) -> dict[str, str]:
    """Pick up the fields that have been set through environment variables"""
    return {
        field: environ[variable]
        for field, variable in ENV_VARIABLES.items()
        if environ.get(variable)
    }


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """
    Merge the sources into one validated Settings object.

    `None` values in the overrides mean "not given" (ex. command line option left out), so they do not overwrite anything.
    """
    environ = os.environ if environ is None else environ
    values: dict[str, Any] = settings_from_env(environ)
    if overrides:
        values.update(
            {field: value for field, value in overrides.items() if value is not None}
        )

    try:
        return Settings(**values)
    except ValidationError as e:
        raise InvalidSettingsError(f"Invalid settings:\n{e}") from e
