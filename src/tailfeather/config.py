from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Final, Mapping, Optional

LOG = logging.getLogger(__name__)

COLOR_ANSI: Final[str] = "ansi"
COLOR_TAGGED: Final[str] = "tagged"
COLOR_NEVER: Final[str] = "never"
COLOR_MODES: Final[tuple[str, ...]] = (COLOR_ANSI, COLOR_TAGGED, COLOR_NEVER)

DEFAULT_INPUT_DELIMITER: Final[str] = " "
DEFAULT_OUTPUT_DELIMITER: Final[str] = "\t"

_INPUT_DELIMITER_ENV: Final[str] = "TAILFEATHER_INPUT_DELIMITER"
_OUTPUT_DELIMITER_ENV: Final[str] = "TAILFEATHER_OUTPUT_DELIMITER"
_COLOR_ENV: Final[str] = "TAILFEATHER_COLOR"
_NO_COLOR_ENV: Final[str] = "NO_COLOR"
_LOGGING_ENV: Final[str] = "TAILFEATHER_LOGGING"
_DEBUG_ENV: Final[str] = "TAILFEATHER_DEBUG"
_LOG_FILE_ENV: Final[str] = "TAILFEATHER_LOG_FILE"


@dataclass(frozen=True)
class Config:
    """Settings handed to the tokenizer and renderer."""

    input_delimiter: str = DEFAULT_INPUT_DELIMITER
    output_delimiter: str = DEFAULT_OUTPUT_DELIMITER
    color: str = COLOR_ANSI

    def with_overrides(
        self,
        *,
        input_delimiter: Optional[str] = None,
        output_delimiter: Optional[str] = None,
        color: Optional[str] = None,
    ) -> "Config":
        """Return a copy with every non-``None`` argument applied."""
        changes = {
            key: value
            for key, value in (
                ("input_delimiter", input_delimiter),
                ("output_delimiter", output_delimiter),
                ("color", color),
            )
            if value is not None
        }
        return replace(self, **changes)


def _parse_bool(raw: Optional[str], *, default: bool = False) -> bool:
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in {"1", "true", "yes", "on"}:
        return True
    if token in {"0", "false", "no", "off"}:
        return False
    return default


def _color_from_env(environ: Mapping[str, str]) -> str:
    raw = environ.get(_COLOR_ENV)
    if raw is not None:
        candidate = raw.strip().lower()
        if candidate in COLOR_MODES:
            return candidate
        LOG.warning("ignoring %s=%r; expected one of %s", _COLOR_ENV, raw, ", ".join(COLOR_MODES))
    if environ.get(_NO_COLOR_ENV):
        return COLOR_NEVER
    return COLOR_ANSI


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build the default :class:`Config` from environment variables.

    Delimiters are taken verbatim, so an empty value is a valid (empty)
    delimiter rather than a request for the default.
    """

    env = os.environ if environ is None else environ
    return Config(
        input_delimiter=env.get(_INPUT_DELIMITER_ENV, DEFAULT_INPUT_DELIMITER),
        output_delimiter=env.get(_OUTPUT_DELIMITER_ENV, DEFAULT_OUTPUT_DELIMITER),
        color=_color_from_env(env),
    )


def logging_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return _parse_bool(env.get(_LOGGING_ENV), default=False)


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return _parse_bool(env.get(_DEBUG_ENV), default=False)


def log_file(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the configured log file path, or ``None`` for standard error."""

    env = os.environ if environ is None else environ
    raw = env.get(_LOG_FILE_ENV)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


__all__ = [
    "COLOR_ANSI",
    "COLOR_TAGGED",
    "COLOR_NEVER",
    "COLOR_MODES",
    "DEFAULT_INPUT_DELIMITER",
    "DEFAULT_OUTPUT_DELIMITER",
    "Config",
    "config_from_env",
    "logging_enabled",
    "debug_enabled",
    "log_file",
]
