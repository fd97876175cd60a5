from __future__ import annotations

import pytest

_ENV_VARS = (
    "TAILFEATHER_INPUT_DELIMITER",
    "TAILFEATHER_OUTPUT_DELIMITER",
    "TAILFEATHER_COLOR",
    "NO_COLOR",
    "TAILFEATHER_LOGGING",
    "TAILFEATHER_DEBUG",
    "TAILFEATHER_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
