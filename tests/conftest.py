"""Pytest configuration.

Ensures 'src' (src layout) is on sys.path and isolates every test from the
developer's environment: no ANTITHESIS_* / TENANT_NAME variables are set.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_src = Path(__file__).resolve().parents[1] / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

_ENV_VARS = (
    "ANTITHESIS_USERNAME",
    "ANTITHESIS_PASSWORD",
    "ANTITHESIS_TENANT_NAME",
    "ANTITHESIS_ENDPOINT_URL",
    "ANTITHESIS_RECIPIENTS_KEY",
    "ANTITHESIS_PRINT_PARAMS",
    "ANTITHESIS_QUALIFY_IMAGES",
    "ANTITHESIS_DEFAULT_RECIPIENTS_FROM_GIT",
    "TENANT_NAME",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
