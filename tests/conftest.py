"""Shared test configuration.

Keeps tests independent of the developer's environment: form defaults
come from CALCULATOR_* variables, so they are cleared for every test.
"""

import pytest


@pytest.fixture(autouse=True)
def _isolate_calculator_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CALCULATOR_DEFAULT_UNIT_SYSTEM",
        "CALCULATOR_DEFAULT_ACTIVITY",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
