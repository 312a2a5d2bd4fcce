from __future__ import annotations

from typing import Iterator

import lib_cli_exit_tools
import pytest

from hello_devcontainer import config as app_config
from hello_devcontainer import logging_config

from _fakes import FixedClock


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset module-level toggles and environment between tests."""

    monkeypatch.delenv(app_config.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    app_config._reset_dotenv_state_for_testing()
    logging_config._reset_logging_for_testing()
    yield
    app_config._reset_dotenv_state_for_testing()
    logging_config._reset_logging_for_testing()
