"""Shared pytest fixtures for the firstrun test suite.

Every test runs against a temporary ``~/.firstrun`` so nothing touches the
real defaults file, config, or debug log.
"""

import json
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    """Point all firstrun paths at a temporary home directory.

    Returns:
        dict: Paths for home, config_file, defaults_file and debug_log.
    """
    from firstrun import config, context, debug

    home = tmp_path / "home"
    firstrun_dir = home / ".firstrun"
    config_file = firstrun_dir / "config.yaml"
    defaults_file = firstrun_dir / "defaults.json"
    debug_log = firstrun_dir / "debug.log"

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(config, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config, "DEFAULTS_FILE", defaults_file)
    monkeypatch.setattr(config, "_CACHE", None)
    monkeypatch.setattr(debug, "DEBUG_DIR", firstrun_dir)
    monkeypatch.setattr(debug, "DEBUG_LOG_FILE", debug_log)
    debug.disable_debug_logging()
    context.reset_shared_context()

    yield {
        "home": home,
        "config_file": config_file,
        "defaults_file": defaults_file,
        "debug_log": debug_log,
    }

    debug.disable_debug_logging()
    context.reset_shared_context()


@pytest.fixture
def defaults_file(isolated_home) -> Path:
    return isolated_home["defaults_file"]


@pytest.fixture
def write_defaults(defaults_file) -> Callable[[dict], None]:
    """Write a raw defaults document, bypassing the store.

    Example:
        >>> def test_something(write_defaults):
        ...     write_defaults({"hasOnboardingBeenShown": True})
    """

    def _write(data: dict) -> None:
        defaults_file.parent.mkdir(parents=True, exist_ok=True)
        defaults_file.write_text(json.dumps(data), encoding="utf-8")

    return _write


@pytest.fixture
def read_debug_log(isolated_home) -> Callable[[], list]:
    def _read() -> list:
        log_file = isolated_home["debug_log"]
        if not log_file.exists():
            return []
        return [json.loads(line) for line in log_file.read_text().splitlines() if line.strip()]

    return _read
