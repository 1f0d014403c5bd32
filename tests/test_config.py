from __future__ import annotations

from pathlib import Path

from firstrun import config as config_module


def test_load_config_defaults(isolated_home) -> None:
    config = config_module.load_config()

    assert config.store.path == isolated_home["defaults_file"]
    assert config.debug.enabled is False


def test_load_config_custom(isolated_home, tmp_path: Path) -> None:
    config_file = isolated_home["config_file"]
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(
        f"""
store:
  path: {tmp_path / "flags.json"}
debug:
  enabled: true
        """,
        encoding="utf-8",
    )

    config = config_module.load_config()

    assert config.store.path == tmp_path / "flags.json"
    assert config.debug.enabled is True


def test_load_config_expands_home(isolated_home, monkeypatch) -> None:
    config_file = isolated_home["config_file"]
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text("store:\n  path: ~/flags.json\n", encoding="utf-8")

    config = config_module.load_config()

    assert config.store.path == isolated_home["home"] / "flags.json"


def test_load_config_ignores_malformed_yaml(isolated_home) -> None:
    config_file = isolated_home["config_file"]
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text("store: [unclosed\n", encoding="utf-8")

    config = config_module.load_config()

    assert config.store.path == isolated_home["defaults_file"]


def test_load_config_is_cached(isolated_home) -> None:
    first = config_module.load_config()
    isolated_home["config_file"].parent.mkdir(parents=True, exist_ok=True)
    isolated_home["config_file"].write_text("debug:\n  enabled: true\n", encoding="utf-8")

    assert config_module.load_config() is first

    config_module.clear_cache()
    assert config_module.load_config().debug.enabled is True
