from __future__ import annotations

from pathlib import Path

import pytest

from gores_trainer.config import (
    CONFIG_PATH_ENV,
    ConfigError,
    GameConfig,
    config_from_dict,
    default_config_path,
    load_config,
)
from gores_trainer.timers import TimerKind


def test_missing_file_falls_back_to_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "nope.toml") == GameConfig()


def test_full_file_is_loaded(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        "target_width = 30\n"
        "wait_time = 0.75\n"
        "target_time = 1.5\n"
        "tick_rate = 120\n"
        'timer = "clock"\n'
        "max_backlog = 0.5\n",
        encoding="utf-8",
    )

    cfg = load_config(path)
    assert cfg.target_width_deg == pytest.approx(30.0)
    assert cfg.wait_time_s == pytest.approx(0.75)
    assert cfg.target_time_s == pytest.approx(1.5)
    assert cfg.tick_rate == pytest.approx(120.0)
    assert cfg.timer is TimerKind.CLOCK
    assert cfg.max_backlog_s == pytest.approx(0.5)


def test_missing_keys_use_per_key_defaults() -> None:
    cfg = config_from_dict({"wait_time": 2})
    defaults = GameConfig()
    assert cfg.wait_time_s == pytest.approx(2.0)
    assert cfg.target_width_deg == defaults.target_width_deg
    assert cfg.target_time_s == defaults.target_time_s
    assert cfg.timer is defaults.timer


def test_unparseable_file_is_fatal(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("target_width = = 3\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"target_width": "wide"},
        {"wait_time": True},
        {"target_time": -1.0},
        {"target_width": 0},
        {"tick_rate": 0},
        {"timer": "sundial"},
        {"max_backlog": 0},
        {"wait_time": float("inf")},
        {"target_time": float("nan")},
        {"target_width": float("nan")},
        {"tick_rate": float("nan")},
        {"tick_rate": 1e10},
        {"max_backlog": float("nan")},
        {"wait_time": 1e308},
    ],
)
def test_bad_values_are_rejected(data: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        config_from_dict(data)


def test_config_path_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    explicit = tmp_path / "custom.toml"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(explicit))
    assert default_config_path() == explicit

    monkeypatch.delenv(CONFIG_PATH_ENV)
    monkeypatch.chdir(tmp_path)
    assert default_config_path() == tmp_path / "config.toml"


def test_non_finite_toml_values_are_fatal(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("wait_time = inf\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_slow_tick_rate_with_default_backlog_is_accepted() -> None:
    cfg = config_from_dict({"tick_rate": 2})
    assert cfg.tick_rate == pytest.approx(2.0)
    assert cfg.max_backlog_s is not None
    assert cfg.max_backlog_s < 1.0 / cfg.tick_rate
