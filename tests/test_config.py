from pathlib import Path

import pytest

from dice_royale.config import (
    COLOR_DEFAULT,
    DELAY_DEFAULT,
    SCOREBOARD_PATH_DEFAULT,
    STARTING_BALANCE,
    GameConfig,
    coerce_flag,
)
from dice_royale.config_loader import load_config_file
from dice_royale.errors import ConfigError


@pytest.mark.parametrize(
    "value, default, expected, ok",
    [
        (True, None, True, True),
        (False, None, False, True),
        (None, True, True, True),
        (None, False, False, True),
        (" true ", None, True, True),
        ("OFF", None, False, True),
        ("auto", True, True, True),
        ("auto", None, None, False),
        (1, None, True, True),
        (0, None, False, True),
        (2, None, None, False),
        ("bogus", None, None, False),
        ([], None, None, False),
    ],
)
def test_coerce_flag(value, default, expected, ok):
    assert coerce_flag(value, default=default) == (expected, ok)


def test_defaults():
    cfg = GameConfig.from_mapping({}, env={})
    assert cfg.scoreboard_path == SCOREBOARD_PATH_DEFAULT
    assert cfg.starting_balance == STARTING_BALANCE == 100
    assert cfg.delay == DELAY_DEFAULT
    assert cfg.color is COLOR_DEFAULT
    assert cfg.seed is None


def test_file_values_override_env():
    cfg = GameConfig.from_mapping(
        {"scoreboard_path": "a.txt"},
        env={"DICE_ROYALE_SCOREBOARD": "b.txt"},
    )
    assert cfg.scoreboard_path == "a.txt"


def test_env_used_when_file_is_silent():
    cfg = GameConfig.from_mapping({}, env={"DICE_ROYALE_SCOREBOARD": "b.txt"})
    assert cfg.scoreboard_path == "b.txt"


def test_loose_values_are_normalized():
    cfg = GameConfig.from_mapping(
        {"color": "yes", "delay": "-3", "starting_balance": "0", "seed": "12"},
        env={},
    )
    assert cfg.color is True
    assert cfg.delay == 0.0
    assert cfg.starting_balance == STARTING_BALANCE
    assert cfg.seed == 12


def test_garbage_values_fall_back():
    cfg = GameConfig.from_mapping(
        {"color": "sometimes", "delay": "slow", "starting_balance": "rich", "seed": "x"},
        env={},
    )
    assert cfg.color is COLOR_DEFAULT
    assert cfg.delay == DELAY_DEFAULT
    assert cfg.starting_balance == STARTING_BALANCE
    assert cfg.seed is None


def test_to_dict_roundtrip():
    cfg = GameConfig(scoreboard_path="s.txt", starting_balance=50, delay=1.0, color=True, seed=4)
    assert GameConfig.from_mapping(cfg.to_dict(), env={}) == cfg


def test_load_yaml_and_json(tmp_path: Path):
    y = tmp_path / "c.yml"
    y.write_text("delay: 0.5\ncolor: true\n", encoding="utf-8")
    assert load_config_file(y) == {"delay": 0.5, "color": True}

    j = tmp_path / "c.json"
    j.write_text('{"seed": 7}', encoding="utf-8")
    assert load_config_file(j) == {"seed": 7}


def test_empty_files_are_empty_config(tmp_path: Path):
    y = tmp_path / "c.yaml"
    y.write_text("", encoding="utf-8")
    j = tmp_path / "c.json"
    j.write_text("", encoding="utf-8")
    assert load_config_file(y) == {}
    assert load_config_file(j) == {}


@pytest.mark.parametrize(
    "name, text",
    [("c.json", "{not json"), ("c.yaml", "a: [1, 2"), ("c.yaml", "- 1\n- 2\n")],
)
def test_bad_config_files(tmp_path: Path, name, text):
    p = tmp_path / name
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(p)


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="cannot read"):
        load_config_file(tmp_path / "missing.yaml")
