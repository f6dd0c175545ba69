import json
from pathlib import Path

import pytest

from dice_royale import cli
from dice_royale import scoreboard as store
from dice_royale.scoreboard import ScoreEntry
from tests import ScriptedConsole


@pytest.fixture
def seeded_board(board_path: Path) -> Path:
    store.save(
        {
            1: [ScoreEntry("Alice", 300), ScoreEntry("Bob", 250)],
            5: [ScoreEntry("Cara", 100)],
        },
        board_path,
    )
    return board_path


def test_scores_all_buckets(seeded_board: Path, capsys):
    rc = cli.main(["--scoreboard", str(seeded_board), "scores"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Top Scores for 1 Round(s)" in out
    assert "1. Alice - $300" in out
    assert "2. Bob - $250" in out
    assert "Top Scores for 5 Round(s)" in out


def test_scores_single_bucket(seeded_board: Path, capsys):
    rc = cli.main(["--scoreboard", str(seeded_board), "scores", "--rounds", "5"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "1. Cara - $100" in out
    assert "Alice" not in out


def test_scores_empty_bucket(seeded_board: Path, capsys):
    cli.main(["--scoreboard", str(seeded_board), "scores", "--rounds", "7"])
    assert "No scores yet!" in capsys.readouterr().out


def test_scores_missing_store(board_path: Path, capsys):
    rc = cli.main(["--scoreboard", str(board_path), "scores"])
    assert rc == 0
    assert "No scores yet!" in capsys.readouterr().out


def test_scores_rejects_out_of_range_rounds(board_path: Path, capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["--scoreboard", str(board_path), "scores", "--rounds", "11"])
    assert exc.value.code == 2
    assert "between 1 and 10" in capsys.readouterr().err


def test_scoreboard_path_from_env(seeded_board: Path, monkeypatch, capsys):
    monkeypatch.setenv("DICE_ROYALE_SCOREBOARD", str(seeded_board))
    cli.main(["scores", "--rounds", "1"])
    assert "1. Alice - $300" in capsys.readouterr().out


def test_scoreboard_path_from_yaml_config(seeded_board: Path, tmp_path: Path, capsys):
    cfg = tmp_path / "royale.yaml"
    cfg.write_text(f"scoreboard_path: {seeded_board}\n", encoding="utf-8")
    cli.main(["--config", str(cfg), "scores", "--rounds", "1"])
    assert "1. Alice - $300" in capsys.readouterr().out


def test_bad_config_exits_2(tmp_path: Path, capsys):
    cfg = tmp_path / "royale.json"
    cfg.write_text("[1, 2, 3]", encoding="utf-8")
    rc = cli.main(["--config", str(cfg), "scores"])
    assert rc == 2
    assert "failed:" in capsys.readouterr().err


def test_missing_config_exits_2(tmp_path: Path, capsys):
    rc = cli.main(["--config", str(tmp_path / "nope.json"), "scores"])
    assert rc == 2


def _play(monkeypatch, answers):
    console = ScriptedConsole(answers)
    monkeypatch.setattr("builtins.input", console.input)
    return console


def test_play_records_completed_game(board_path: Path, monkeypatch, capsys):
    # seed 3 is arbitrary; bet 1 so any roll except snake eyes leaves money
    _play(monkeypatch, ["Ann", "1", "1", "", "", "n"])
    rc = cli.main(["--scoreboard", str(board_path), "play", "--seed", "3"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Welcome to Dice Royale!" in out
    assert "GAME OVER" in out
    board = store.load(board_path)
    if "You are bankrupt!" in out:
        assert board == {}
    else:
        assert [e.name for e in board[1]] == ["Ann"]


def test_play_is_default_command(board_path: Path, monkeypatch, capsys):
    _play(monkeypatch, ["Ann", "2", "10", "", "", "x", "n"])
    rc = cli.main(["--scoreboard", str(board_path)])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Welcome Ann!" in out


def test_play_end_of_input_exits_cleanly(board_path: Path, monkeypatch, capsys):
    _play(monkeypatch, ["Ann"])
    rc = cli.main(["--scoreboard", str(board_path), "play"])
    assert rc == 0
    assert not board_path.exists()


def test_play_color_output(board_path: Path, monkeypatch, capsys):
    _play(monkeypatch, [])
    cli.main(["--scoreboard", str(board_path), "play", "--color"])
    assert "\033[1;34m" in capsys.readouterr().out


def test_same_seed_same_game(tmp_path: Path, monkeypatch, capsys):
    outputs = []
    for i in range(2):
        _play(monkeypatch, ["Ann", "1", "5", "", "", "n"])
        cli.main(["--scoreboard", str(tmp_path / f"b{i}.txt"), "play", "--seed", "99"])
        outputs.append(capsys.readouterr().out)
    assert outputs[0] == outputs[1]


def test_json_config_values(tmp_path: Path, monkeypatch, capsys):
    cfg = tmp_path / "royale.json"
    cfg.write_text(json.dumps({"starting_balance": 300}), encoding="utf-8")
    _play(monkeypatch, ["Ann"])
    cli.main(["--config", str(cfg), "--scoreboard", str(tmp_path / "b.txt"), "play"])
    assert "1. You start with $300." in capsys.readouterr().out
