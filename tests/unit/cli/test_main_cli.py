from __future__ import annotations

import argparse
import logging

import pytest

import bowling.cli.main as cli_main


@pytest.fixture(autouse=True)
def _no_configure_logging(monkeypatch):
    calls: list[dict] = []
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kw: calls.append(kw))
    return calls


def test_parse_frame_variants():
    assert cli_main.parse_frame("5,3") == [5, 3]
    assert cli_main.parse_frame("10") == [10]
    assert cli_main.parse_frame("x") == [10]
    assert cli_main.parse_frame("") == []


@pytest.mark.parametrize("text", ["a,1", "5;3", "1,-2"])
def test_parse_frame_rejects_bad_input(text):
    with pytest.raises(argparse.ArgumentTypeError):
        cli_main.parse_frame(text)


def test_score_prints_total(capsys):
    cli_main.main(["score", "10", "5,3"])
    assert capsys.readouterr().out.strip() == "26"


def test_score_per_frame_prints_sheet(capsys):
    cli_main.main(["score", "--per-frame", "5,5", "3"])
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1] == "16"
    assert out[1].split() == ["1", "5", "/", "10", "3", "13"]


def test_score_reads_frames_from_config(write_yaml, capsys):
    path = write_yaml("game.yaml", {"game": {"frames": [[10], [10], [10], [10], [0, 0]]}})
    cli_main.main(["--config", str(path), "score"])
    assert capsys.readouterr().out.strip() == "90"


def test_score_rejected_roll_exits_with_status_2(caplog):
    with caplog.at_level(logging.ERROR, logger=cli_main.__name__):
        with pytest.raises(SystemExit) as excinfo:
            cli_main.main(["score", "6,5"])
    assert excinfo.value.code == cli_main.EXIT_BAD_ROLL
    assert any("cannot contain more than 10" in r.getMessage() for r in caplog.records)


def test_log_level_flag_overrides_config(_no_configure_logging, write_yaml, capsys):
    path = write_yaml("cfg.yaml", {"logging": {"level": "ERROR"}})
    cli_main.main(["--config", str(path), "score", "1"])
    cli_main.main(["--config", str(path), "--log-level", "DEBUG", "score", "1"])
    capsys.readouterr()
    assert [c["level"] for c in _no_configure_logging] == ["ERROR", "DEBUG"]


def test_main_dispatches_watch(monkeypatch):
    captured: dict[str, object] = {}

    def fake_watch_game(*, seed, n_frames, strike_bias):
        captured.update(seed=seed, n_frames=n_frames, strike_bias=strike_bias)

    monkeypatch.setattr(cli_main, "watch_game", fake_watch_game)

    cli_main.main(["--set", "sim.strike_bias=0.2", "watch", "--seed", "123", "--frames", "5"])

    assert captured == {"seed": 123, "n_frames": 5, "strike_bias": 0.2}


def test_main_dispatches_simulate(monkeypatch):
    captured: dict[str, object] = {}

    def fake_simulate(cfg):
        captured["sim"] = cfg.sim

    monkeypatch.setattr(cli_main, "_simulate", fake_simulate)

    cli_main.main(["simulate", "--n-games", "12", "--seed", "4"])

    assert captured["sim"].n_games == 12
    assert captured["sim"].seed == 4
    assert captured["sim"].n_frames == 10


def test_simulate_logs_summary(caplog):
    with caplog.at_level(logging.INFO, logger=cli_main.__name__):
        cli_main.main(["simulate", "--n-games", "5", "--seed", "1"])
    assert any(r.getMessage().startswith("games=5 ") for r in caplog.records)


def test_score_helper_uses_config_game(capsys):
    from helpers.config_factory import make_test_app_config

    total = cli_main._score(make_test_app_config(), [], per_frame=False)
    assert total == 26
    assert capsys.readouterr().out.strip() == "26"


def test_score_command_line_frames_start_at_first_position(capsys):
    cli_main.main(["--set", "game.first_position=4", "score", "--per-frame", "1,2"])
    out = capsys.readouterr().out.strip().splitlines()
    assert out[1].split() == ["4", "1", "2", "3", "0", "3"]
    assert out[-1] == "3"


def test_score_with_list_override(capsys):
    cli_main.main(["--set", "game.rolls=10,5,3", "score"])
    assert capsys.readouterr().out.strip() == "26"


def test_bad_list_override_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main(["--set", "game.frames=10", "score"])
    assert excinfo.value.code == 2
    assert "does not match" in capsys.readouterr().err


def test_unknown_override_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main(["--set", "sim.nope=1", "simulate"])
    assert excinfo.value.code == 2
    assert "nope" in capsys.readouterr().err


def test_score_negative_pins_in_config_exit_with_status_2(write_yaml, caplog):
    path = write_yaml("neg.yaml", {"game": {"frames": [[-5, 3]]}})
    with caplog.at_level(logging.ERROR, logger=cli_main.__name__):
        with pytest.raises(SystemExit) as excinfo:
            cli_main.main(["--config", str(path), "score"])
    assert excinfo.value.code == cli_main.EXIT_BAD_ROLL
    assert any(getattr(r, "code", None) == "invalid_pins" for r in caplog.records)
