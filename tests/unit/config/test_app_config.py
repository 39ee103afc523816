"""Tests for the ``bowling.config`` helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from bowling.config import AppConfig, GameConfig, apply_dot_overrides, load_app_config


def test_defaults_without_overlays() -> None:
    cfg = load_app_config()
    assert cfg == AppConfig()
    assert cfg.sim.n_frames == 10
    assert cfg.logging.log_file is None


def test_load_app_config_merges_overlays(write_yaml) -> None:
    base = write_yaml(
        "base.yaml",
        {
            "game": {"frames": [[10], [5, 3]]},
            "sim": {"n_games": 50, "seed": 3},
            "logging": {"level": "DEBUG"},
        },
    )
    overlay = write_yaml(
        "overlay.yaml",
        {
            "sim.seed": 11,
            "logging": {"log_file": "logs/bowling.log"},
        },
    )

    cfg = load_app_config(base, overlay)

    assert cfg.game.frames == [[10], [5, 3]]
    assert cfg.sim.n_games == 50
    assert cfg.sim.seed == 11
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.log_file == Path("logs/bowling.log")


def test_load_app_config_ignores_unknown_keys(write_yaml) -> None:
    path = write_yaml("extra.yaml", {"sim": {"n_games": 5, "bogus": 1}, "other": {"x": 1}})
    cfg = load_app_config(path)
    assert cfg.sim.n_games == 5
    assert not hasattr(cfg.sim, "bogus")


def test_load_app_config_rejects_non_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_app_config(path)


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_app_config(path) == AppConfig()


def test_game_config_builds_from_frames() -> None:
    game = GameConfig(frames=[[10], [5, 3]]).build()
    assert game.total_score() == 26


def test_game_config_builds_from_flat_rolls() -> None:
    game = GameConfig(rolls=[5, 5, 3]).build()
    assert game.positions() == [1, 2]
    assert game.total_score() == 16


def test_game_config_frames_win_over_rolls() -> None:
    game = GameConfig(frames=[[1, 1]], rolls=[9]).build()
    assert game.total_score() == 2


def test_apply_dot_overrides_coerces_types() -> None:
    cfg = apply_dot_overrides(
        AppConfig(),
        [
            "sim.n_games=20",
            "sim.strike_bias=0.25",
            "sim.seed=none",
            "logging.level=WARNING",
            "logging.log_file=out/run.log",
            "game.first_position=3",
        ],
    )
    assert cfg.sim.n_games == 20
    assert cfg.sim.strike_bias == pytest.approx(0.25)
    assert cfg.sim.seed is None
    assert cfg.logging.level == "WARNING"
    assert cfg.logging.log_file == Path("out/run.log")
    assert cfg.game.first_position == 3


@pytest.mark.parametrize("pair", ["sim.n_games", "n_games=3"])
def test_apply_dot_overrides_rejects_malformed(pair: str) -> None:
    with pytest.raises(ValueError):
        apply_dot_overrides(AppConfig(), [pair])


def test_apply_dot_overrides_unknown_option() -> None:
    with pytest.raises(AttributeError):
        apply_dot_overrides(AppConfig(), ["sim.nope=1"])


def test_apply_dot_overrides_unknown_section() -> None:
    with pytest.raises(AttributeError):
        apply_dot_overrides(AppConfig(), ["io.results_dir=x"])


def test_game_config_rejects_negative_pins() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        GameConfig(frames=[[-5, 3]]).build()
    with pytest.raises(ValueError, match="non-negative"):
        GameConfig(rolls=[4, -1]).build()


def test_game_config_from_yaml_rejects_negative_pins(write_yaml) -> None:
    path = write_yaml("neg.yaml", {"game": {"frames": [[-5, 3]]}})
    cfg = load_app_config(path)
    with pytest.raises(ValueError):
        cfg.game.build()


def test_apply_dot_overrides_parses_flat_roll_list() -> None:
    cfg = apply_dot_overrides(AppConfig(), ["game.rolls=10,5,3"])
    assert cfg.game.rolls == [10, 5, 3]
    assert cfg.game.build().total_score() == 26


def test_apply_dot_overrides_parses_nested_frames() -> None:
    cfg = apply_dot_overrides(AppConfig(), ["game.frames=[[10],[5,3]]"])
    assert cfg.game.frames == [[10], [5, 3]]
    assert cfg.game.build().total_score() == 26


@pytest.mark.parametrize(
    "pair", ["game.frames=10", "game.rolls=a,b", "game.rolls=[[1]]", "game.frames=[["]
)
def test_apply_dot_overrides_rejects_badly_shaped_lists(pair: str) -> None:
    with pytest.raises(ValueError):
        apply_dot_overrides(AppConfig(), [pair])
