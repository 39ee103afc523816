# pragma: no cover
import logging
import sys
from pathlib import Path

import pytest
import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if SRC_PATH.exists():
    sys.path.insert(0, str(SRC_PATH))
TEST_PATH = PROJECT_ROOT / "tests"
if TEST_PATH.exists():
    sys.path.insert(0, str(TEST_PATH))

from bowling.game.engine import Game  # noqa: E402


@pytest.fixture
def game() -> Game:
    """A fresh, empty game for each test."""
    return Game()


@pytest.fixture
def write_yaml(tmp_path: Path):
    def _write(name: str, data: object) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data))
        return path

    return _write


@pytest.fixture
def preserve_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
