from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from sudoku_backend.app import create_app
from sudoku_backend.core import initialise

FULL_BOARD = "269574813534918726781263594395846271478129365126357948857491632913682457642735189"
SKELETON = "2.9.7.8.3534.1.7.6.8.2.3.9.3.5.4.2.1.7.1.9.6.1.6.5.9.8.5.4.1.3.9.3.8.2.5.6.2.7.5.8."

SETTINGS_TOML = """\
[default]
count = 3
ordering = "default"

[max]
count = 5
ordering = "default"
"""


def write_settings(path: Path, text: str = SETTINGS_TOML) -> tuple[str, Path]:
    path.write_text(text, encoding="utf-8")
    return f"$ROOT/{path.name}", path


@pytest.fixture
def settings_file(tmp_path):
    return write_settings(tmp_path / "leaderboard.toml")


@pytest.fixture
def database_file(tmp_path):
    return "$ROOT/data/sudoku-backend.db", tmp_path / "data" / "sudoku-backend.db"


@pytest.fixture
def engine(database_file):
    engine = initialise(database_file, pool_size=2, pool_timeout=0.2)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(database_file, settings_file):
    app = create_app(database_file, settings_file)
    with TestClient(app) as client:
        yield client
