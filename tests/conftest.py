# tests/conftest.py

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from cli import CLI
from storage import Storage

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def plain(text: str) -> str:
    return ANSI_RE.sub("", text)


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / ".tododin"


@pytest.fixture()
def storage(data_file: Path) -> Storage:
    return Storage(data_file)


@pytest.fixture()
def cli(storage: Storage) -> CLI:
    return CLI(storage)


@pytest.fixture()
def read_saved(data_file: Path):
    """Return the parsed contents of the data file."""

    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))

    return _read
