import io
from pathlib import Path

import pytest

from helpers.console import make_console
from helpers.engine import FakeEngine
from workflow_tui.terminal import LineReader

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def scripted(console):
    """Factory: ``scripted("a", "b")`` → LineReader answering those lines."""

    def _make(*lines: str) -> LineReader:
        text = "".join(f"{line}\n" for line in lines)
        return LineReader(console, io.StringIO(text))

    return _make


@pytest.fixture
def engine():
    return FakeEngine()


@pytest.fixture
def commercial_path():
    return DATA_DIR / "commercial_gl.json"
