"""Pytest configuration and fixtures."""

import io
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from src.consoleio.output import console
from src.consoleio.reader import InteractiveInputReader


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_env_file(temp_dir: Path) -> Path:
    """Create a mock .env file."""
    env_file = temp_dir / ".env"
    env_file.write_text(
        """CONSOLEIO_ON_EXHAUSTED=raise
CONSOLEIO_LOG_LEVEL=debug
"""
    )
    return env_file


class RecordingOutput:
    """Output sink that keeps every message in order."""

    def __init__(self):
        self.messages: list[str] = []

    def message(self, text: str):
        self.messages.append(text)


@pytest.fixture
def output() -> RecordingOutput:
    """Output sink that records every message."""
    return RecordingOutput()


@pytest.fixture
def make_reader(output):
    """Build a reader over the given lines of scripted input."""

    def _make(*lines: str, **kwargs) -> InteractiveInputReader:
        source = io.StringIO("".join(f"{line}\n" for line in lines))
        return InteractiveInputReader(source=source, output=output, **kwargs)

    return _make


@pytest.fixture(autouse=True)
def reset_console():
    """Restore global console state changed by CLI runs."""
    yield
    console.quiet = False


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, tmp_path):
    """Isolate tests from actual environment variables and .env files."""
    for key in ["CONSOLEIO_ON_EXHAUSTED", "CONSOLEIO_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
