"""
conftest.py
-----------
Shared pytest fixtures for today tests.

Provides fixtures for:
- Temporary application and entries directories
- Sample entry content
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def app_dir(tmp_dir, monkeypatch):
    """Application directory with $TODAY_DIR pointing at it."""
    monkeypatch.setenv("TODAY_DIR", str(tmp_dir))
    return tmp_dir


@pytest.fixture
def entries_dir(tmp_dir):
    """Existing, empty entries directory."""
    path = tmp_dir / "entries"
    path.mkdir()
    return path


# ----- Sample Content Fixtures -----

@pytest.fixture
def nested_entry_content():
    """Entry with three heading levels and a preamble."""
    return (
        b"# 2024-01-15\n"
        b"\n"
        b"Preamble line\n"
        b"\n"
        b"## Work\n"
        b"- [ ] ship release\n"
        b"### Someday\n"
        b"- [ ] rewrite everything\n"
        b"## Home\n"
        b"- [ ] groceries\n"
    )


@pytest.fixture
def fenced_entry_content():
    """Entry with shell comments inside a fenced block under a level-2 heading."""
    return (
        b"# 2024-01-15\n"
        b"## Snippets\n"
        b"```sh\n"
        b"# not a heading\n"
        b"echo hi\n"
        b"```\n"
        b"after fence\n"
    )
