"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from tests.helpers.fakes import FakeEnvironmentStore, FakeUserInterface


@pytest.fixture
def fake_ui() -> FakeUserInterface:
    """Create a UI that confirms every prompt."""
    return FakeUserInterface()


@pytest.fixture
def fake_env() -> FakeEnvironmentStore:
    """Create an empty environment store."""
    return FakeEnvironmentStore()


@pytest.fixture
def transient_dir(tmp_path: Path) -> Path:
    """Directory where the edit pipeline creates its transient files."""
    path = tmp_path / "transient"
    path.mkdir()
    return path


@pytest.fixture
def commit_msg(tmp_path: Path) -> Path:
    """Create a commit message file as git would hand it over."""
    path = tmp_path / "COMMIT_EDITMSG"
    path.write_bytes(b"fix bug\n\nSigned-off-by: x\n")
    return path


@pytest.fixture
def isolated_home(tmp_path: Path):
    """Point HOME and the XDG directories at a temp dir.

    Yields:
        The fake home directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    env = {
        "HOME": str(home),
        "XDG_CONFIG_HOME": str(home / ".config"),
        "XDG_DATA_HOME": str(home / ".local" / "share"),
    }
    with patch.dict(os.environ, env):
        os.environ.pop("GITPAD_CONFIG", None)
        yield home
