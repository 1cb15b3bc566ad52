"""Shared pytest fixtures for evtflags tests."""

import pytest

from evtflags.core.parser import EventFlagParser


@pytest.fixture
def parser():
    """A fresh event flag parser."""
    return EventFlagParser()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with an empty home directory and no git root.

    Returns the working directory, where a local evtflags.toml may be written.
    """
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("EVTFLAGS_GIT_ROOT", str(tmp_path / "no-git"))
    monkeypatch.chdir(work)
    return work
