"""Shared fixtures for CLI tests."""

import os
import sys

import pytest

# The project fakes are shared with tests/project/.
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "project"))

from fake_cloner import FakeCloner  # noqa: E402


@pytest.fixture
def fake_cloner():
    return FakeCloner()


@pytest.fixture
def patched_cloner(monkeypatch, fake_cloner):
    """Replace the GitPython cloner used by `cw3d new` with fake_cloner."""
    monkeypatch.setattr("cw3d.project.cli.TemplateCloner", lambda: fake_cloner)
    return fake_cloner
