"""Shared fixtures for project tests."""

import os
import sys

import pytest

# Ensure tests/project/ is on sys.path so test files can import the fakes.
sys.path.insert(0, os.path.dirname(__file__))

from fake_cloner import FakeCloner  # noqa: E402
from fake_prompt import FakePrompt  # noqa: E402

from cw3d.chains.registry import ChainRegistry  # noqa: E402


@pytest.fixture
def registry():
    return ChainRegistry.default()


@pytest.fixture
def fake_cloner():
    return FakeCloner()


@pytest.fixture
def fake_prompt():
    return FakePrompt(answer=False)
