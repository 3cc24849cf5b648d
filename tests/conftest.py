# File: tests/conftest.py

import os
import sys

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Logging and test doubles
from app.core.config.logging_setup import configure_logging
from tests.features.media_fragments.fakes import InMemoryPlayer


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    """
    configure_logging("DEBUG")
    yield


@pytest.fixture
def player():
    """
    A paused player at position 0 for a 60-second video.
    """
    return InMemoryPlayer(src="app://local/media/lecture.mp4", duration=60.0)
