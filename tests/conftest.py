"""
Pytest configuration for the tsedit test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Project and source file fixtures
- A sink collecting logged warnings
"""

import os

import pytest

from tsedit import Project
from tsedit.logging_config import logger, setup_logging


def pytest_configure(config):
    """Run the suite in machine mode."""
    os.environ.setdefault("TSEDIT_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)


@pytest.fixture
def project():
    """Empty in-memory project."""
    return Project()


@pytest.fixture
def make_file(project):
    """
    Factory fixture creating source files in a fresh project.

    Usage:
        def test_something(make_file):
            sf = make_file("export class A {}")
    """
    counter = {"n": 0}

    def _make(text: str, path: str = None):
        if path is None:
            counter["n"] += 1
            path = f"/test{counter['n']}.ts"
        return project.create_source_file(path, text)

    return _make


@pytest.fixture
def warnings_logged():
    """Messages logged at WARNING or above while the test runs."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
