import logging

import pytest

from tests._util import FakeFilesystem


@pytest.fixture
def fs() -> FakeFilesystem:
    return FakeFilesystem()


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
