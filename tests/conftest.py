from __future__ import annotations

import logging

import pytest

from buildrules.runtime import config as build_config
from buildrules.runtime.logging import shutdown_logging


@pytest.fixture(autouse=True)
def _isolated_build_config():
    token = build_config._BUILD_CONFIG.set(None)
    yield
    build_config._BUILD_CONFIG.reset(token)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(saved_handlers)
    root.setLevel(saved_level)
