"""Shared fixtures for eventqueues tests."""

from typing import Any

import pytest
from loguru import logger

from eventqueues import EventQueues, reset_defaults


@pytest.fixture(autouse=True)
def _restore_defaults():
    """Keep process-wide defaults from leaking between tests."""
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def queues() -> EventQueues:
    """Fresh synchronous dispatcher with built-in defaults."""
    return EventQueues()


@pytest.fixture
def log_records():
    """Capture eventqueues log records emitted during a test."""
    records: list[dict[str, Any]] = []
    logger.enable("eventqueues")
    handler_id = logger.add(
        lambda message: records.append(message.record), level="DEBUG"
    )
    yield records
    logger.remove(handler_id)
    logger.disable("eventqueues")


def add_one(x: int) -> int:
    return x + 1


def double(y: int) -> int:
    return y * 2
