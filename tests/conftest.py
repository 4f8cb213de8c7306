"""Global test configuration for pagersduty tests."""

from collections.abc import Generator

import pytest
import structlog

from tests.fixtures import Fixtures


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo structlog configuration done by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def types_fixtures() -> Fixtures:
    return Fixtures("types")


@pytest.fixture
def events_fixtures() -> Fixtures:
    return Fixtures("events")
