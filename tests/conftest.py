"""Shared pytest fixtures for checkgate tests."""

import pytest

from checkgate.application.barrier import Barrier
from checkgate.domain.models import CompletionResult
from checkgate.infrastructure.loaders.mock import MockResourceLoader
from checkgate.infrastructure.persistence.barrier_events import (
    InMemoryBarrierEventStore,
)
from checkgate.infrastructure.scheduling.manual import ManualScheduler


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Create a virtual-time scheduler."""
    return ManualScheduler()


@pytest.fixture
def event_store() -> InMemoryBarrierEventStore:
    """Create an in-memory barrier event store."""
    return InMemoryBarrierEventStore()


@pytest.fixture
def mock_loader(scheduler: ManualScheduler) -> MockResourceLoader:
    """Create a mock loader that answers after 0.2 virtual seconds."""
    return MockResourceLoader(
        scheduler,
        responses={
            "http://domain.tld/some/image.jpg": "<jpeg>",
            "http://domain.tld/someother/stylesheet.css": "body {}",
        },
        delay=0.2,
    )


@pytest.fixture
def results() -> list[CompletionResult]:
    """Collects completion results."""
    return []


@pytest.fixture
def barrier(
    results: list[CompletionResult],
    scheduler: ManualScheduler,
    mock_loader: MockResourceLoader,
    event_store: InMemoryBarrierEventStore,
) -> Barrier:
    """Create a barrier wired to the fakes, recording completions in results."""
    return Barrier(
        results.append,
        loader=mock_loader,
        scheduler=scheduler,
        event_store=event_store,
        barrier_id="barrier-001",
    )
