"""
Mock resource loader for testing without a network.

Answers with predefined bodies, delivered later through a scheduler.
"""

from collections.abc import Iterable, Mapping

from checkgate.domain.interfaces import ResourceLoaderInterface, SchedulerInterface
from checkgate.domain.models import FetchCallback


class MockResourceLoader(ResourceLoaderInterface):
    """Returns predefined responses for testing."""

    def __init__(
        self,
        scheduler: SchedulerInterface,
        responses: Mapping[str, str] | None = None,
        failures: Mapping[str, str] | None = None,
        hang: Iterable[str] = (),
        delay: float = 0.0,
    ):
        """
        Args:
            scheduler: Delivers the callbacks (never called synchronously)
            responses: Body returned per URI on success (default "")
            failures: URIs that fail, mapped to the failure body
            hang: URIs that never answer
            delay: Seconds between fetch() and the callback
        """
        self._scheduler = scheduler
        self._responses = dict(responses or {})
        self._failures = dict(failures or {})
        self._hang = set(hang)
        self._delay = delay
        self._requested: list[str] = []

    def fetch(
        self,
        uri: str,
        on_success: FetchCallback,
        on_failure: FetchCallback | None = None,
    ) -> None:
        """Queue the predefined answer for uri."""
        self._requested.append(uri)

        if uri in self._hang:
            return

        if uri in self._failures:
            if on_failure is not None:
                body = self._failures[uri]
                self._scheduler.call_later(self._delay, lambda: on_failure(uri, body))
            return

        body = self._responses.get(uri, "")
        self._scheduler.call_later(self._delay, lambda: on_success(uri, body))

    @property
    def requested(self) -> tuple[str, ...]:
        """URIs passed to fetch(), in call order."""
        return tuple(self._requested)

    @property
    def call_count(self) -> int:
        """Number of times fetch() has been called."""
        return len(self._requested)

    def reset(self) -> None:
        """Forget recorded requests."""
        self._requested.clear()
