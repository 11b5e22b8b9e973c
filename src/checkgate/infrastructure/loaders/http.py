"""
HTTP resource loader.

Preloads assets with httpx on the running asyncio event loop.
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

from checkgate.domain.interfaces import ResourceLoaderInterface
from checkgate.domain.models import FetchCallback

logger = logging.getLogger(__name__)


@dataclass
class HttpResourceLoaderConfig:
    """Configuration for HttpResourceLoader.

    This typed config ensures unknown fields are rejected at construction time.
    """

    timeout: float = 30.0
    follow_redirects: bool = True
    headers: Mapping[str, str] = field(default_factory=dict)


class HttpResourceLoader(ResourceLoaderInterface):
    """Fetches URIs with GET requests through a shared httpx.AsyncClient.

    A 200 response counts as success; every other status, and any
    transport error, is reported to the failure callback.
    """

    config_class = HttpResourceLoaderConfig

    def __init__(
        self,
        config: HttpResourceLoaderConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
        **kwargs: Any,
    ):
        """
        Args:
            config: Typed configuration object (preferred)
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            loop: Event loop to run requests on (uses the running loop if None)
            **kwargs: Config fields, used when config is None
        """
        if config is None:
            config = HttpResourceLoaderConfig(**kwargs)
        elif kwargs:
            raise TypeError(
                f"Pass either config or keyword options, not both: {sorted(kwargs)}"
            )

        self._config = config
        self._transport = transport
        self._loop = loop
        self._client: httpx.AsyncClient | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def config(self) -> HttpResourceLoaderConfig:
        return self._config

    @property
    def in_flight(self) -> int:
        """Number of requests that have not answered yet."""
        return len(self._tasks)

    def fetch(
        self,
        uri: str,
        on_success: FetchCallback,
        on_failure: FetchCallback | None = None,
    ) -> None:
        """Schedule a GET request; callbacks run on the event loop later."""
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(self._get(uri, on_success, on_failure))
        # The loop only keeps weak references to tasks
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _get(
        self,
        uri: str,
        on_success: FetchCallback,
        on_failure: FetchCallback | None,
    ) -> None:
        try:
            response = await self._get_client().get(uri)
        except (httpx.HTTPError, httpx.InvalidURL) as err:
            logger.warning("GET %s failed: %s", uri, err)
            if on_failure is not None:
                on_failure(uri, "")
            return

        if response.status_code == httpx.codes.OK:
            logger.debug("GET %s -> %d", uri, response.status_code)
            on_success(uri, response.text)
            return

        logger.warning("GET %s -> %d", uri, response.status_code)
        if on_failure is not None:
            on_failure(uri, response.text)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout,
                follow_redirects=self._config.follow_redirects,
                headers=dict(self._config.headers),
                transport=self._transport,
            )
        return self._client

    async def drain(self) -> None:
        """
        Wait until every in-flight request has answered.

        Raises:
            The first exception raised by a callback, once every request
            has finished
        """
        errors: list[BaseException] = []
        while self._tasks:
            outcomes = await asyncio.gather(*self._tasks, return_exceptions=True)
            errors.extend(o for o in outcomes if isinstance(o, BaseException))
        if errors:
            raise errors[0]

    async def aclose(self) -> None:
        """Wait for in-flight requests, then close the HTTP client."""
        try:
            await self.drain()
        finally:
            if self._client is not None:
                await self._client.aclose()
                self._client = None

    async def __aenter__(self) -> "HttpResourceLoader":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
