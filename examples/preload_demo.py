#!/usr/bin/env python3
"""
Demo script showing a barrier joining events and asset preloads.

Run with:
    python examples/preload_demo.py

This demonstrates:
1. Manual checkpoints resolved by the application's own logic
2. Asset checkpoints resolved by a resource loader
3. Progress reporting and the single completion signal
4. A second barrier that gives up when an asset never arrives
"""

import asyncio
import logging

from checkgate import (
    AsyncioScheduler,
    Barrier,
    CompletionResult,
    InMemoryBarrierEventStore,
    MockResourceLoader,
)

logger = logging.getLogger("checkgate_demo")


def setup_logging(verbose: bool = False) -> None:
    """Console logging for the demo and the library."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)-8s | %(name)s | %(message)s"))
    for name in ("checkgate_demo", "checkgate"):
        named = logging.getLogger(name)
        named.setLevel(logging.DEBUG if verbose else logging.INFO)
        named.addHandler(handler)


def report_progress(name: str, remaining: int, total: int) -> None:
    logger.info("  [%d/%d] %s", total - remaining, total, name)


async def run_barrier(
    title: str, loader_hang: tuple[str, ...], timeout: float
) -> CompletionResult:
    loop = asyncio.get_running_loop()
    scheduler = AsyncioScheduler(loop)
    loader = MockResourceLoader(scheduler, hang=loader_hang, delay=0.2)
    store = InMemoryBarrierEventStore()
    done: asyncio.Future[CompletionResult] = loop.create_future()

    barrier = Barrier(
        done.set_result,
        timeout,
        loader=loader,
        scheduler=scheduler,
        event_store=store,
        barrier_id=title,
    )
    barrier.set_progress_observer(report_progress)
    barrier.add_checkpoints(["config-loaded", "session-ready"])
    barrier.add_assets(["https://cdn.example/app.css", "https://cdn.example/logo.png"])
    barrier.start()

    loop.call_later(0.05, barrier.mark_complete, "config-loaded")
    loop.call_later(0.1, barrier.mark_complete, "session-ready")

    result = await done
    logger.info("%s finished: %s", title, result.reason.value)
    for event in store.get_events(title):
        logger.debug("  %s %s", event.event_type.value, event.checkpoint or "")
    return result


async def main() -> None:
    setup_logging()

    logger.info("=" * 60)
    logger.info("All assets arrive")
    await run_barrier("happy-path", (), timeout=2.0)

    logger.info("=" * 60)
    logger.info("logo.png never arrives")
    await run_barrier("stalled-asset", ("https://cdn.example/logo.png",), timeout=0.5)


if __name__ == "__main__":
    asyncio.run(main())
