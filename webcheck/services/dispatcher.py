"""Concurrent host checking with a streamed, unordered result sequence.

Concurrency Strategy:
- Host names wait in an asyncio.Queue drained by a bounded pool of workers
- Each worker runs one HostResolver check at a time, start to finish
- DNS lookups run on a thread pool owned by the run, one thread per worker;
  a lookup's timeout only counts from when its thread starts it
- Results go into a bounded result queue as soon as a check finishes
- A supervisor task awaits every worker before enqueueing the end marker,
  so the consumer sees end-of-stream only after every result
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Any

from webcheck.models import CheckState, HostCheckResult
from webcheck.services.resolver import HostResolver

logger = logging.getLogger(__name__)

_END = object()


class Dispatcher:
    """Fan host checks out over a worker pool and stream back the results."""

    def __init__(
        self,
        resolver: HostResolver | None = None,
        max_workers: int = 64,
        result_buffer: int = 1024,
    ) -> None:
        """Initialize dispatcher.

        Args:
            resolver: Resolver used for every host (default settings if None)
            max_workers: Maximum number of hosts checked at once (must be > 0)
            result_buffer: Capacity of the result queue (must be > 0)

        Raises:
            ValueError: If max_workers or result_buffer is not positive
        """
        if max_workers <= 0:
            raise ValueError(f"max_workers must be > 0, got {max_workers}")
        if result_buffer <= 0:
            raise ValueError(f"result_buffer must be > 0, got {result_buffer}")

        self.resolver = resolver or HostResolver()
        self.max_workers = max_workers
        self.result_buffer = result_buffer

    async def _worker(
        self,
        pending: "asyncio.Queue[str]",
        results: "asyncio.Queue[Any]",
        executor: Executor,
    ) -> None:
        """Check hosts from the pending queue until it is empty."""
        while True:
            try:
                host = pending.get_nowait()
            except asyncio.QueueEmpty:
                return

            try:
                result = await self.resolver.check(host, executor=executor)
            except Exception as e:
                # A broken prober must not stall the stream for this host.
                logger.exception("Check for %s failed unexpectedly", host)
                result = HostCheckResult(name=host, error=e)

            await results.put(result)

    async def _supervise(
        self,
        workers: list["asyncio.Task[None]"],
        results: "asyncio.Queue[Any]",
    ) -> None:
        """Wait for every worker, then mark the end of the stream."""
        await asyncio.gather(*workers)
        await results.put(_END)

    async def run(self, hosts: Sequence[str]) -> AsyncIterator[HostCheckResult]:
        """Check every host and yield results in completion order.

        Exactly one result is yielded per input host name (duplicates are
        checked once per occurrence). Iteration ends after all checks finish.
        Closing the iterator early cancels the checks still running.

        Args:
            hosts: Host names to check

        Yields:
            HostCheckResult for each host, fastest first
        """
        pending: asyncio.Queue[str] = asyncio.Queue()
        for host in hosts:
            pending.put_nowait(host)
            logger.debug("%s: %s", host, CheckState.UNSTARTED.value)

        results: asyncio.Queue[Any] = asyncio.Queue(maxsize=self.result_buffer)
        worker_count = min(self.max_workers, len(hosts))
        executor = ThreadPoolExecutor(
            max_workers=max(worker_count, 1), thread_name_prefix="webcheck-dns"
        )

        logger.info(
            "Checking %d host(s) with %d worker(s)", len(hosts), worker_count
        )

        workers = [
            asyncio.create_task(self._worker(pending, results, executor))
            for _ in range(worker_count)
        ]
        supervisor = asyncio.create_task(self._supervise(workers, results))

        up = 0
        emitted = 0
        try:
            while True:
                item = await results.get()
                if item is _END:
                    break
                emitted += 1
                if item.is_up:
                    up += 1
                yield item
        finally:
            for task in (*workers, supervisor):
                if not task.done():
                    task.cancel()
            await asyncio.gather(*workers, supervisor, return_exceptions=True)
            executor.shutdown(wait=False, cancel_futures=True)

        logger.info(
            "Completed %d check(s): %d up, %d down or unresolved",
            emitted,
            up,
            emitted - up,
        )


async def check_hosts(
    hosts: Sequence[str],
    dispatcher: Dispatcher | None = None,
) -> AsyncIterator[HostCheckResult]:
    """Stream check results for hosts using the given or shared dispatcher.

    Args:
        hosts: Host names to check
        dispatcher: Dispatcher to use (process-wide default if None)

    Yields:
        HostCheckResult for each host, in completion order
    """
    if dispatcher is None:
        from webcheck.services.state import get_dispatcher

        dispatcher = get_dispatcher()

    async for result in dispatcher.run(hosts):
        yield result


async def collect_results(
    hosts: Sequence[str],
    dispatcher: Dispatcher | None = None,
) -> list[HostCheckResult]:
    """Check every host and return all results in completion order."""
    return [result async for result in check_hosts(hosts, dispatcher)]
