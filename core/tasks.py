"""Bounded fail-fast fan-out of independent tasks."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Dict, Hashable, Mapping, TypeVar

from core.structured_logging import bind_context

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def run_concurrently(
    tasks: Mapping[K, Callable[[], T]],
    max_workers: int = 4,
) -> Dict[K, T]:
    """Run zero-argument callables on a thread pool and collect their results.

    Each task runs inside a copy of the caller's logging context. The first
    task to raise cancels everything not yet started and its exception
    propagates; no partial result is returned.

    Args:
        tasks: Mapping from result key to callable.
        max_workers: Upper bound on concurrently running tasks. 1 runs the
            tasks sequentially on the calling thread.

    Returns:
        Mapping from the same keys to each task's return value, in the
        order of ``tasks``.
    """
    if max_workers <= 1:
        return {key: task() for key, task in tasks.items()}

    results: Dict[K, T] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(bind_context(task)): key for key, task in tasks.items()}
        try:
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        except BaseException:
            cancelled = sum(1 for f in futures if f.cancel())
            logger.debug("Task failed; cancelled %d pending tasks", cancelled)
            raise
    return {key: results[key] for key in tasks}
