"""Fan-out/fan-in scheduler for line parsing tasks."""

from __future__ import annotations

import logging
import math
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")


@dataclass(slots=True, frozen=True)
class ParseTask:
    index: int
    key: int
    line: str
    patterns: tuple[str, ...]
    finished_patterns: tuple[str, ...]


class SchedulerError(RuntimeError):
    """A worker failed; the whole batch is discarded."""

    def __init__(self, worker: int, span: range, cause: BaseException) -> None:
        super().__init__(
            f"Worker {worker} failed on tasks [{span.start}, {span.stop}): "
            f"{type(cause).__name__}: {cause}"
        )
        self.worker = worker
        self.span = span
        self.cause = cause


def available_parallelism() -> int:
    return os.cpu_count() or 1


class TaskScheduler:
    """Run a batch of tasks over statically partitioned worker threads.

    Each ``run`` spawns ``thread_count`` workers, hands each one a contiguous
    slice of the task list and joins all of them before merging their private
    result buffers in worker order. The scheduler keeps no state between runs
    and a run cannot be cancelled once started.
    """

    def __init__(
        self,
        max_thread_num: int = 1,
        min_tasks_per_thread: int = 1,
        *,
        log: logging.Logger | None = None,
    ) -> None:
        if max_thread_num < 1:
            raise ValueError("max_thread_num must be >= 1")
        if min_tasks_per_thread < 1:
            raise ValueError("min_tasks_per_thread must be >= 1")
        self._max_thread_num = max_thread_num
        self._min_tasks_per_thread = min_tasks_per_thread
        self._log = log or logger

    @property
    def max_thread_num(self) -> int:
        return self._max_thread_num

    @property
    def min_tasks_per_thread(self) -> int:
        return self._min_tasks_per_thread

    def thread_count(self, task_count: int) -> int:
        if task_count <= 0:
            return 0
        upper = max(1, min(self._max_thread_num, available_parallelism()))
        wanted = math.ceil(task_count / self._min_tasks_per_thread)
        return max(1, min(wanted, upper))

    def plan(self, task_count: int) -> list[range]:
        """Return the contiguous task ranges, one per worker.

        Ranges differ in size by at most one task; the first ones take the
        remainder, so the largest range holds ``ceil(task_count / threads)``.
        """
        threads = self.thread_count(task_count)
        if threads == 0:
            return []
        base, remainder = divmod(task_count, threads)
        spans = []
        start = 0
        for worker in range(threads):
            stop = start + base + (1 if worker < remainder else 0)
            spans.append(range(start, stop))
            start = stop
        return spans

    def run(self, tasks: Sequence[ParseTask], callback: Callable[[ParseTask], R]) -> list[R]:
        """Execute ``callback`` for every task and return results in task order.

        Any exception raised by a worker aborts the call with
        :class:`SchedulerError`; results of the other workers are dropped.
        """
        shared = tuple(tasks)
        spans = self.plan(len(shared))
        if not spans:
            return []
        self._log.debug(
            "Scheduling %d tasks on %d threads (largest range=%d)",
            len(shared),
            len(spans),
            len(spans[0]),
        )

        # every worker holds at the barrier so the pool cannot reuse an idle thread
        start = threading.Barrier(len(spans))
        with ThreadPoolExecutor(
            max_workers=len(spans), thread_name_prefix="watchlog-worker"
        ) as executor:
            futures = [
                executor.submit(_run_span, shared, span, callback, start) for span in spans
            ]

        results: list[R] = []
        for worker, (span, future) in enumerate(zip(spans, futures)):
            error = future.exception()
            if error is not None:
                self._log.error("Worker %d failed: %s", worker, error)
                raise SchedulerError(worker, span, error) from error
            results.extend(future.result())
        return results


def _run_span(
    tasks: tuple[ParseTask, ...],
    span: range,
    callback: Callable[[ParseTask], R],
    start: threading.Barrier,
) -> list[R]:
    start.wait()
    buffer: list[R] = []
    for position in span:
        buffer.append(callback(tasks[position]))
    return buffer


__all__ = ["ParseTask", "SchedulerError", "TaskScheduler", "available_parallelism"]
