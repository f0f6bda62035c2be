"""
Scheduling boundary
===================

Task-returning helpers behind the then_* family of PairCombinator.

Both modes hand back the same Task type, so callers never care which one
produced it:
- INLINE: the function already ran on the calling thread, the task is
  completed and awaiting it only unwraps the value
- WORKER: the function is submitted to an executor right away and runs to
  completion whether or not the task is ever awaited; awaiting only
  observes the outcome
"""

from __future__ import annotations

import asyncio
import enum
from collections.abc import Callable
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import assert_never

from kungfu import LazyCoroResult, Ok, Option, Result
from loguru import logger

from ._types import NoError

# Task = lazy coroutine whose Ok branch carries Some(value) or Nothing()
type Task[U] = LazyCoroResult[Option[U], NoError]


# Shared pool for WORKER tasks submitted without an explicit executor
_WORKERS = ThreadPoolExecutor(thread_name_prefix="optpair-worker")


class Schedule(enum.StrEnum):
    """Where a then_* function is evaluated."""

    INLINE = "inline"
    WORKER = "worker"


def completed[U](option: Option[U]) -> Task[U]:
    """
    Already-completed task.

    Short alias for LazyCoroResult.pure(); awaiting it never suspends on
    anything but the coroutine itself.
    """
    return LazyCoroResult.pure(option)


def submit[U](
    thunk: Callable[[], Option[U]],
    *,
    executor: Executor | None = None,
) -> Task[U]:
    """
    Submit thunk to a worker now and return a task observing it.

    executor=None uses the shared optpair worker pool. The thunk runs
    exactly once; awaiting the task any number of times reads the same
    outcome.

    NOTE: Exceptions raised by thunk are not caught here, they surface
          from `await task`.
    """
    pool = _WORKERS if executor is None else executor
    logger.debug("Submitting {} to {}", thunk, pool)
    future = pool.submit(thunk)

    async def run() -> Result[Option[U], NoError]:
        option = await asyncio.wrap_future(future)
        return Ok(option)

    return LazyCoroResult(run)


def dispatch[U](
    schedule: Schedule,
    thunk: Callable[[], Option[U]],
    *,
    executor: Executor | None = None,
) -> Task[U]:
    """Route thunk to the inline or worker path."""
    match schedule:
        case Schedule.INLINE:
            return completed(thunk())
        case Schedule.WORKER:
            return submit(thunk, executor=executor)
        case _:
            assert_never(schedule)


__all__ = (
    "Schedule",
    "Task",
    "completed",
    "submit",
    "dispatch",
)
