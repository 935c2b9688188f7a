"""Completion-versus-deadline race with a tagged outcome."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """The work finished first."""

    value: T


@dataclass(frozen=True)
class TimedOut:
    """The deadline fired first."""

    timeout: float


Outcome = Union[Settled[Any], TimedOut]


async def race_deadline(work: Awaitable[T], timeout: float) -> Outcome:
    """Run ``work`` against a deadline and report which side won.

    The work runs as its own task. If the deadline wins, that task is
    cancelled and awaited exactly once, so it can emit nothing further.
    If the caller is cancelled while waiting, the task is cancelled too.
    Exceptions raised by the work propagate unchanged.
    """
    task = asyncio.ensure_future(work)
    try:
        done, _ = await asyncio.wait({task}, timeout=timeout)
    except asyncio.CancelledError:
        task.cancel()
        raise

    if task in done:
        return Settled(task.result())

    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass

    logger.debug("Deadline of %.2fs reached, work cancelled", timeout)
    return TimedOut(timeout)
