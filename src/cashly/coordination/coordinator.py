"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Keyed request deduplication and debouncing over async operations.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, TypeVar

from .errors import CoordinatorClosedError
from .settings import CoordinatorSettings, check_delay_ms

T = TypeVar("T")

logger = logging.getLogger("cashly.coordination")


@dataclass(slots=True)
class _Timer:
    """Scheduled debounce callback and the future it will settle."""

    handle: asyncio.TimerHandle
    target: asyncio.Future[Any]


def _settle(target: asyncio.Future[Any], source: asyncio.Future[Any]) -> None:
    """Copy the outcome of ``source`` onto ``target`` unless it already settled."""
    if target.done():
        return
    if source.cancelled():
        target.cancel()
        return
    error = source.exception()
    if error is not None:
        target.set_exception(error)
    else:
        target.set_result(source.result())


def _check_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise ValueError("Coordination key must be a non-empty string")


class RequestCoordinator:
    """
    Deduplicate in-flight requests and debounce bursts, keyed by string.

    The coordinator keeps two registries: shared in-flight results
    (``key -> future``) and pending debounce timers (``key -> timer``).
    Entries leave their registry on every exit path through done-callbacks,
    and a callback only ever removes the entry it registered.

    All mutation happens on the event loop between suspension points, so no
    lock is taken. Build one instance per application (or per test) and
    dispose it with ``aclose()`` or ``async with``.

    Failures of the wrapped operations are never interpreted: whatever an
    operation raises reaches every caller waiting on it unchanged.
    """

    def __init__(self, settings: CoordinatorSettings | None = None) -> None:
        self.settings = settings or CoordinatorSettings()
        self._pending: dict[str, asyncio.Future[Any]] = {}
        self._timers: dict[str, _Timer] = {}
        self._running: set[asyncio.Future[Any]] = set()
        self._closed = False

    async def __aenter__(self) -> "RequestCoordinator":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending_count(self) -> int:
        """Number of keys with a registered in-flight result."""
        return len(self._pending)

    @property
    def timer_count(self) -> int:
        """Number of keys with a scheduled debounce timer."""
        return len(self._timers)

    def is_pending(self, key: str) -> bool:
        return key in self._pending

    async def deduplicate(self, key: str, operation: Callable[[], Awaitable[T]]) -> T:
        """
        Run ``operation`` once per key while it is in flight.

        Callers arriving while a call for ``key`` is pending await that same
        call. The registration is dropped once the call settles, so the next
        request (including a retry after a failure) invokes ``operation``
        again. Cancelling one waiter does not cancel the shared call.
        """
        self._ensure_open()
        _check_key(key)

        existing = self._pending.get(key)
        if existing is not None:
            logger.debug("Joining in-flight request '%s'", key)
            return await asyncio.shield(existing)

        task = self._spawn(operation())
        self._register(key, task)
        return await asyncio.shield(task)

    def debounce(
        self,
        key: str,
        operation: Callable[..., Awaitable[T]],
        delay_ms: float | None = None,
    ) -> Callable[..., Awaitable[T]]:
        """
        Wrap ``operation`` in a trailing-edge debounce keyed by ``key``.

        Every call of the returned function cancels the timer still pending
        for ``key`` and schedules ``operation(*args, **kwargs)`` after the
        delay. Only the last call of an unbroken burst runs. Each call returns
        a future that settles when its own scheduled execution runs; futures
        of superseded calls never settle, so callers are expected to drop
        them.
        """
        _check_key(key)
        delay_s = self._delay_s(delay_ms)

        def wrapped(*args: Any, **kwargs: Any) -> asyncio.Future[T]:
            self._ensure_open()
            result = asyncio.get_running_loop().create_future()
            self._schedule(
                key,
                delay_s,
                result,
                partial(self._fire_debounced, key, result, operation, args, kwargs),
            )
            return result

        return wrapped

    async def debounced_request(
        self,
        key: str,
        operation: Callable[[], Awaitable[T]],
        delay_ms: float | None = None,
    ) -> T:
        """
        Debounce then deduplicate ``operation`` under one key.

        Calls inside a burst restart the timer and replace the operation to
        run, so the last one wins. Every caller of the burst, and every caller
        arriving while the collapsed call is in flight, shares its single
        result. A ``debounce`` wrapper call on the same key supersedes the
        burst: its callers are left waiting like any superseded debounced
        call, and the key is free for new requests.
        """
        self._ensure_open()
        _check_key(key)
        delay_s = self._delay_s(delay_ms)

        shared = self._pending.get(key)
        if shared is None:
            shared = asyncio.get_running_loop().create_future()
            self._register(key, shared)
            self._schedule(
                key, delay_s, shared, partial(self._fire_shared, key, shared, operation)
            )
        else:
            timer = self._timers.get(key)
            if timer is not None and timer.target is shared:
                self._schedule(
                    key,
                    delay_s,
                    shared,
                    partial(self._fire_shared, key, shared, operation),
                )
            else:
                logger.debug("Joining in-flight request '%s'", key)
        return await asyncio.shield(shared)

    def clear(self) -> None:
        """
        Cancel every pending timer and forget every in-flight registration.

        Callers waiting on a debounced call whose timer is cancelled here are
        left waiting. Calls already running keep running and still settle
        their current waiters, but new requests for the same keys start fresh.
        """
        for timer in self._timers.values():
            timer.handle.cancel()
        self._timers.clear()
        self._pending.clear()

    async def aclose(self) -> None:
        """Clear registries, cancel outstanding work and refuse new calls."""
        if self._closed:
            return
        self._closed = True

        waiting = [*self._pending.values(), *(t.target for t in self._timers.values())]
        running = list(self._running)
        self.clear()
        for future in waiting:
            future.cancel()
        for task in running:
            task.cancel()
        await asyncio.gather(*running, return_exceptions=True)

    def _ensure_open(self) -> None:
        if self._closed:
            raise CoordinatorClosedError("Request coordinator is closed")

    def _delay_s(self, delay_ms: float | None) -> float:
        if delay_ms is None:
            delay_ms = self.settings.debounce_ms
        return check_delay_ms(delay_ms) / 1000.0

    def _spawn(self, awaitable: Awaitable[T]) -> asyncio.Future[T]:
        task = asyncio.ensure_future(awaitable)
        self._running.add(task)
        task.add_done_callback(self._running.discard)
        return task

    def _register(self, key: str, future: asyncio.Future[Any]) -> None:
        self._pending[key] = future
        future.add_done_callback(partial(self._release, key))

    def _release(self, key: str, future: asyncio.Future[Any]) -> None:
        if self._pending.get(key) is future:
            del self._pending[key]

    def _schedule(
        self,
        key: str,
        delay_s: float,
        target: asyncio.Future[Any],
        callback: Callable[[], None],
    ) -> None:
        existing = self._timers.pop(key, None)
        if existing is not None:
            existing.handle.cancel()
            logger.debug("Superseded debounced call '%s'", key)
            # A shared burst future replaced by another target can never settle.
            if existing.target is not target and self._pending.get(key) is existing.target:
                del self._pending[key]
        handle = asyncio.get_running_loop().call_later(delay_s, callback)
        self._timers[key] = _Timer(handle=handle, target=target)

    def _fire_debounced(
        self,
        key: str,
        result: asyncio.Future[Any],
        operation: Callable[..., Awaitable[Any]],
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        self._timers.pop(key, None)
        if result.done():
            return
        try:
            task = self._spawn(operation(*args, **kwargs))
        except Exception as error:
            result.set_exception(error)
            return
        task.add_done_callback(partial(_settle, result))

    def _fire_shared(
        self,
        key: str,
        shared: asyncio.Future[Any],
        operation: Callable[[], Awaitable[Any]],
    ) -> None:
        self._timers.pop(key, None)
        if shared.done():
            return
        logger.debug("Running debounced request '%s'", key)
        try:
            task = self._spawn(operation())
        except Exception as error:
            shared.set_exception(error)
            return
        task.add_done_callback(partial(_settle, shared))
