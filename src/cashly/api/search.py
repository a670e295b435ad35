"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Debounced searches that never answer a caller with an older query.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from ..coordination import RequestCoordinator

T = TypeVar("T")

logger = logging.getLogger("cashly.api")


class LatestSearch(Generic[T]):
    """
    Search-as-you-type over one coordination key.

    Each call is numbered in arrival order and the shared call reports the
    number it ran with. Callers superseded inside a burst accept the newer
    result. A caller that joined a call started before it arrived (the
    debounce had already fired) goes round again, so it always receives a
    result for its own query or a newer one.
    """

    def __init__(self, coordinator: RequestCoordinator, key: str) -> None:
        self._coordinator = coordinator
        self._key = key
        self._seq = 0

    async def run(
        self,
        fetch: Callable[[], Awaitable[T]],
        delay_ms: float | None = None,
    ) -> T:
        self._seq += 1
        mine = self._seq

        async def _tagged() -> tuple[int, T]:
            return mine, await fetch()

        while True:
            ran_with, result = await self._coordinator.debounced_request(
                self._key, _tagged, delay_ms
            )
            if ran_with >= mine:
                return result
            logger.debug("Search '%s' answered an older query, refetching", self._key)
