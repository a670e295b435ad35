"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Payment and receivable reminder endpoints.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..coordination import RequestCoordinator, request_key
from .transport import CashlyTransport, path_segment
from .types import Reminder, ReminderFilters


class ReminderClient:
    """
    Reminder reads and mutations.

    Listings (``list_all``, ``upcoming``, ``due``) and single reads are
    deduplicated per path and parameters. Activation toggles and other
    mutations go straight to the API.
    """

    def __init__(self, transport: CashlyTransport, coordinator: RequestCoordinator) -> None:
        self._transport = transport
        self._coordinator = coordinator

    async def list_all(self, filters: ReminderFilters | None = None) -> list[Reminder]:
        return await self._list("reminders", (filters or ReminderFilters()).to_params())

    async def upcoming(self, days: int = 7) -> list[Reminder]:
        return await self._list("reminders/upcoming", {"days": days})

    async def due(self, date: str | None = None) -> list[Reminder]:
        return await self._list("reminders/due", {"date": date})

    async def get(self, reminder_id: str) -> Reminder:
        path = f"reminders/{path_segment(reminder_id)}"

        async def _fetch() -> Reminder:
            return Reminder.model_validate(await self._transport.get(path))

        return await self._coordinator.deduplicate(request_key(path), _fetch)

    async def create(self, data: Mapping[str, Any]) -> Reminder:
        return Reminder.model_validate(await self._transport.post("reminders", data))

    async def update(self, reminder_id: str, data: Mapping[str, Any]) -> Reminder:
        path = f"reminders/{path_segment(reminder_id)}"
        return Reminder.model_validate(await self._transport.put(path, data))

    async def delete(self, reminder_id: str) -> None:
        await self._transport.delete(f"reminders/{path_segment(reminder_id)}")

    async def activate(self, reminder_id: str) -> Reminder:
        path = f"reminders/{path_segment(reminder_id)}/activate"
        return Reminder.model_validate(await self._transport.put(path, {}))

    async def deactivate(self, reminder_id: str) -> Reminder:
        path = f"reminders/{path_segment(reminder_id)}/deactivate"
        return Reminder.model_validate(await self._transport.put(path, {}))

    async def _list(self, path: str, params: dict[str, Any]) -> list[Reminder]:
        async def _fetch() -> list[Reminder]:
            rows = await self._transport.get(path, params)
            return [Reminder.model_validate(row) for row in rows or []]

        return await self._coordinator.deduplicate(request_key(path, params), _fetch)
