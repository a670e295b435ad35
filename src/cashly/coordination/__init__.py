"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Request coordination for Cashly data fetching.

Collapses redundant calls to the Cashly API: identical requests issued while
one is in flight share its result, and bursts of calls (search-as-you-type,
filter edits) are debounced to the last one.

Quick start::

    from cashly.coordination import RequestCoordinator, request_key

    async with RequestCoordinator() as coordinator:
        key = request_key("budgets/current", {"wallet_id": wallet_id})
        status = await coordinator.deduplicate(key, fetch_status)
"""

from .coordinator import RequestCoordinator
from .errors import CoordinationError, CoordinatorClosedError
from .keys import clean_params, request_key
from .settings import DEFAULT_DEBOUNCE_MS, CoordinatorSettings

__all__ = [
    "RequestCoordinator",
    "CoordinatorSettings",
    "DEFAULT_DEBOUNCE_MS",
    "CoordinationError",
    "CoordinatorClosedError",
    "request_key",
    "clean_params",
]
