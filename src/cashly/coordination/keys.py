"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Deterministic coordination keys for endpoint calls.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop unset filter values the same way query strings are built."""
    if not params:
        return {}
    return {
        key: value
        for key, value in params.items()
        if value is not None and value != ""
    }


def request_key(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Build a coordination key for one endpoint call.

    Two parameter mappings with the same content produce the same key no
    matter the insertion order, so callers can pass filter dicts straight
    through. Unset values (``None`` or ``""``) never reach the key.
    """
    name = endpoint.strip()
    if not name:
        raise ValueError("Request key endpoint must be non-empty")

    cleaned = clean_params(params)
    if not cleaned:
        return name
    normalized = json.dumps(cleaned, ensure_ascii=True, sort_keys=True, default=str)
    return f"{name}?{normalized}"
