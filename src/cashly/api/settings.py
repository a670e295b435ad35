"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Cashly API client settings and explicit config loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CashlyAPISettings:
    """Connection settings for the Cashly REST API."""

    base_url: str = "http://localhost:3001"
    token: str | None = None
    timeout_s: float = 20.0

    @staticmethod
    def from_env() -> "CashlyAPISettings":
        """Load settings from environment variables."""
        return CashlyAPISettings(
            base_url=os.getenv("CASHLY_API_URL", "http://localhost:3001"),
            token=os.getenv("CASHLY_API_TOKEN") or None,
            timeout_s=float(os.getenv("CASHLY_API_TIMEOUT_S", "20")),
        )
