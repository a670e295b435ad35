"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Request coordination settings and explicit config loading.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

DEFAULT_DEBOUNCE_MS = 300


def check_delay_ms(value: float, *, name: str = "delay_ms") -> float:
    """Return ``value`` as float, rejecting bools, NaN, infinities and negatives."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a non-negative number")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a non-negative finite number")
    return float(value)


@dataclass(frozen=True, slots=True)
class CoordinatorSettings:
    """Explicit settings used by ``RequestCoordinator`` instances."""

    debounce_ms: float = DEFAULT_DEBOUNCE_MS

    def __post_init__(self) -> None:
        check_delay_ms(self.debounce_ms, name="debounce_ms")

    @staticmethod
    def from_env() -> "CoordinatorSettings":
        """Load settings from environment variables."""
        return CoordinatorSettings(
            debounce_ms=float(
                os.getenv("CASHLY_REQUEST_DEBOUNCE_MS", str(DEFAULT_DEBOUNCE_MS))
            ),
        )
