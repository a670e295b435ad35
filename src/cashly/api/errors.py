"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Error hierarchy for the Cashly REST client.
"""

from __future__ import annotations


class CashlyAPIError(RuntimeError):
    """Raised when the Cashly API rejects a request or cannot be reached."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.code = code


class CashlyProtocolError(CashlyAPIError):
    """Raised when a response body is not a valid Cashly envelope."""
