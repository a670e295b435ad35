"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Error hierarchy for request coordination.
"""


class CoordinationError(RuntimeError):
    """Base request coordination error."""


class CoordinatorClosedError(CoordinationError):
    """Raised when work is submitted to a coordinator after ``aclose()``."""
