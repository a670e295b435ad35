"""
MIT License
Copyright (c) 2026 Cashly contributors
See LICENSE file for full license text.

Cashly client toolkit: request coordination and the Cashly REST client.
"""

__version__ = "0.1.0"
