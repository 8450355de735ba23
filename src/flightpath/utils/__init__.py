"""
Utility functions for flightpath.

Low-level helpers only. No domain logic should live here.
"""

from flightpath.utils.time import deadline_from_timeout_ms, deadline_expired

__all__ = [
    "deadline_from_timeout_ms",
    "deadline_expired",
]
