"""Pure utility functions for iconsmith.

These have no dependencies on iconsmith models and can be imported from
anywhere without circular import risk.
"""

from .clock import Clock, is_iso8601, to_iso8601, utc_now

__all__ = [
    "Clock",
    "is_iso8601",
    "to_iso8601",
    "utc_now",
]
