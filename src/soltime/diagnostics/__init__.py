"""Diagnostics package.

Text summaries need only the core install; plots need the diagnostics extra
(matplotlib).
"""

__all__ = ["compare_eot"]
