"""Diagnostics package.

Light-weight text tools built on the public API.
"""

__all__ = ["pretty_month"]
