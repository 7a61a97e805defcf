"""Shared utilities for tonalr."""

from tonalr.core.utils.math import clamp, signed_pow

__all__ = [
    "clamp",
    "signed_pow",
]
