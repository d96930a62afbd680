"""Shared helpers for read_scoring."""
from .numbers import round_half_up, safe_number

__all__ = ["round_half_up", "safe_number"]
