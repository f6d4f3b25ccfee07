"""Utility helpers for radix85."""

from .logging import configure_logging

__all__ = ["configure_logging"]
