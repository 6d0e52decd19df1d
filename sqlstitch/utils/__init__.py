"""Utility helpers shared across sqlstitch."""

from sqlstitch.utils import logging, type_guards

__all__ = ("logging", "type_guards")
