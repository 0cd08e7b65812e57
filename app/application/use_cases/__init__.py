"""Aggregate application use cases."""

from .create_greeting import GREETING_HTML, create_greeting

__all__ = [
    "GREETING_HTML",
    "create_greeting",
]
