"""Domain entity describing the greeting served by the root endpoint."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """Represents the HTML document returned by ``GET /``."""

    message: str
    media_type: str = "text/html"


__all__ = ["Greeting"]
