"""Use case producing the greeting document."""

from __future__ import annotations

from typing import Final

from app.domain.entities.greeting import Greeting


GREETING_HTML: Final[str] = (
    "<h1>Hello world from dockerized Node.js App Version: 2.6"
    "(Updated the Docker file to install curl command.)</h1>"
)

_GREETING: Final[Greeting] = Greeting(message=GREETING_HTML)


def create_greeting() -> Greeting:
    """Return the greeting served on the root path.

    The document is constant: every call returns the same value regardless of
    the request that triggered it.
    """

    return _GREETING
