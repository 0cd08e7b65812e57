"""Unit tests for the greeting use case."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.application.use_cases import GREETING_HTML, create_greeting
from app.domain.entities import Greeting


def test_greeting_html_is_the_published_document() -> None:
    assert GREETING_HTML == (
        "<h1>Hello world from dockerized Node.js App Version: 2.6"
        "(Updated the Docker file to install curl command.)</h1>"
    )


def test_create_greeting_returns_html_greeting() -> None:
    greeting = create_greeting()

    assert greeting == Greeting(message=GREETING_HTML)
    assert greeting.media_type == "text/html"


def test_create_greeting_is_constant() -> None:
    assert create_greeting() is create_greeting()


def test_greeting_is_immutable() -> None:
    greeting = create_greeting()

    with pytest.raises(AttributeError):
        greeting.message = "changed"  # type: ignore[misc]
