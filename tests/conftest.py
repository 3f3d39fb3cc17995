"""Pytest fixtures for post-markup tests."""

import pytest

from post_markup.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run each test against default settings."""
    for name in (
        "POST_MARKUP_CONVENTION",
        "POST_MARKUP_MAX_LENGTH",
        "POST_MARKUP_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sample_post() -> str:
    """A stored post mixing every style."""
    return "Shipping **today**: *finally* got __underline__ working **for *real***"


@pytest.fixture
def edge_cases() -> list[str]:
    """Malformed and ambiguous markup."""
    return [
        "",
        "*",
        "**",
        "***",
        "****",
        "*****",
        "**open",
        "close**",
        "a * b",
        "**a***b*",
        "_*_*__",
        "a**b**c*d*e__f__g",
        "____x",
        "**bo*ld***",
        "**a\nb**",
        "snake_case_name",
    ]
