"""Shared fixtures: a controllable clock and article bundles."""

from __future__ import annotations

import pytest

from services.news import Article, NewsBundle


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_bundle():
    """Build a one-article bundle with a distinguishable title."""

    def _make(title: str = "Kathmandu startup ships Nepali LLM") -> NewsBundle:
        return NewsBundle(
            articles=[Article(tag="Breaking", title=title, summary="Short summary.")],
            last_updated="January 5, 2026",
        )

    return _make
