"""AI news fetcher: one model call, interpreted into a fixed article shape.

The model is asked for a JSON array but answers in free text, so the reply is
tried as a whole, then as a fenced code block, then as the first
array-of-objects substring. Anything that does not validate falls back to a
fixed bundle. Only a failing upstream call is an error.
"""

import logging
import re
from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from services.llm_client import complete

logger = logging.getLogger(__name__)

NEWS_PROMPT = (
    "Generate 3 recent and realistic AI technology news articles specifically related to "
    "Nepal's AI ecosystem, tech startups, or AI adoption in South Asia. Format as JSON array "
    "with objects containing: tag (Breaking/AI Trends/Innovation), title, and summary "
    "(max 150 chars). Focus on: AI policy, startups, language models for Nepali, "
    "agricultural AI, education tech."
)

FALLBACK_ARTICLES = (
    {
        "tag": "Breaking",
        "title": "Nepal AI Strategy 2026 Framework Drafted",
        "summary": (
            "The Ministry of Communication and IT has unveiled a new roadmap to integrate AI "
            "into public service delivery across Kathmandu and beyond."
        ),
    },
    {
        "tag": "AI Trends",
        "title": "Large Language Models Localized for Nepali Dialects",
        "summary": (
            "Local tech startups are successfully fine-tuning open-source models to improve "
            "accuracy in Nepali, Maithili, and Bhojpuri translations."
        ),
    },
    {
        "tag": "Innovation",
        "title": "AI Hub Established in Pulchowk",
        "summary": (
            "A new collaborative space for AI researchers has opened, focusing on using computer "
            "vision for agricultural optimization in the Terai region."
        ),
    },
)

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)
_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")


class Article(BaseModel):
    """One news item. Extra keys from the model are kept as-is.

    Serialized keys come out as tag, title, summary, then any extras,
    whatever order the model wrote them in.
    """

    model_config = ConfigDict(extra="allow")

    tag: str
    title: str
    summary: str


class NewsBundle(BaseModel):
    """Articles in relevance order plus the date they were generated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    articles: list[Article]
    last_updated: str = Field(alias="lastUpdated")


_article_list = TypeAdapter(Annotated[list[Article], Field(min_length=1)])


def format_date(day: date) -> str:
    """'January 5, 2026' style date, day not zero-padded."""
    return f"{day:%B} {day.day}, {day.year}"


def _candidates(text: str):
    stripped = text.strip()
    yield stripped

    fence = _FENCE_RE.search(stripped)
    if fence:
        yield fence.group(1).strip()

    match = _ARRAY_RE.search(stripped)
    if match:
        yield match.group(0)


def parse_articles(text: str) -> list[Article] | None:
    """Return the first candidate in the model reply that validates, else None."""
    for candidate in _candidates(text):
        try:
            return _article_list.validate_json(candidate)
        except ValidationError:
            continue
    return None


def fallback_articles() -> list[Article]:
    return [Article(**article) for article in FALLBACK_ARTICLES]


def fetch_news(today: date | None = None) -> NewsBundle:
    """Ask the model for fresh articles and stamp them with today's date.

    Upstream failures (network, auth, quota, empty reply) propagate to the
    caller, which logs them. An uninterpretable reply is not an error: the
    fallback articles are returned instead.
    """
    text = complete(
        messages=[{"role": "user", "content": NEWS_PROMPT}],
        max_tokens=1000,
    )

    articles = parse_articles(text)
    if articles is None:
        logger.warning("No usable article array in model response (%d chars), using fallback", len(text))
        articles = fallback_articles()

    return NewsBundle(
        articles=articles,
        last_updated=format_date(today or date.today()),
    )
