"""News route: cached AI-generated Nepal tech news."""

import logging

from fastapi import APIRouter, Depends, Request

from errors import NewsFetchError
from services.cache import NewsCache

logger = logging.getLogger(__name__)

router = APIRouter()


def get_news_cache(request: Request) -> NewsCache:
    return request.app.state.news_cache


@router.get("/api/news")
def news(news_cache: NewsCache = Depends(get_news_cache)) -> dict:
    """Latest articles, served from cache for up to 24h."""
    try:
        bundle = news_cache.get()
    except Exception as e:
        logger.exception("Error fetching AI news")
        raise NewsFetchError() from e

    return bundle.model_dump(by_alias=True)
