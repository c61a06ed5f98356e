"""Health and readiness check routes."""

import logging

from fastapi import APIRouter, Depends

from config import settings
from routes.news import get_news_cache
from services.cache import NewsCache
from services.llm_client import complete

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "ai-trends-nepal-api"


@router.get("/")
async def root() -> dict:
    """Liveness probe, independent of cache and model state."""
    return {"status": "AI Trends Nepal API is running"}


@router.get("/ready")
def ready(news_cache: NewsCache = Depends(get_news_cache)) -> dict:
    """Lightweight readiness check, no external calls."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "commit": settings.git_sha,
        "cache": news_cache.state(),
    }


@router.get("/health")
def health() -> dict:
    """Deep health check that verifies model connectivity."""
    result = {"status": "ok", "service": SERVICE_NAME, "commit": settings.git_sha, "ai": "not_tested"}

    try:
        response = complete(
            messages=[{"role": "user", "content": "Say 'hello' and nothing else."}],
            max_tokens=10,
        )
        result["ai"] = "connected"
        result["ai_response"] = response.strip()
    except Exception as e:
        logger.exception("Model health check failed")
        result["ai"] = "error"
        result["ai_error"] = str(e)

    return result
