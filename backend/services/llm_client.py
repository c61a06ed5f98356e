"""
Gemini Model Client

Uses the OpenAI SDK against Gemini's OpenAI-compatible endpoint.

Endpoint pattern:
    https://generativelanguage.googleapis.com/v1beta/openai/

Auth:
    GEMINI_API_KEY passed as the SDK api_key

Every call is bounded by LLM_TIMEOUT_SECONDS and retried at most
LLM_MAX_RETRIES times by the SDK itself.
"""

import logging

import httpx
from openai import OpenAI

from config import settings

logger = logging.getLogger(__name__)

_client = None


def _get_client() -> OpenAI:
    """Return cached OpenAI client, creating on first call."""
    global _client
    if _client is None:
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY environment variable is required")
        _client = OpenAI(
            base_url=settings.llm_base_url,
            api_key=settings.gemini_api_key,
            timeout=httpx.Timeout(settings.llm_timeout_seconds, connect=10.0),
            max_retries=settings.llm_max_retries,
        )
        logger.info("Model client ready (%s, model=%s)", settings.llm_base_url, settings.llm_model)
    return _client


def complete(
    messages: list[dict],
    temperature: float = 0.7,
    max_tokens: int = 1000,
) -> str:
    """
    Call the model with chat messages, return assistant response text.
    """
    client = _get_client()

    completion = client.chat.completions.create(
        model=settings.llm_model,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
    )

    content = completion.choices[0].message.content
    if content is None:
        raise ValueError("Model returned empty response (no content)")
    return content
