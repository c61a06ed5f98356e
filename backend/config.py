"""Centralized configuration, all env vars in one place."""

import os

GEMINI_OPENAI_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.port: int = int(os.getenv("PORT", "3000"))

        # Gemini via its OpenAI-compatible endpoint
        self.gemini_api_key: str | None = os.getenv("GEMINI_API_KEY")
        self.llm_base_url: str = os.getenv("LLM_BASE_URL", GEMINI_OPENAI_ENDPOINT)
        self.llm_model: str = os.getenv("LLM_MODEL", "gemini-2.0-flash")
        self.llm_timeout_seconds: float = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))
        self.llm_max_retries: int = int(os.getenv("LLM_MAX_RETRIES", "1"))

        self.news_cache_ttl_seconds: int = int(os.getenv("NEWS_CACHE_TTL_SECONDS", str(24 * 60 * 60)))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate(self) -> list[str]:
        """Return list of missing required env vars for AI features."""
        required = {"GEMINI_API_KEY": self.gemini_api_key}
        return [var for var, value in required.items() if not value]


settings = Settings()
