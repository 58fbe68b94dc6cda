"""
Application configuration using Pydantic Settings.

Infrastructure switching is controlled by LLM_PROVIDER and AUTH_PROVIDER.
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "production"] = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Database
    # ===========================================
    DATABASE_URL: str = "sqlite+aiosqlite:///./cinematic_mirror.db"

    # ===========================================
    # LLM Configuration
    # ===========================================
    # LLM Provider: "litellm" | "gemini-api"
    # - litellm: any OpenAI-compatible endpoint (SiliconFlow by default)
    # - gemini-api: Gemini API (API Key)
    LLM_PROVIDER: Literal["litellm", "gemini-api"] = "litellm"

    # LiteLLM model identifier. The "openai/" prefix routes through the
    # OpenAI-compatible adapter against LITELLM_API_BASE.
    LITELLM_MODEL: str = "openai/deepseek-ai/DeepSeek-V3"

    # Do NOT include a trailing /chat/completions, LiteLLM appends it.
    LITELLM_API_BASE: str = "https://api.siliconflow.cn/v1"

    LITELLM_API_KEY: str = ""

    # Vision model used by the video-chat turn
    LITELLM_VISION_MODEL: str = "openai/Qwen/Qwen2.5-VL-32B-Instruct"

    GEMINI_MODEL: str = "gemini-2.0-flash"
    GOOGLE_API_KEY: str = ""

    # Unset means the vendor client's own default
    LLM_TIMEOUT_SECONDS: Optional[float] = None

    # ===========================================
    # Auth (JWT)
    # ===========================================
    AUTH_PROVIDER: Literal["mock", "local"] = "mock"
    JWT_SECRET: str = ""
    JWT_EXPIRE_MINUTES: int = 60 * 24 * 7

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == "local"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
