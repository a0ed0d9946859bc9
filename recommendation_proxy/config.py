"""
Configuration module for the recommendation proxy.

Loads environment variables into immutable settings objects. Settings are
built once at startup by Settings.from_env() and injected into create_app();
nothing mutates them afterwards.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from dotenv import load_dotenv

from recommendation_proxy.messages import DEFAULT_LOCALE, Messages, get_messages
from recommendation_proxy.utils.logging import mask_secret

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.5-flash"
DEFAULT_PORT = 5000
DEFAULT_ALLOWED_ORIGINS: Tuple[str, ...] = ("http://localhost:3000",)
DEFAULT_HOSTING_DOMAIN = "vercel.app"
DEFAULT_STATIC_DIR = "build"


@dataclass(frozen=True)
class GenerationParameters:
    """Fixed knobs controlling Gemini text generation."""

    temperature: float = 0.7
    top_k: int = 1
    top_p: float = 1.0
    max_output_tokens: int = 1024
    # Gemini 2.5 counts thinking tokens against max_output_tokens; None omits thinking_config
    thinking_budget: Optional[int] = 0


@dataclass(frozen=True)
class ProviderConfig:
    """Everything needed to talk to the generative-language provider."""

    api_key: str = ""
    model_name: str = DEFAULT_MODEL_NAME
    generation: GenerationParameters = field(default_factory=GenerationParameters)

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def build_allowed_origins(
    frontend_url: Optional[str] = None,
    extra_origins: Iterable[str] = (),
    defaults: Iterable[str] = DEFAULT_ALLOWED_ORIGINS,
) -> Tuple[str, ...]:
    """
    Assemble the CORS allow-list.

    Order is preserved and duplicates removed; blank entries (e.g. an unset
    FRONTEND_URL) are dropped.
    """
    origins = []
    for origin in [*defaults, frontend_url or "", *extra_origins]:
        origin = origin.strip()
        if origin and origin not in origins:
            origins.append(origin)
    return tuple(origins)


def _parse_thinking_budget(value: Optional[str]) -> Optional[int]:
    """
    Parse GEMINI_THINKING_BUDGET.

    Unset means 0 (thinking off). "none" omits thinking_config for models
    without thinking support.
    """
    if value is None or value.strip() == "":
        return 0
    if value.strip().lower() == "none":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"GEMINI_THINKING_BUDGET must be an integer or 'none', got '{value}'") from None


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    provider: ProviderConfig = field(default_factory=ProviderConfig)
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    hosting_domain: str = DEFAULT_HOSTING_DOMAIN
    port: int = DEFAULT_PORT
    environment: str = "development"
    locale: str = DEFAULT_LOCALE
    static_dir: str = DEFAULT_STATIC_DIR
    enable_diagnostics: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            load_env_file: Load a local .env file first (python-dotenv).
                Variables already present in the environment win.

        Raises:
            ValueError: If PORT is not an integer.
        """
        if load_env_file:
            load_dotenv()

        environment = os.getenv("ENVIRONMENT") or os.getenv("NODE_ENV") or "development"

        port_raw = os.getenv("PORT", str(DEFAULT_PORT))
        try:
            port = int(port_raw)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got '{port_raw}'") from None

        extra_origins = os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")

        settings = cls(
            provider=ProviderConfig(
                api_key=os.getenv("GEMINI_API_KEY", ""),
                model_name=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL_NAME,
                generation=GenerationParameters(
                    thinking_budget=_parse_thinking_budget(os.getenv("GEMINI_THINKING_BUDGET")),
                ),
            ),
            allowed_origins=build_allowed_origins(
                frontend_url=os.getenv("FRONTEND_URL"),
                extra_origins=extra_origins,
            ),
            hosting_domain=os.getenv("CORS_HOSTING_DOMAIN", DEFAULT_HOSTING_DOMAIN).strip(),
            port=port,
            environment=environment,
            locale=os.getenv("APP_LOCALE", DEFAULT_LOCALE),
            static_dir=os.getenv("STATIC_DIR", DEFAULT_STATIC_DIR),
            enable_diagnostics=_parse_bool(
                os.getenv("ENABLE_DIAGNOSTICS"),
                default=environment.lower() != "production",
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
        settings.warn_if_incomplete()
        return settings

    @property
    def messages(self) -> Messages:
        return get_messages(self.locale)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def warn_if_incomplete(self) -> None:
        """
        Log configuration gaps without stopping the process.

        A missing API key only makes provider calls fail later; the server
        still starts and keeps answering /health.
        """
        if not self.provider.has_api_key:
            logger.error("WARNING: GEMINI_API_KEY is not set in environment variables!")
            logger.error("API calls to Gemini will fail until the key is configured.")
        logger.info(f"API key status: {mask_secret(self.provider.api_key)}")
