"""
Gemini text generation service.

Wraps the Google Gen AI Python SDK (google-genai) behind a small protocol so
routes depend on "something that turns a prompt into text" rather than on
the SDK. Tests substitute a fake implementing the same protocol.

Architecture:
- Client: one genai.Client per process, created from the API key at startup
- Call: single async generate_content call, no streaming, no chat history
- Output: response.text (the SDK's text accessor)
"""

import logging
from typing import Optional, Protocol

from google import genai
from google.genai import types

from recommendation_proxy.config import ProviderConfig
from recommendation_proxy.errors import EmptyResponseError, MissingApiKeyError

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a prompt into generated text."""

    model_name: str

    async def generate_text(self, prompt: str) -> str:
        ...


def build_generation_config(provider_config: ProviderConfig) -> types.GenerateContentConfig:
    """Translate the fixed generation parameters into an SDK config."""
    params = provider_config.generation
    thinking_config = None
    if params.thinking_budget is not None:
        thinking_config = types.ThinkingConfig(thinking_budget=params.thinking_budget)
    return types.GenerateContentConfig(
        temperature=params.temperature,
        top_k=params.top_k,
        top_p=params.top_p,
        max_output_tokens=params.max_output_tokens,
        thinking_config=thinking_config,
    )


class GeminiTextGenerator:
    """
    TextGenerator backed by Google Gemini.

    The client is created once at construction. Without an API key no client
    exists and every call raises MissingApiKeyError, which the recommendation
    service reports as a configuration problem.
    """

    def __init__(self, provider_config: ProviderConfig, client: Optional[genai.Client] = None):
        self._config = provider_config
        self._generation_config = build_generation_config(provider_config)
        self.model_name = provider_config.model_name

        if client is None and provider_config.has_api_key:
            client = genai.Client(api_key=provider_config.api_key)
            logger.info("Gemini client initialized successfully")
        self._client = client

        logger.info(
            f"Model '{self.model_name}' configured with generation parameters: "
            f"{provider_config.generation}"
        )

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def generate_text(self, prompt: str) -> str:
        """
        Send one prompt to Gemini and return the generated text.

        Raises:
            MissingApiKeyError: No API key was configured.
            EmptyResponseError: The response carried no text.
            google.genai.errors.APIError: Any provider-side failure.
        """
        if self._client is None:
            raise MissingApiKeyError()

        logger.info(f"Calling Gemini API with model: {self.model_name}")
        response = await self._client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=self._generation_config,
        )
        logger.info("API response received")

        text = response.text
        if text is None:
            raise EmptyResponseError(self.model_name)
        return text
