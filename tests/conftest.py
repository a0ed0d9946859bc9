"""
Pytest configuration for recommendation proxy tests.

Sets up the test environment and shared fixtures. Route tests build their own
app through create_app() with a fake text generator, so no test talks to
Gemini.
"""
import os
from dataclasses import replace
from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient

# Test environment variables (read when recommendation_proxy.main is imported)
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-api-key")
os.environ.setdefault("APP_LOCALE", "vi")

from recommendation_proxy.config import ProviderConfig, Settings  # noqa: E402
from recommendation_proxy.main import create_app  # noqa: E402


class FakeTextGenerator:
    """TextGenerator that records prompts and returns canned text or raises."""

    model_name = "fake-gemini"

    def __init__(self, text: str = "Fake recommendation", error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class ProviderFailure(Exception):
    """Stand-in for a provider exception carrying an HTTP code."""

    def __init__(self, message: str, code=None):
        super().__init__(message)
        if code is not None:
            self.code = code


@pytest.fixture
def settings() -> Settings:
    """Settings for a configured server with the default Vietnamese messages."""
    return Settings(
        provider=ProviderConfig(api_key="test-gemini-api-key"),
        allowed_origins=(
            "http://localhost:3000",
            "https://frontend.example.com",
            "https://build-ospfw1o9q-tinhs-projects.vercel.app/",
        ),
        hosting_domain="vercel.app",
        environment="testing",
        locale="vi",
    )


@pytest.fixture
def settings_without_key(settings: Settings) -> Settings:
    return replace(settings, provider=ProviderConfig(api_key=""))


@pytest.fixture
def fake_generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Factory building a TestClient around a fresh app."""

    def _make(settings: Settings, generator) -> TestClient:
        return TestClient(create_app(settings=settings, text_generator=generator))

    return _make


@pytest.fixture
def client(make_client, settings, fake_generator) -> TestClient:
    return make_client(settings, fake_generator)


@pytest.fixture
def generator_factory():
    """Build FakeTextGenerator instances inside a test."""
    return FakeTextGenerator


@pytest.fixture
def provider_failure():
    """Exception class mimicking a provider error with a status code."""
    return ProviderFailure
