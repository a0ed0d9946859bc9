"""
FastAPI dependencies exposing the objects built at startup.

create_app() stores the settings and the text generator on app.state; routes
receive them through these dependencies so tests can inject fakes.
"""

from fastapi import Request

from recommendation_proxy.config import Settings
from recommendation_proxy.services.gemini_service import TextGenerator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_text_generator(request: Request) -> TextGenerator:
    return request.app.state.text_generator
