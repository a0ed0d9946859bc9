"""
Tests for application setup in recommendation_proxy.main.
"""

import logging
from dataclasses import replace

import pytest

from recommendation_proxy.main import configure_logging, create_app


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    original = root.level
    yield root
    root.setLevel(original)


class TestLoggingConfiguration:

    def test_create_app_applies_settings_log_level(self, settings, fake_generator, restore_root_level):
        create_app(settings=replace(settings, log_level="WARNING"), text_generator=fake_generator)

        assert restore_root_level.level == logging.WARNING

    def test_debug_level(self, restore_root_level):
        configure_logging("debug")

        assert restore_root_level.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, restore_root_level):
        configure_logging("CHATTY")

        assert restore_root_level.level == logging.INFO
