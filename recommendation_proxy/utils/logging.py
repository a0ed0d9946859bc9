"""
Logging utilities for the recommendation proxy.

Provides standardized logger configuration and masking helpers.

SECURITY RULES:
- NEVER log the Gemini API key; use mask_secret() for status lines
- NEVER log full prompts; use preview() to log a truncated prefix
"""

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from recommendation_proxy.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """
    Describe a secret without revealing it.

    Examples:
        - "AIzaSyExample" -> "Present (first 4 chars: AIza...)"
        - "" -> "MISSING"
    """
    if not secret:
        return "MISSING"
    return f"Present (first {visible} chars: {secret[:visible]}...)"


def preview(text: object, limit: int = 50) -> str:
    """Truncate arbitrary text for log lines."""
    value = str(text)
    if len(value) > limit:
        return value[:limit] + "..."
    return value
