#!/usr/bin/env python3
"""
Gemini API key smoke test.

Sends a single prompt through the same GeminiTextGenerator the server uses,
so a key can be checked locally before deploying.

Usage:
    python scripts/smoke_test_gemini.py
    python scripts/smoke_test_gemini.py --prompt "What are the top 3 design patterns?"
    python scripts/smoke_test_gemini.py --model gemini-2.5-flash
"""

import argparse
import asyncio
import os
import sys
from dataclasses import replace
from typing import Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from recommendation_proxy.config import Settings
from recommendation_proxy.errors import error_details, provider_status
from recommendation_proxy.services.gemini_service import GeminiTextGenerator
from recommendation_proxy.utils.logging import get_logger, mask_secret

logger = get_logger("smoke_test_gemini")

DEFAULT_PROMPT = "Tell me a short joke about programming"


async def run_smoke_test(prompt: str, model: Optional[str] = None) -> int:
    """
    Run one prompt against Gemini.

    Returns:
        Process exit code: 0 on success, 1 on any failure.
    """
    settings = Settings.from_env()
    provider = settings.provider
    if model:
        provider = replace(provider, model_name=model)

    if not provider.has_api_key:
        print("\n⚠️  ERROR: GEMINI_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export GEMINI_API_KEY=your-gemini-api-key")
        return 1

    print("\n" + "=" * 60)
    print("GEMINI SMOKE TEST")
    print("=" * 60)
    print(f"API key: {mask_secret(provider.api_key)}")
    print(f"Model:   {provider.model_name}")
    print(f"Prompt:  {prompt}")

    generator = GeminiTextGenerator(provider)
    try:
        text = await generator.generate_text(prompt)
    except Exception as e:
        logger.error(f"Error with {provider.model_name}: {e}")
        print(f"\n❌ Test failed (status: {provider_status(e)})")
        print(f"   Details: {error_details(e)}")
        return 1

    print("\n✅ Test successful! Response text:\n")
    print(text)
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Smoke-test the configured Gemini API key")
    parser.add_argument("--prompt", default=DEFAULT_PROMPT, help="Prompt to send")
    parser.add_argument("--model", default=None, help="Override GEMINI_MODEL")
    args = parser.parse_args()

    sys.exit(asyncio.run(run_smoke_test(args.prompt, args.model)))


if __name__ == "__main__":
    main()
