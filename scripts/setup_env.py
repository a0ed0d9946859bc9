#!/usr/bin/env python3
"""
Write a .env file for build and deployment environments.

Values come from the current process environment; defaults fill in the
non-secret settings. The API key is required: without it the script exits
with status 1 and writes nothing.

Usage:
    GEMINI_API_KEY=... python scripts/setup_env.py
    python scripts/setup_env.py --output /srv/app/.env
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Dict, Mapping, Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from recommendation_proxy.config import DEFAULT_PORT
from recommendation_proxy.utils.logging import get_logger, mask_secret

logger = get_logger("setup_env")

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_FRONTEND_URL = "http://localhost:3000"


def collect_env_vars(environ: Mapping[str, str]) -> Dict[str, str]:
    """Pick the variables the server needs, with defaults for non-secrets."""
    env_vars = {
        "ENVIRONMENT": "production",
        "PORT": environ.get("PORT") or str(DEFAULT_PORT),
        "FRONTEND_URL": environ.get("FRONTEND_URL") or DEFAULT_FRONTEND_URL,
    }
    if environ.get("GEMINI_API_KEY"):
        env_vars["GEMINI_API_KEY"] = environ["GEMINI_API_KEY"]
    return env_vars


def write_env_file(env_vars: Mapping[str, str], env_file: Path) -> None:
    env_file.parent.mkdir(parents=True, exist_ok=True)
    content = "\n".join(f"{key}={value}" for key, value in env_vars.items())
    env_file.write_text(content + "\n", encoding="utf-8")
    logger.info(f"Environment variables written to {env_file}")
    logger.info(f"API key status: {mask_secret(env_vars.get('GEMINI_API_KEY'))}")


def setup_env(environ: Mapping[str, str], env_file: Path) -> int:
    """
    Build and write the .env file.

    Returns:
        Process exit code: 0 on success, 1 if GEMINI_API_KEY is missing.
    """
    env_vars = collect_env_vars(environ)
    if "GEMINI_API_KEY" not in env_vars:
        logger.error(
            "GEMINI_API_KEY is not set. Please set it in your environment variables."
        )
        return 1

    write_env_file(env_vars, env_file)
    logger.info("Environment setup complete!")
    return 0


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Write a .env file from the environment")
    parser.add_argument(
        "--output",
        type=Path,
        default=PROJECT_ROOT / ".env",
        help="Path of the .env file to write",
    )
    args = parser.parse_args(argv)
    sys.exit(setup_env(os.environ, args.output))


if __name__ == "__main__":
    main()
