"""Configuration management for ID3 Embed."""

import os
import re
import sys
from pathlib import Path
from typing import List, Optional
from dotenv import load_dotenv


DEFAULT_LANG = "jpn"
DEFAULT_LRCLIB_SEARCH_URL = "https://lrclib.net/api/search"
DEFAULT_ITUNES_SEARCH_URL = "https://itunes.apple.com/search"
DEFAULT_USER_AGENT = "ID3Embed/1.0 +https://github.com/gargascripts"


def eprint(*args, **kwargs):
    """Print to stderr."""
    print(*args, file=sys.stderr, **kwargs)


def load_config(env_file: Optional[str] = None) -> dict:
    """
    Load configuration from .env file and the process environment.

    Args:
        env_file: Path to .env file. Defaults to .env in current directory,
            which is silently skipped when absent.

    Returns:
        Dictionary of configuration values.
    """
    env_path = Path(env_file) if env_file is not None else Path(".env")
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
        eprint(f"Loaded environment from {env_path.resolve()}")
    elif env_file is not None:
        eprint(
            f"Warning: .env file not found at {env_path.resolve()} "
            "- falling back to process env."
        )

    return {
        "default_lang": os.getenv("ID3_EMBED_LANG", DEFAULT_LANG),
        "lrclib_search_url": os.getenv("LRCLIB_SEARCH_URL", DEFAULT_LRCLIB_SEARCH_URL),
        "itunes_search_url": os.getenv("ITUNES_SEARCH_URL", DEFAULT_ITUNES_SEARCH_URL),
        "user_agent": os.getenv("ID3_EMBED_USER_AGENT", DEFAULT_USER_AGENT),
    }


def is_language_code(value: str) -> bool:
    """ID3 language fields are exactly three ASCII letters (ISO 639-2)."""
    return bool(re.fullmatch(r"[A-Za-z]{3}", value or ""))


def validate_config(config: dict) -> List[str]:
    """
    Validate configuration and return list of invalid setting names.

    Args:
        config: Configuration dictionary from load_config()

    Returns:
        List of environment variable names with bad values (empty if valid).
    """
    invalid = []

    if not is_language_code(config.get("default_lang", "")):
        invalid.append("ID3_EMBED_LANG")

    url_keys = [
        ("lrclib_search_url", "LRCLIB_SEARCH_URL"),
        ("itunes_search_url", "ITUNES_SEARCH_URL"),
    ]
    for key, env_name in url_keys:
        value = config.get(key) or ""
        if not value.startswith(("http://", "https://")):
            invalid.append(env_name)

    return invalid
