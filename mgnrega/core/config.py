"""Configuration management for the district resolver and leaderboard."""
import os
import re
from pathlib import Path
from typing import Optional, Tuple
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent.parent

# Values shipped in sample .env files that mean "not configured"
PLACEHOLDER_PATTERN = re.compile(r"^(YOUR_.*_HERE|YOUR[_-]?API[_-]?KEY|CHANGEME|X{3,}|<.*>)$", re.IGNORECASE)


def read_credential(name: str) -> Optional[str]:
    """
    Read an API credential from the environment.

    Blank values and sample placeholders are treated as absent, so callers
    only ever see a usable key or None.

    Args:
        name: Environment variable name

    Returns:
        The credential, or None if it is not configured
    """
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    if not value or PLACEHOLDER_PATTERN.match(value):
        return None
    return value


def _read_list(name: str, default: str) -> Tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip().lower() for item in raw.split(",") if item.strip())


# Reverse-geocoding provider credentials
GOOGLE_GEOCODING_API_KEY: Optional[str] = read_credential("GOOGLE_GEOCODING_API_KEY")
MAPMYINDIA_API_KEY: Optional[str] = read_credential("MAPMYINDIA_API_KEY")
GEOAPIFY_API_KEY: Optional[str] = read_credential("GEOAPIFY_API_KEY")
LOCATIONIQ_API_KEY: Optional[str] = read_credential("LOCATIONIQ_API_KEY")

# Per-provider request timeouts (seconds)
GOOGLE_TIMEOUT: float = float(os.getenv("GOOGLE_TIMEOUT", "10"))
MAPMYINDIA_TIMEOUT: float = float(os.getenv("MAPMYINDIA_TIMEOUT", "5"))
GEOAPIFY_TIMEOUT: float = float(os.getenv("GEOAPIFY_TIMEOUT", "5"))
LOCATIONIQ_TIMEOUT: float = float(os.getenv("LOCATIONIQ_TIMEOUT", "5"))

# Fallback chain order, first entry is tried first
PROVIDER_ORDER: Tuple[str, ...] = _read_list("PROVIDER_ORDER", "google,mapmyindia,geoapify,locationiq")

# Region whose district names get normalized
TARGET_REGION: str = os.getenv("TARGET_REGION", "Maharashtra")

# District reconciliation
FUZZY_THRESHOLD: float = float(os.getenv("FUZZY_THRESHOLD", "0.7"))

# Logging and error tracking
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
SENTRY_DSN: Optional[str] = read_credential("SENTRY_DSN")
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
