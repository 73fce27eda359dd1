"""
Configuration validation utilities.
"""

import importlib
import os
from typing import Dict, List, Optional, Tuple
from .config import (
    SPOTIFY_CONFIG,
    RELEASE_CONFIG,
    LOGGING_CONFIG,
    ERROR_MESSAGES,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def check_credentials(environ: Optional[Dict[str, str]] = None) -> Tuple[str, str]:
    """
    Read the Spotify client credentials from the environment.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Tuple of (client_id, client_secret)

    Raises:
        ConfigurationError: If either value is missing or empty
    """
    env = os.environ if environ is None else environ
    client_id = (env.get(SPOTIFY_CONFIG["CLIENT_ID_ENV"]) or "").strip()
    client_secret = (env.get(SPOTIFY_CONFIG["CLIENT_SECRET_ENV"]) or "").strip()

    if not client_id or not client_secret:
        raise ConfigurationError(ERROR_MESSAGES["MISSING_CREDENTIALS"])

    return client_id, client_secret


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    if not RELEASE_CONFIG["ARTIST_ID"]:
        errors.append("ARTIST_ID must not be empty")

    market = RELEASE_CONFIG["MARKET"]
    if len(market) != 2 or not market.isalpha():
        errors.append("MARKET must be a two-letter country code")

    if not 1 <= RELEASE_CONFIG["LIMIT"] <= 50:
        errors.append("LIMIT must be between 1 and 50")

    if SPOTIFY_CONFIG["TIMEOUT"] < 1:
        errors.append("Spotify TIMEOUT must be >= 1")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
