"""
Configuration for Herald.
Contains all constants, settings, and global parameters.
"""

import os
from pathlib import Path

# Project Information
PROJECT_NAME = "Herald"
PROJECT_VERSION = "1.0.0"
PROJECT_DESCRIPTION = "Latest Release Feed - Keep the site's featured release in sync with Spotify"

# File Paths
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
DATA_DIR = BASE_DIR / "data"
OUTPUT_FILE = Path(os.getenv("HERALD_OUTPUT_FILE", str(DATA_DIR / "latestRelease.json")))
CACHE_FILE = Path(os.getenv("HERALD_CACHE_FILE", str(DATA_DIR / ".herald_cache.json")))

# Spotify Configuration
SPOTIFY_CONFIG = {
    "BASE_URL": "https://api.spotify.com/v1",
    "AUTH_URL": "https://accounts.spotify.com/api/token",
    "CLIENT_ID_ENV": "SPOTIFY_CLIENT_ID",
    "CLIENT_SECRET_ENV": "SPOTIFY_CLIENT_SECRET",
    "USER_AGENT": f"{PROJECT_NAME}/{PROJECT_VERSION}",
    "TIMEOUT": 30,
}

# Release Selection Configuration
RELEASE_CONFIG = {
    "ARTIST_ID": os.getenv("HERALD_ARTIST_ID", "08nIFJLOyYWc5eWJCa4S8X"),
    "MARKET": os.getenv("HERALD_MARKET", "US"),
    "INCLUDE_GROUPS": ("album", "single"),
    "LIMIT": 50,
}

# Fields a human edits by hand in the output file; never overwritten by a refresh
MANUAL_FIELDS = ("moodLine", "appleMusicUrl", "albumLink")

# Client-side caches (milliseconds, matching the page's localStorage entries)
CACHE_CONFIG = {
    "FEATURED_RELEASE_KEY": "featured_release_cache",
    "FEATURED_RELEASE_TTL_MS": 60 * 60 * 1000,  # 1 hour
    "DISMISS_KEY": "hideLatestRelease",
    "DISMISS_TTL_MS": 24 * 60 * 60 * 1000,  # 24 hours
}

# Logging Configuration
LOGGING_CONFIG = {
    "LEVEL": os.getenv("HERALD_LOG_LEVEL", "INFO").upper(),
    "FORMAT": "%(levelname)s - %(name)s - %(message)s",
}

# Error Messages
ERROR_MESSAGES = {
    "MISSING_CREDENTIALS": (
        "SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET environment variables are required"
    ),
    "NO_RELEASES": "No releases found",
    "NOT_UPDATED": "The JSON file was NOT updated to prevent data corruption.",
    "INVALID_RELEASE_DATA": "Invalid release data",
}

# Color Codes for Terminal Output (if supported)
COLORS = {
    "RED": "\033[91m",
    "GREEN": "\033[92m",
    "YELLOW": "\033[93m",
    "BLUE": "\033[94m",
    "CYAN": "\033[96m",
    "BOLD": "\033[1m",
    "END": "\033[0m",
}
