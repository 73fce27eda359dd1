"""
Featured release: the reading side of the latest-release file.

Loads and validates the record the refresh writes, keeps the last good copy
in an expiring cache as a fallback, and tracks the banner's 24-hour dismiss
flag.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.config import CACHE_CONFIG, ERROR_MESSAGES, OUTPUT_FILE
from ..core.exceptions import InvalidReleaseDataError, PriorDataReadError
from ..core.logger import get_logger
from ..utils.expiring_cache import ExpiringCache

logger = get_logger(__name__)


class FeaturedReleaseLoader:
    """Loads the featured release, falling back to a cached copy on failure."""

    def __init__(
        self,
        data_file: Optional[Path] = None,
        cache: Optional[ExpiringCache] = None,
    ):
        self.data_file = Path(data_file or OUTPUT_FILE)
        self.cache = cache or ExpiringCache(ttl_ms=CACHE_CONFIG["FEATURED_RELEASE_TTL_MS"])
        self.cache_key = CACHE_CONFIG["FEATURED_RELEASE_KEY"]

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PriorDataReadError(f"Failed to load featured release: {e}") from e

        if not isinstance(data, dict):
            raise InvalidReleaseDataError(ERROR_MESSAGES["INVALID_RELEASE_DATA"])
        return data

    @staticmethod
    def validate(data: Dict[str, Any]) -> Dict[str, Any]:
        """Require the fields the banner cannot render without."""
        if not data.get("title") or not data.get("spotifyUrl"):
            raise InvalidReleaseDataError(ERROR_MESSAGES["INVALID_RELEASE_DATA"])
        return data

    def cached(self) -> Optional[Dict[str, Any]]:
        return self.cache.get(self.cache_key)

    def load(self, prefer_cache: bool = False) -> Dict[str, Any]:
        """
        Return the featured release record.

        Args:
            prefer_cache: Return a fresh cached copy without reading the file

        Raises:
            PriorDataReadError: File unreadable and no cached copy
            InvalidReleaseDataError: Record invalid and no cached copy
        """
        if prefer_cache:
            cached = self.cached()
            if cached is not None:
                return cached

        try:
            data = self.validate(self._read())
        except (PriorDataReadError, InvalidReleaseDataError) as e:
            cached = self.cached()
            if cached is None:
                raise
            logger.warning(f"{e}; using cached release data as fallback")
            return cached

        try:
            self.cache.set(self.cache_key, data)
        except OSError as e:
            logger.warning(f"Could not cache release data: {e}")
        return data


class DismissState:
    """The "hide latest release" flag; it clears itself after the TTL."""

    def __init__(self, cache: Optional[ExpiringCache] = None):
        self.cache = cache or ExpiringCache(ttl_ms=CACHE_CONFIG["DISMISS_TTL_MS"])
        self.key = CACHE_CONFIG["DISMISS_KEY"]

    def dismiss(self) -> None:
        self.cache.set(self.key, {"hidden": True})

    def is_dismissed(self) -> bool:
        value = self.cache.get(self.key)
        return isinstance(value, dict) and value.get("hidden") is True

    def reset(self) -> None:
        self.cache.delete(self.key)
