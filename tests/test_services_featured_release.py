"""
Tests for the featured release loader and the dismiss flag.
"""

import json
import pytest
import sys
from pathlib import Path
from unittest.mock import patch

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from herald.core.exceptions import InvalidReleaseDataError, PriorDataReadError
from herald.services.featured_release import DismissState, FeaturedReleaseLoader
from herald.utils.expiring_cache import ExpiringCache, JsonFileStore

HOUR_MS = 60 * 60 * 1000
DAY_MS = 24 * HOUR_MS

RECORD = {
    "title": "Night Drive",
    "spotifyUrl": "https://open.spotify.com/album/4aawyAB9vmqN3uQ7FjRGTy",
    "releaseDate": "2024-03-01",
    "releaseDatePrecision": "day",
}


@pytest.fixture
def cache(clock):
    return ExpiringCache(ttl_ms=HOUR_MS, clock=clock)


@pytest.fixture
def write_record(output_file):
    def _write(data):
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(json.dumps(data), encoding="utf-8")
    return _write


class TestFeaturedReleaseLoader:
    """Tests for FeaturedReleaseLoader."""

    def test_load_caches_record(self, output_file, cache, write_record):
        """Test that a good record is returned and cached."""
        write_record(RECORD)
        loader = FeaturedReleaseLoader(output_file, cache)

        assert loader.load() == RECORD
        assert loader.cached() == RECORD

    @pytest.mark.parametrize("data", [
        {"spotifyUrl": "https://open.spotify.com/album/x"},
        {"title": "Night Drive"},
        {"title": "", "spotifyUrl": "https://open.spotify.com/album/x"},
        ["not", "an", "object"],
    ])
    def test_invalid_record_without_cache(self, output_file, cache, write_record, data):
        """Test that records missing title or URL are rejected."""
        write_record(data)

        with pytest.raises(InvalidReleaseDataError):
            FeaturedReleaseLoader(output_file, cache).load()

    def test_missing_file_without_cache(self, output_file, cache):
        """Test that an unreadable file with nothing cached is an error."""
        with pytest.raises(PriorDataReadError):
            FeaturedReleaseLoader(output_file, cache).load()

    def test_falls_back_to_cache(self, output_file, cache, write_record):
        """Test that a cached copy is used when the file goes bad."""
        write_record(RECORD)
        loader = FeaturedReleaseLoader(output_file, cache)
        loader.load()

        output_file.write_text("{broken", encoding="utf-8")

        assert loader.load() == RECORD

    def test_invalid_record_falls_back_to_cache(self, output_file, cache, write_record):
        """Test that an invalid record does not replace the cached copy."""
        write_record(RECORD)
        loader = FeaturedReleaseLoader(output_file, cache)
        loader.load()

        write_record({"title": "No URL"})

        assert loader.load() == RECORD
        assert loader.cached() == RECORD

    def test_expired_cache_is_not_used(self, output_file, cache, clock, write_record):
        """Test that the fallback copy expires after an hour."""
        write_record(RECORD)
        loader = FeaturedReleaseLoader(output_file, cache)
        loader.load()

        output_file.unlink()
        clock.advance(HOUR_MS)

        with pytest.raises(PriorDataReadError):
            loader.load()

    def test_prefer_cache_skips_file(self, output_file, cache, write_record):
        """Test that a fresh cached copy is returned without reading the file."""
        write_record(RECORD)
        loader = FeaturedReleaseLoader(output_file, cache)
        loader.load()

        write_record(dict(RECORD, title="Newer"))

        assert loader.load(prefer_cache=True)["title"] == "Night Drive"
        assert loader.load()["title"] == "Newer"

    def test_cache_write_failure_still_returns_record(self, output_file, temp_dir, write_record):
        """Test that a failing cache write does not hide a valid record."""
        write_record(RECORD)
        cache = ExpiringCache(JsonFileStore(temp_dir / "cache.json"), ttl_ms=HOUR_MS)
        loader = FeaturedReleaseLoader(output_file, cache)

        with patch("herald.utils.expiring_cache.os.replace", side_effect=OSError("read-only")):
            assert loader.load() == RECORD

        assert loader.cached() is None

    def test_validate(self):
        """Test the static validator."""
        assert FeaturedReleaseLoader.validate(RECORD) is RECORD
        with pytest.raises(InvalidReleaseDataError):
            FeaturedReleaseLoader.validate({})


class TestDismissState:
    """Tests for DismissState."""

    def test_dismiss_and_expire(self, clock):
        """Test that the flag holds for just under 24 hours."""
        state = DismissState(ExpiringCache(ttl_ms=DAY_MS, clock=clock))
        assert not state.is_dismissed()

        state.dismiss()
        clock.advance(DAY_MS - 1)
        assert state.is_dismissed()

        clock.advance(1)
        assert not state.is_dismissed()

    def test_reset(self, clock):
        """Test clearing the flag early."""
        state = DismissState(ExpiringCache(ttl_ms=DAY_MS, clock=clock))
        state.dismiss()
        state.reset()

        assert not state.is_dismissed()

    def test_persists_in_file_store(self, temp_dir, clock):
        """Test that the flag survives across processes via the cache file."""
        path = temp_dir / "cache.json"
        DismissState(ExpiringCache(JsonFileStore(path), ttl_ms=DAY_MS, clock=clock)).dismiss()

        reopened = DismissState(ExpiringCache(JsonFileStore(path), ttl_ms=DAY_MS, clock=clock))
        assert reopened.is_dismissed()

        stored = json.loads(path.read_text(encoding="utf-8"))
        assert stored["hideLatestRelease"] == {"timestamp": clock.now, "data": {"hidden": True}}
