"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import tempfile
import shutil
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import Mock, patch
from typing import Generator

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def output_file(temp_dir: Path) -> Path:
    """Path for a latest-release file inside the temp directory."""
    return temp_dir / "data" / "latestRelease.json"


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed merge time."""
    return datetime(2024, 3, 2, 9, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def spotify_album_item():
    """One item from the Spotify artist albums listing."""
    return {
        "id": "4aawyAB9vmqN3uQ7FjRGTy",
        "name": "Night Drive",
        "album_type": "single",
        "release_date": "2024-03-01",
        "release_date_precision": "day",
        "images": [
            {"url": "https://i.scdn.co/image/640", "width": 640, "height": 640},
            {"url": "https://i.scdn.co/image/300", "width": 300, "height": 300},
            {"url": "https://i.scdn.co/image/64", "width": 64, "height": 64},
        ],
        "external_urls": {"spotify": "https://open.spotify.com/album/4aawyAB9vmqN3uQ7FjRGTy"},
    }


@pytest.fixture
def sample_release(spotify_album_item):
    """Sample raw release built from the Spotify item."""
    from herald.models.releases import RawRelease
    return RawRelease.from_api(spotify_album_item)


@pytest.fixture
def make_release():
    """Factory for raw releases with sensible defaults."""
    from herald.models.releases import RawRelease

    def _make(name, release_date, precision="day", album_type="album", images=(), catalog_url=""):
        return RawRelease(
            name=name,
            release_date=release_date,
            release_date_precision=precision,
            album_type=album_type,
            images=tuple(images),
            catalog_url=catalog_url or f"https://open.spotify.com/album/{name}",
        )

    return _make


@pytest.fixture
def mock_spotify_client(sample_release):
    """Mock Spotify client returning one release."""
    client = Mock()
    client.authenticate = Mock(return_value="token")
    client.get_artist_releases = Mock(return_value=[sample_release])
    return client


@pytest.fixture
def mock_response():
    """Factory for fake requests responses."""
    def _make(status_code=200, json_data=None, text=""):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.json = Mock(return_value=json_data)
        return response
    return _make


@pytest.fixture
def clock():
    """Controllable millisecond clock."""
    class Clock:
        def __init__(self):
            self.now = 1_700_000_000_000

        def __call__(self):
            return self.now

        def advance(self, ms):
            self.now += ms

    return Clock()
