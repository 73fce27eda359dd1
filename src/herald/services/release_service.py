"""
Release service: one refresh of the latest-release file.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..clients.spotify import SpotifyClient
from ..core.config import OUTPUT_FILE, RELEASE_CONFIG
from ..core.logger import get_logger
from ..core.validation import check_credentials
from ..models.releases import OutputRecord, RawRelease
from .release_merger import ReleaseMerger
from .release_selector import ReleaseSelector
from .release_store import ReleaseStore

logger = get_logger(__name__)


@dataclass
class RefreshResult:
    """Outcome of a refresh run."""
    record: OutputRecord
    release: RawRelease
    output_file: Path
    written: bool
    release_count: int = 0
    preserved_fields: List[str] = field(default_factory=list)


class ReleaseService:
    """Fetches the artist's releases and rewrites the latest-release file."""

    def __init__(
        self,
        client: Optional[SpotifyClient] = None,
        output_file: Optional[Path] = None,
        artist_id: Optional[str] = None,
        market: Optional[str] = None,
    ):
        self.artist_id = artist_id or RELEASE_CONFIG["ARTIST_ID"]
        self.market = market or RELEASE_CONFIG["MARKET"]
        self.client = client
        self.selector = ReleaseSelector()
        self.merger = ReleaseMerger(self.artist_id)
        self.store = ReleaseStore(output_file or OUTPUT_FILE)

    def _get_client(self) -> SpotifyClient:
        if self.client is None:
            client_id, client_secret = check_credentials()
            self.client = SpotifyClient(client_id, client_secret)
        return self.client

    def refresh(self, dry_run: bool = False, now: Optional[datetime] = None) -> RefreshResult:
        """
        Run a full refresh.

        Steps run strictly in sequence; any failure before the write leaves
        the existing file untouched.

        Raises:
            ConfigurationError: Credentials are missing
            UpstreamError: Spotify rejected the token or listing request
            EmptyInputError: The artist has no releases
        """
        client = self._get_client()

        logger.info("Getting access token...")
        client.authenticate()

        logger.info(f"Fetching releases for artist {self.artist_id} ({self.market})...")
        releases = client.get_artist_releases(self.artist_id, self.market)
        logger.info(f"Found {len(releases)} releases")

        latest = self.selector.select_latest(releases)

        prior = self.store.read()
        record = self.merger.merge(latest, prior, now=now)
        preserved = self.merger.preserved_fields(prior)

        if dry_run:
            logger.info("Dry run: not writing output file")
        else:
            self.store.write(record)

        return RefreshResult(
            record=record,
            release=latest,
            output_file=self.store.output_file,
            written=not dry_run,
            release_count=len(releases),
            preserved_fields=preserved,
        )
