"""
Release Merger Module
Combines the freshly selected catalog release with the hand-curated fields
of the previous output record.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ..core.config import MANUAL_FIELDS
from ..core.logger import get_logger
from ..models.releases import OutputRecord, RawRelease
from ..utils.date_utils import utc_timestamp
from .release_selector import get_largest_image

logger = get_logger(__name__)

PriorRecord = Union[OutputRecord, Dict[str, Any], None]


class ReleaseMerger:
    """Builds the output record, carrying manual fields across refreshes."""

    def __init__(self, artist_id: str):
        self.artist_id = artist_id

    def _manual_values(self, prior: PriorRecord) -> Dict[str, str]:
        """Extract the manual fields from a prior record; anything unusable counts as absent."""
        if prior is None:
            return {}
        if isinstance(prior, OutputRecord):
            prior = prior.to_dict()
        if not isinstance(prior, dict):
            logger.warning(f"Ignoring prior release data of type {type(prior).__name__}")
            return {}

        values = {}
        for name in MANUAL_FIELDS:
            value = prior.get(name)
            if not value:
                continue
            if not isinstance(value, str):
                logger.warning(f"Converting non-text {name} value {value!r} to text")
                value = str(value)
            values[name] = value
        return values

    def preserved_fields(self, prior: PriorRecord) -> List[str]:
        """Names of the manual fields that a merge with prior would carry over."""
        return list(self._manual_values(prior))

    def merge(
        self,
        release: RawRelease,
        prior: PriorRecord = None,
        now: Optional[datetime] = None,
    ) -> OutputRecord:
        """
        Create the output record for release.

        Catalog fields always come from release. moodLine defaults to "";
        appleMusicUrl and albumLink are only kept when the prior record has them.
        """
        manual = self._manual_values(prior)

        record = OutputRecord(
            artist_id=self.artist_id,
            title=release.name,
            release_date=release.release_date,
            release_date_precision=release.release_date_precision,
            cover_art=get_largest_image(release.images),
            catalog_url=release.catalog_url,
            type=release.album_type,
            updated_at=utc_timestamp(now),
            mood_line=manual.get("moodLine", ""),
            apple_music_url=manual.get("appleMusicUrl", ""),
            album_link=manual.get("albumLink", ""),
        )

        if manual:
            logger.debug(f"Preserved manual fields: {', '.join(manual)}")
        return record
