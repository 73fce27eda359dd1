"""
Latest release selection.

Collapses duplicate catalog entries and orders the rest newest first, with
singles ahead of albums released the same day.
"""

from typing import List, Sequence, Set, Tuple

from ..core.config import ERROR_MESSAGES
from ..core.exceptions import EmptyInputError
from ..core.logger import get_logger
from ..models.releases import RawRelease, ReleaseImage
from ..utils.date_utils import normalize_release_date

logger = get_logger(__name__)


def get_largest_image(images: Sequence[ReleaseImage]) -> str:
    """
    Return the URL of the widest image, or "" when there are none.

    A missing width counts as 0; on equal widths the earlier image wins.
    """
    if not images:
        return ""
    largest = max(images, key=lambda image: image.width or 0)
    return largest.url


class ReleaseSelector:
    """Pick the latest release from an artist's catalog listing."""

    def deduplicate(self, releases: Sequence[RawRelease]) -> List[RawRelease]:
        """
        Drop entries whose (name, release_date) was already seen.

        The first occurrence is kept and input order is preserved.
        """
        seen: Set[Tuple[str, str]] = set()
        unique = []

        for release in releases:
            key = (release.name, release.release_date)
            if key in seen:
                logger.debug(f"Dropping duplicate release: {release.name} ({release.release_date})")
                continue
            seen.add(key)
            unique.append(release)

        return unique

    def sort_releases(self, releases: Sequence[RawRelease]) -> List[RawRelease]:
        """Sort newest first; on equal dates singles come before everything else."""
        # Two stable passes: tie-break first, then the primary key.
        by_type = sorted(releases, key=lambda r: not r.is_single)
        return sorted(
            by_type,
            key=lambda r: normalize_release_date(r.release_date, r.release_date_precision),
            reverse=True,
        )

    def select_latest(self, releases: Sequence[RawRelease]) -> RawRelease:
        """
        Deduplicate, sort and return the latest release.

        Raises:
            EmptyInputError: If there are no releases to choose from
        """
        if not releases:
            raise EmptyInputError(ERROR_MESSAGES["NO_RELEASES"])

        unique = self.deduplicate(releases)
        if not unique:
            raise EmptyInputError(ERROR_MESSAGES["NO_RELEASES"])

        ordered = self.sort_releases(unique)
        latest = ordered[0]

        logger.info(
            f"Selected latest release: \"{latest.name}\" ({latest.release_date}, {latest.album_type}) "
            f"from {len(unique)} unique of {len(releases)} releases"
        )
        return latest
