"""
Release models: raw catalog entries and the persisted latest-release record.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ReleaseImage:
    """One cover image variant as listed by the catalog."""
    url: str
    width: Optional[int] = None
    height: Optional[int] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ReleaseImage":
        return cls(
            url=data.get("url") or "",
            width=data.get("width"),
            height=data.get("height"),
        )


@dataclass(frozen=True)
class RawRelease:
    """An album or single returned by the Spotify artist albums listing."""
    name: str
    release_date: str
    release_date_precision: str = "day"
    album_type: str = "album"
    images: Tuple[ReleaseImage, ...] = ()
    catalog_url: str = ""
    spotify_id: str = ""

    @property
    def is_single(self) -> bool:
        return self.album_type == "single"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RawRelease":
        """Build a release from one item of the Spotify `items` array."""
        external_urls = data.get("external_urls") or {}
        return cls(
            name=data.get("name") or "",
            release_date=data.get("release_date") or "",
            release_date_precision=data.get("release_date_precision") or "",
            album_type=data.get("album_type") or "",
            images=tuple(ReleaseImage.from_api(image) for image in data.get("images") or []),
            catalog_url=external_urls.get("spotify") or "",
            spotify_id=data.get("id") or "",
        )


@dataclass
class OutputRecord:
    """
    The latest-release summary written to the site's data file.

    Catalog fields are refreshed on every run; mood_line, apple_music_url
    and album_link are curated by hand and carried forward.
    """
    artist_id: str
    title: str
    release_date: str
    release_date_precision: str
    cover_art: str
    catalog_url: str
    type: str
    updated_at: str
    mood_line: str = ""
    apple_music_url: str = ""
    album_link: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON shape the site reads, dropping empty optional links."""
        data = {
            "artistId": self.artist_id,
            "title": self.title,
            "releaseDate": self.release_date,
            "releaseDatePrecision": self.release_date_precision,
            "coverArt": self.cover_art,
            "spotifyUrl": self.catalog_url,
            "type": self.type,
            "updatedAt": self.updated_at,
            "moodLine": self.mood_line,
        }
        if self.apple_music_url:
            data["appleMusicUrl"] = self.apple_music_url
        if self.album_link:
            data["albumLink"] = self.album_link
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputRecord":
        """Load a record from parsed JSON; missing keys become empty strings."""
        return cls(
            artist_id=_text(data.get("artistId")),
            title=_text(data.get("title")),
            release_date=_text(data.get("releaseDate")),
            release_date_precision=_text(data.get("releaseDatePrecision")),
            cover_art=_text(data.get("coverArt")),
            catalog_url=_text(data.get("spotifyUrl")),
            type=_text(data.get("type")),
            updated_at=_text(data.get("updatedAt")),
            mood_line=_text(data.get("moodLine")),
            apple_music_url=_text(data.get("appleMusicUrl")),
            album_link=_text(data.get("albumLink")),
        )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
