"""
Spotify Client Module
A client for the Spotify Web API using the client credentials flow.
"""

import base64
from typing import Any, Dict, Iterable, List, Optional

import requests

from ..core.config import SPOTIFY_CONFIG, RELEASE_CONFIG
from ..core.exceptions import UpstreamError
from ..core.logger import get_logger
from ..models.releases import RawRelease

logger = get_logger(__name__)


class SpotifyClient:
    """Spotify client for listing an artist's releases."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[int] = None,
    ):
        self.base_url = SPOTIFY_CONFIG["BASE_URL"]
        self.auth_url = SPOTIFY_CONFIG["AUTH_URL"]
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token: Optional[str] = None
        self.timeout = timeout or SPOTIFY_CONFIG["TIMEOUT"]

        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": SPOTIFY_CONFIG["USER_AGENT"]})

    def authenticate(self) -> str:
        """
        Exchange the client credentials for an access token.

        Returns:
            The access token

        Raises:
            UpstreamError: If the token endpoint is unreachable or rejects the request
        """
        credentials = f"{self.client_id}:{self.client_secret}"
        encoded_credentials = base64.b64encode(credentials.encode()).decode()

        headers = {
            "Authorization": f"Basic {encoded_credentials}",
            "Content-Type": "application/x-www-form-urlencoded",
        }
        data = {"grant_type": "client_credentials"}

        try:
            response = self.session.post(
                self.auth_url,
                headers=headers,
                data=data,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Token request failed: {e}") from e

        if response.status_code != 200:
            raise UpstreamError(
                f"Token request failed: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        token = self._json_object(response, "Token").get("access_token")

        if not token:
            raise UpstreamError("Token response did not include an access token")

        self.access_token = token
        logger.debug("Obtained Spotify access token")
        return token

    @staticmethod
    def _json_object(response: requests.Response, label: str) -> Dict[str, Any]:
        """Decode a response body that must be a JSON object."""
        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(f"{label} response was not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError(f"{label} response was not a JSON object: {type(payload).__name__}")
        return payload

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for API requests, authenticating first if needed."""
        if not self.access_token:
            self.authenticate()
        return {"Authorization": f"Bearer {self.access_token}"}

    def get_artist_releases(
        self,
        artist_id: str,
        market: str,
        include_groups: Iterable[str] = RELEASE_CONFIG["INCLUDE_GROUPS"],
        limit: int = RELEASE_CONFIG["LIMIT"],
    ) -> List[RawRelease]:
        """
        List an artist's releases for one market.

        Only the first page is fetched.

        Returns:
            Releases in the order Spotify returned them

        Raises:
            UpstreamError: If the listing call fails
        """
        url = f"{self.base_url}/artists/{artist_id}/albums"
        params = {
            "include_groups": ",".join(include_groups),
            "market": market,
            "limit": limit,
        }
        headers = self._get_headers()

        try:
            response = self.session.get(url, headers=headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise UpstreamError(f"Albums request failed: {e}") from e

        if response.status_code != 200:
            raise UpstreamError(
                f"Albums request failed: {response.status_code} {response.text}",
                status_code=response.status_code,
            )

        items = self._json_object(response, "Albums").get("items") or []
        if not isinstance(items, list):
            raise UpstreamError(f"Albums response items were not a list: {type(items).__name__}")

        releases = [RawRelease.from_api(item) for item in items if item]
        logger.debug(f"Spotify returned {len(releases)} releases for artist {artist_id}")
        return releases
