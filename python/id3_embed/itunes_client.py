"""iTunes Search API client for fetching cover art."""

import requests

from id3_embed.config import DEFAULT_ITUNES_SEARCH_URL, DEFAULT_USER_AGENT
from id3_embed.errors import DecodeError, NetworkError, NotFoundError
from id3_embed.models import ArtworkRecord, CoverArt, TrackQuery


class ItunesClient:
    """Client for the iTunes Search API."""

    def __init__(self, search_url: str = DEFAULT_ITUNES_SEARCH_URL,
                 user_agent: str = DEFAULT_USER_AGENT):
        self.base_url = search_url
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def search_url(self, query: TrackQuery) -> str:
        """Full search URL for a track, limited to one music result."""
        params = {"term": query.term, "media": "music", "limit": 1}
        return requests.Request("GET", self.base_url, params=params).prepare().url

    def _get(self, url: str) -> requests.Response:
        try:
            resp = self.session.get(url)
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"iTunes request failed: {e}") from e
        return resp

    def search(self, query: TrackQuery) -> ArtworkRecord:
        """
        Look up the artwork URL of the best matching track.

        Args:
            query: Artist and title to look up

        Returns:
            ArtworkRecord for the first result

        Raises:
            NetworkError: Request failed or returned an HTTP error
            DecodeError: Response is not the expected JSON document
            NotFoundError: The result list is empty
        """
        resp = self._get(self.search_url(query))

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"iTunes returned invalid JSON: {e}") from e

        results = data.get("results", []) if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise DecodeError("iTunes returned an unexpected response shape")
        if not results:
            raise NotFoundError("album art not found")

        artwork_url = results[0].get("artworkUrl100") if isinstance(results[0], dict) else None
        if not artwork_url:
            raise DecodeError("iTunes result has no artwork URL")
        return ArtworkRecord(artwork_url=artwork_url)

    def fetch_cover_art(self, query: TrackQuery) -> CoverArt:
        """
        Fetch the 600x600 cover image for a track.

        Returns:
            CoverArt with the raw image bytes and the declared content type
        """
        record = self.search(query)
        resp = self._get(record.high_resolution_url)
        return CoverArt(data=resp.content, mime_type=resp.headers.get("Content-Type", ""))
