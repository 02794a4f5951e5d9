"""LRCLIB API client for fetching synced lyrics."""

from typing import List

import requests

from id3_embed.config import DEFAULT_LRCLIB_SEARCH_URL, DEFAULT_USER_AGENT
from id3_embed.errors import DecodeError, NetworkError, NotFoundError
from id3_embed.models import LyricsRecord, TrackQuery


class LrcLibClient:
    """Client for the LRCLIB search API."""

    def __init__(self, search_url: str = DEFAULT_LRCLIB_SEARCH_URL,
                 user_agent: str = DEFAULT_USER_AGENT):
        """
        Initialize LRCLIB client.

        Args:
            search_url: Full URL of the /api/search endpoint
            user_agent: User-Agent header sent with every request
        """
        self.search_url = search_url
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent})

    def search(self, query: TrackQuery) -> List[LyricsRecord]:
        """
        Search LRCLIB with artist and title as a single query term.

        Args:
            query: Artist and title to look up

        Returns:
            All records returned by the service, in response order

        Raises:
            NetworkError: Request failed or returned an HTTP error
            DecodeError: Response body is not a JSON array
        """
        try:
            resp = self.session.get(self.search_url, params={"q": query.term})
            resp.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"LRCLIB search failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"LRCLIB returned invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise DecodeError("LRCLIB returned an unexpected response shape")

        return [LyricsRecord.from_json(item) for item in data if isinstance(item, dict)]

    def fetch_synced_lyrics(self, query: TrackQuery) -> str:
        """
        Fetch synced lyrics for an exact artist/title match.

        Args:
            query: Artist and title to look up

        Returns:
            Synced lyrics of the first exactly matching record (empty string
            if that record carries none)

        Raises:
            NotFoundError: No record matches artist and title exactly
        """
        for record in self.search(query):
            if record.matches(query):
                return record.synced_lyrics or ""
        raise NotFoundError(f"lyrics not found for {query.artist} - {query.title}")
