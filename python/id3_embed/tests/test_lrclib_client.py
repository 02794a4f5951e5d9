"""Tests for lrclib_client.py lyrics lookups."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from conftest import make_response
from id3_embed.errors import DecodeError, NetworkError, NotFoundError
from id3_embed.lrclib_client import LrcLibClient
from id3_embed.models import TrackQuery


@pytest.fixture
def client():
    """Create an LrcLibClient with a mocked session."""
    client = LrcLibClient("https://lrclib.test/api/search", "TestAgent/1.0")
    client.session.get = Mock()
    return client


class TestSearch:
    """Tests for search method."""

    def test_sends_joined_query_term(self, client, query, lyrics_payload):
        """Should send artist and title as a single q parameter."""
        client.session.get.return_value = make_response(lyrics_payload)
        client.search(query)
        client.session.get.assert_called_once_with(
            "https://lrclib.test/api/search", params={"q": "Test Artist Test Song"}
        )

    def test_sets_user_agent(self):
        """Should send the configured User-Agent."""
        client = LrcLibClient("https://lrclib.test/api/search", "TestAgent/1.0")
        assert client.session.headers["User-Agent"] == "TestAgent/1.0"

    def test_parses_records_in_order(self, client, query, lyrics_payload):
        """Should return one record per JSON object."""
        client.session.get.return_value = make_response(lyrics_payload)
        records = client.search(query)
        assert [r.record_id for r in records] == [1, 2]
        assert records[1].album_name == "Test Album"

    def test_connection_error(self, client, query):
        """Should raise NetworkError when the request fails."""
        client.session.get.side_effect = requests.exceptions.ConnectionError("offline")
        with pytest.raises(NetworkError):
            client.search(query)

    def test_http_error(self, client, query):
        """Should raise NetworkError on HTTP error status."""
        client.session.get.return_value = make_response(status_code=500)
        with pytest.raises(NetworkError):
            client.search(query)

    def test_invalid_json(self, client, query):
        """Should raise DecodeError when the body is not JSON."""
        client.session.get.return_value = make_response(json_error=ValueError("bad json"))
        with pytest.raises(DecodeError):
            client.search(query)

    def test_non_list_payload(self, client, query):
        """Should raise DecodeError when the body is not a JSON array."""
        client.session.get.return_value = make_response({"error": "nope"})
        with pytest.raises(DecodeError):
            client.search(query)


class TestFetchSyncedLyrics:
    """Tests for fetch_synced_lyrics method."""

    def test_returns_synced_lyrics_for_exact_match(self, client):
        """Should return the synced lyrics of the matching record."""
        client.session.get.return_value = make_response([
            {"artistName": "A", "trackName": "T", "syncedLyrics": "L1"},
        ])
        assert client.fetch_synced_lyrics(TrackQuery("A", "T")) == "L1"

    def test_no_match_raises_not_found(self, client):
        """Should raise NotFoundError when no title matches."""
        client.session.get.return_value = make_response([
            {"artistName": "A", "trackName": "T", "syncedLyrics": "L1"},
        ])
        with pytest.raises(NotFoundError):
            client.fetch_synced_lyrics(TrackQuery("A", "T2"))

    def test_skips_case_mismatch(self, client, query, lyrics_payload):
        """Should skip records that differ only in case."""
        client.session.get.return_value = make_response(lyrics_payload)
        assert client.fetch_synced_lyrics(query) == "[00:01.00] first line"

    def test_first_match_wins(self, client):
        """Should return the first of several exact matches."""
        client.session.get.return_value = make_response([
            {"artistName": "A", "trackName": "T", "syncedLyrics": "first"},
            {"artistName": "A", "trackName": "T", "syncedLyrics": "second"},
        ])
        assert client.fetch_synced_lyrics(TrackQuery("A", "T")) == "first"

    def test_match_without_synced_lyrics(self, client):
        """Should return an empty string when the match has no synced lyrics."""
        client.session.get.return_value = make_response([
            {"artistName": "A", "trackName": "T", "syncedLyrics": None, "plainLyrics": "p"},
        ])
        assert client.fetch_synced_lyrics(TrackQuery("A", "T")) == ""

    def test_empty_results(self, client, query):
        """Should raise NotFoundError for an empty result list."""
        client.session.get.return_value = make_response([])
        with pytest.raises(NotFoundError):
            client.fetch_synced_lyrics(query)
