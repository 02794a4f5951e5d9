"""Shared test fixtures for id3_embed tests."""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
import requests
from mutagen.id3 import ID3, COMM, TIT2, TPE1, Encoding

# Add the directory containing the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from id3_embed.models import TrackQuery


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


def make_response(json_data=None, content=b"", headers=None, status_code=200,
                  json_error=None):
    """Build a Mock that behaves like a requests.Response."""
    resp = Mock()
    resp.status_code = status_code
    resp.content = content
    resp.headers = headers or {}
    if json_error is not None:
        resp.json = Mock(side_effect=json_error)
    else:
        resp.json = Mock(return_value=json_data)
    if status_code >= 400:
        resp.raise_for_status = Mock(
            side_effect=requests.exceptions.HTTPError(f"{status_code} Error")
        )
    else:
        resp.raise_for_status = Mock()
    return resp


@pytest.fixture
def query():
    """A basic artist/title lookup key."""
    return TrackQuery(artist="Test Artist", title="Test Song")


@pytest.fixture
def lyrics_payload():
    """LRCLIB search response with a near miss before the exact match."""
    return [
        {
            "id": 1,
            "artistName": "test artist",
            "trackName": "Test Song",
            "syncedLyrics": "[00:01.00] wrong case",
            "plainLyrics": "wrong case",
        },
        {
            "id": 2,
            "artistName": "Test Artist",
            "trackName": "Test Song",
            "albumName": "Test Album",
            "duration": 215.0,
            "instrumental": False,
            "syncedLyrics": "[00:01.00] first line",
            "plainLyrics": "first line",
        },
    ]


@pytest.fixture
def itunes_payload():
    """iTunes search response with a single result."""
    return {
        "resultCount": 1,
        "results": [
            {
                "artistName": "Test Artist",
                "trackName": "Test Song",
                "artworkUrl100": "https://is1-ssl.mzstatic.com/image/thumb/Music/ab/cd/100x100bb.jpg",
            }
        ],
    }


@pytest.fixture
def mp3_file(tmp_path):
    """A small file with an ID3v2 tag carrying artist, title and a comment."""
    path = tmp_path / "song.mp3"
    path.write_bytes(b"\xff\xfb\x90\x00" + b"\x00" * 412)

    tags = ID3()
    tags.add(TPE1(encoding=Encoding.UTF8, text="Test Artist"))
    tags.add(TIT2(encoding=Encoding.UTF8, text="Test Song"))
    tags.add(COMM(encoding=Encoding.UTF16, lang="eng", desc="note", text="Hello"))
    tags.save(str(path))
    return path


@pytest.fixture
def untagged_file(tmp_path):
    """A file without any ID3 header."""
    path = tmp_path / "bare.mp3"
    path.write_bytes(b"\xff\xfb\x90\x00" + b"\x00" * 412)
    return path
