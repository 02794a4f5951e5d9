"""Data models for ID3 Embed."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# iTunes serves every artwork size from the same path; only this token differs.
LOW_RES_TOKEN = "100x100"
HIGH_RES_TOKEN = "600x600"


class TagState(Enum):
    """Lifecycle of the tag being edited."""
    OPENED = "opened"
    MUTATED = "mutated"
    SAVED = "saved"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class TrackQuery:
    """Lookup key shared by the lyrics and artwork services."""
    artist: str
    title: str

    @property
    def term(self) -> str:
        """Artist and title joined as a single search term."""
        return f"{self.artist} {self.title}"


@dataclass
class LyricsRecord:
    """A single search result from LRCLIB."""
    artist_name: str
    track_name: str
    synced_lyrics: Optional[str] = None
    plain_lyrics: Optional[str] = None
    album_name: Optional[str] = None
    duration: Optional[float] = None
    instrumental: bool = False
    record_id: Optional[int] = None

    @classmethod
    def from_json(cls, data: dict) -> "LyricsRecord":
        """Build a record from one object of the LRCLIB search response."""
        return cls(
            artist_name=data.get("artistName") or "",
            track_name=data.get("trackName") or "",
            synced_lyrics=data.get("syncedLyrics"),
            plain_lyrics=data.get("plainLyrics"),
            album_name=data.get("albumName"),
            duration=data.get("duration"),
            instrumental=bool(data.get("instrumental", False)),
            record_id=data.get("id"),
        )

    def matches(self, query: TrackQuery) -> bool:
        """Exact, case-sensitive match on artist and title."""
        return self.artist_name == query.artist and self.track_name == query.title


@dataclass
class ArtworkRecord:
    """Artwork location from the first iTunes search result."""
    artwork_url: str

    @property
    def high_resolution_url(self) -> str:
        """The same artwork URL with the first size token bumped to 600x600."""
        return self.artwork_url.replace(LOW_RES_TOKEN, HIGH_RES_TOKEN, 1)


@dataclass
class CoverArt:
    """Image bytes ready to be embedded."""
    data: bytes
    mime_type: str


@dataclass
class FrameSummary:
    """One line of the preview listing of existing frames."""
    key: str
    text: str
    kind: str

    def __str__(self) -> str:
        return f"{self.key}: {self.text} [{self.kind}]"
