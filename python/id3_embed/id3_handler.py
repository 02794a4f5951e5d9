"""ID3v2 tag handler using mutagen."""

from typing import List

from mutagen import MutagenError
from mutagen.id3 import (
    ID3, ID3NoHeaderError, APIC, COMM, USLT, TextFrame, Encoding, PictureType
)

from id3_embed.errors import FileOpenError, FileWriteError
from id3_embed.models import CoverArt, FrameSummary, TagState
from id3_embed.utils import truncate


class ID3Handler:
    """Owns the ID3v2 tag of a single MP3 file from open to save."""

    COVER_DESCRIPTION = "Cover Art"
    LYRICS_DESCRIPTOR = "Lyrics"

    def __init__(self, file_path: str, tags: ID3):
        """
        Wrap an already parsed tag. Use ID3Handler.open() to read a file.

        Args:
            file_path: Path the tag is written back to
            tags: Parsed (or empty) ID3 tag
        """
        self.file_path = file_path
        self.tags = tags
        self.default_encoding = Encoding.UTF16
        self.state = TagState.OPENED

    @classmethod
    def open(cls, file_path: str) -> "ID3Handler":
        """
        Parse the ID3v2 tag of an MP3 file.

        A file without an ID3 header starts with an empty tag.

        Raises:
            FileOpenError: The file is missing, unreadable or has a broken tag
        """
        try:
            tags = ID3(file_path)
        except ID3NoHeaderError:
            tags = ID3()
        except (MutagenError, OSError) as e:
            raise FileOpenError(f"Error opening MP3 file: {e}") from e
        return cls(file_path, tags)

    @property
    def artist(self) -> str:
        return self._get_text("TPE1")

    @property
    def title(self) -> str:
        return self._get_text("TIT2")

    def _get_text(self, frame_id: str) -> str:
        frame = self.tags.get(frame_id)
        if frame is not None and frame.text:
            return str(frame.text[0])
        return ""

    def frame_summaries(self) -> List[FrameSummary]:
        """Summarize every frame, sorted by frame ID."""
        frames = sorted(self.tags.values(), key=lambda f: f.FrameID)
        return [self._summarize(frame) for frame in frames]

    def _summarize(self, frame) -> FrameSummary:
        # COMM subclasses TextFrame, so it must be checked first
        if isinstance(frame, COMM):
            text, kind = "/".join(frame.text), "CommentFrame"
        elif isinstance(frame, TextFrame):
            text, kind = "/".join(str(t) for t in frame.text), "TextFrame"
        elif isinstance(frame, APIC):
            text, kind = frame.desc, "PictureFrame"
        elif isinstance(frame, USLT):
            text, kind = frame.text, "UnsynchronisedLyricsFrame"
        else:
            text, kind = frame.pprint(), type(frame).__name__
        return FrameSummary(key=frame.FrameID, text=truncate(text), kind=kind)

    def set_default_encoding(self, encoding: Encoding) -> None:
        """Set the encoding for frames built without an explicit one.

        Frames written by this handler all pass an explicit encoding, so
        this only affects frames built through _build_frame without one.
        """
        self.default_encoding = encoding

    def _build_frame(self, frame_cls, **kwargs):
        kwargs.setdefault("encoding", self.default_encoding)
        return frame_cls(**kwargs)

    def _replace_frames(self, frame_id: str, frame) -> None:
        self._ensure_writable()
        self.tags.delall(frame_id)
        self.tags.add(frame)
        self.state = TagState.MUTATED

    def normalize_comment(self) -> bool:
        """
        Rewrite the comment frame as Latin-1.

        Some tag editors do not handle multiple text encodings in one tag.
        Only the encoding changes; language, description and text of the
        first comment frame are kept and any further comment frames dropped.

        Returns:
            True if a comment frame was rewritten
        """
        comments = self.tags.getall("COMM")
        if not comments:
            return False

        first = comments[0]
        comment = self._build_frame(
            COMM,
            encoding=Encoding.LATIN1,
            lang=first.lang,
            desc=first.desc,
            text=list(first.text),
        )
        self._replace_frames("COMM", comment)
        return True

    def replace_picture(self, cover: CoverArt) -> None:
        """Replace all attached pictures with a single front cover."""
        picture = self._build_frame(
            APIC,
            encoding=Encoding.LATIN1,
            mime=cover.mime_type,
            type=PictureType.COVER_FRONT,
            desc=self.COVER_DESCRIPTION,
            data=cover.data,
        )
        self._replace_frames("APIC", picture)

    def replace_lyrics(self, lyrics: str, lang: str) -> None:
        """Replace all unsynchronised lyrics frames with a single one."""
        uslt = self._build_frame(
            USLT,
            encoding=Encoding.UTF8,
            lang=lang,
            desc=self.LYRICS_DESCRIPTOR,
            text=lyrics,
        )
        self._replace_frames("USLT", uslt)

    def _ensure_writable(self) -> None:
        if self.state in (TagState.SAVED, TagState.DISCARDED):
            raise RuntimeError(f"Tag for {self.file_path} is already {self.state.value}")

    def save(self) -> None:
        """
        Write the tag back to the file as ID3v2.4.

        Raises:
            FileWriteError: The tag could not be encoded or written
        """
        self._ensure_writable()
        try:
            self.tags.save(self.file_path, v2_version=4)
        except (MutagenError, OSError, ValueError) as e:
            raise FileWriteError(f"Error saving MP3 file: {e}") from e
        self.state = TagState.SAVED

    def discard(self) -> None:
        """Drop all in-memory changes without touching the file."""
        self._ensure_writable()
        self.state = TagState.DISCARDED
