"""Utility functions for ID3 Embed."""

from pathlib import Path

from id3_embed.errors import DecodeError, FileOpenError
from id3_embed.models import CoverArt


SUMMARY_MAX_LENGTH = 70

IMAGE_SIGNATURES = [
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
]


def detect_mime_type(data: bytes) -> str:
    """Detect image MIME type from magic bytes."""
    for magic, mime in IMAGE_SIGNATURES:
        if data.startswith(magic):
            return mime
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return "application/octet-stream"


def truncate(s: str, max_length: int = SUMMARY_MAX_LENGTH) -> str:
    """Cut a string to max_length characters, marking the cut with '...'."""
    if len(s) > max_length:
        return s[:max_length] + "..."
    return s


def read_image_file(file_path: str) -> CoverArt:
    """Read a local image and sniff its MIME type.

    Args:
        file_path: Path to the image file

    Returns:
        CoverArt with the file contents

    Raises:
        FileOpenError: The file could not be read
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        raise FileOpenError(f"Error reading album art image: {e}") from e
    return CoverArt(data=data, mime_type=detect_mime_type(data))


def read_lyrics_file(file_path: str) -> str:
    """Read a local UTF-8 lyrics file.

    Raises:
        FileOpenError: The file could not be read
        DecodeError: The file is not valid UTF-8
    """
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        raise FileOpenError(f"Error reading lyrics file: {e}") from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Lyrics file is not valid UTF-8: {file_path}") from e
