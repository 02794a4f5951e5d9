"""Exceptions raised by ID3 Embed. Every one of them aborts the run."""


class ID3EmbedError(Exception):
    """Base class for all fatal ID3 Embed errors."""


class FileOpenError(ID3EmbedError):
    """The target file or a local source file could not be opened."""


class NetworkError(ID3EmbedError):
    """A remote lookup failed at the transport or HTTP level."""


class DecodeError(ID3EmbedError):
    """A response or local file could not be decoded."""


class NotFoundError(ID3EmbedError):
    """A remote lookup returned no usable match."""


class FileWriteError(ID3EmbedError):
    """The modified tag could not be written back."""
