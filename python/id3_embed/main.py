#!/usr/bin/env python3
"""
ID3 Embed - Embed cover art and lyrics into an MP3 file's ID3v2 tag.

Usage:
    python -m id3_embed /path/to/song.mp3 [options]
"""

import argparse
import sys
from typing import Optional

from mutagen.id3 import Encoding

from id3_embed.config import (
    load_config, validate_config, eprint, is_language_code
)
from id3_embed.errors import ID3EmbedError
from id3_embed.id3_handler import ID3Handler
from id3_embed.itunes_client import ItunesClient
from id3_embed.lrclib_client import LrcLibClient
from id3_embed.models import TrackQuery
from id3_embed.utils import read_image_file, read_lyrics_file


AUTO = "auto"


class EmbedProcessor:
    """Applies the requested changes to one MP3 file."""

    def __init__(self, config: dict, args: argparse.Namespace,
                 itunes_client: Optional[ItunesClient] = None,
                 lrclib_client: Optional[LrcLibClient] = None):
        """
        Initialize processor.

        Args:
            config: Configuration dictionary
            args: CLI arguments
            itunes_client: Cover art client (built from config if omitted)
            lrclib_client: Lyrics client (built from config if omitted)
        """
        self.config = config
        self.args = args
        self.itunes_client = itunes_client or ItunesClient(
            config["itunes_search_url"], config["user_agent"]
        )
        self.lrclib_client = lrclib_client or LrcLibClient(
            config["lrclib_search_url"], config["user_agent"]
        )

    def process(self, path: str) -> ID3Handler:
        """
        Open, mutate and save (or discard) the tag of one file.

        Any ID3EmbedError propagates before the file is written.

        Args:
            path: Path to the MP3 file

        Returns:
            The handler in its final SAVED or DISCARDED state
        """
        handler = ID3Handler.open(path)

        if self.args.dry_run:
            for summary in handler.frame_summaries():
                print(summary)

        handler.set_default_encoding(Encoding.UTF16)
        handler.normalize_comment()

        query = TrackQuery(artist=handler.artist, title=handler.title)

        if self.args.image:
            self._embed_image(handler, query)
        if self.args.lyrics:
            self._embed_lyrics(handler, query)

        if self.args.dry_run:
            handler.discard()
        else:
            handler.save()
            print("Embedded successfully in", path)
        return handler

    def _embed_image(self, handler: ID3Handler, query: TrackQuery) -> None:
        source = self.args.image
        if source == AUTO:
            if self.args.dry_run:
                print()
                print("Cover art URL:", self.itunes_client.search_url(query))
                return
            cover = self.itunes_client.fetch_cover_art(query)
        else:
            if self.args.dry_run:
                print()
                print("Cover art from file:", source)
                return
            cover = read_image_file(source)
        handler.replace_picture(cover)

    def _embed_lyrics(self, handler: ID3Handler, query: TrackQuery) -> None:
        source = self.args.lyrics
        if source == AUTO:
            lyrics = self.lrclib_client.fetch_synced_lyrics(query)
            if self.args.dry_run:
                print()
                print(lyrics)
                return
        else:
            if self.args.dry_run:
                print()
                print("Lyrics text from file:", source)
                return
            lyrics = read_lyrics_file(source)
        handler.replace_lyrics(lyrics, self.args.lang)


def language_code(value: str) -> str:
    """argparse type for ID3 three-letter language codes."""
    if not is_language_code(value):
        raise argparse.ArgumentTypeError(
            f"invalid language code: {value!r} (expected three letters, e.g. jpn, eng)"
        )
    return value.lower()


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        description="Embed cover art and lyrics into the ID3v2 tag of an MP3 file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch cover art from iTunes and lyrics from LRCLIB
  python -m id3_embed song.mp3 --image auto --lyrics auto

  # Embed a local cover image
  python -m id3_embed song.mp3 --image cover.jpg

  # Embed local lyrics in English
  python -m id3_embed song.mp3 --lyrics song.lrc --lang eng

  # Preview existing frames and pending changes
  python -m id3_embed song.mp3 --image auto --dry-run
"""
    )

    parser.add_argument(
        "path",
        help="Path to the MP3 file to edit"
    )

    parser.add_argument(
        "--image",
        default="",
        help="Path to image file to embed or 'auto' for automatic cover art fetch"
    )

    parser.add_argument(
        "--lyrics",
        default="",
        help="Path to lyrics file to embed or 'auto' for automatic lyrics fetch"
    )

    parser.add_argument(
        "--lang",
        type=language_code,
        default=None,
        help="Language code for embedded tag (e.g., jpn, eng; default: ID3_EMBED_LANG or jpn)"
    )

    parser.add_argument(
        "--dry-run", "--dryrun",
        dest="dry_run",
        action="store_true",
        help="Perform a dry run without modifying the file"
    )

    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to .env file (default: ./.env if present)"
    )

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load configuration
    config = load_config(args.env_file)
    invalid = validate_config(config)
    if invalid:
        eprint(f"\nInvalid configuration values: {', '.join(invalid)}")
        sys.exit(1)

    if args.lang is None:
        args.lang = config["default_lang"].lower()

    processor = EmbedProcessor(config, args)

    try:
        processor.process(args.path)
    except ID3EmbedError as e:
        eprint(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
