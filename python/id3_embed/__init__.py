"""
ID3 Embed - Cover art and lyrics embedding for MP3 files.

This package provides tools to:
- Embed a front cover image read from disk or fetched from iTunes
- Embed lyrics read from disk or fetched from LRCLIB
- Normalize comment frames for tag readers that mishandle mixed encodings
- Preview existing frames and pending changes without touching the file
"""

__version__ = "1.0.0"
