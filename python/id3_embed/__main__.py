"""Allow running as ``python -m id3_embed``."""

from id3_embed.main import main

if __name__ == "__main__":
    main()
