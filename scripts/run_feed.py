#!/usr/bin/env python
"""Run the terminal news feed from a source checkout."""

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Load .env before importing anything else
from dotenv import load_dotenv
load_dotenv()

from news_feed.app import main


if __name__ == "__main__":
    raise SystemExit(main())
