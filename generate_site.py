#!/usr/bin/env python3
"""
Generate the static Studio Ghibli site.

Fetches all data from the Ghibli API and writes HTML pages to public/
(or GHIBLI_OUTPUT_DIR / --output-dir):
- index.html                 all films, oldest first
- film_<id>.html             one per film
- species_<id>.html          one per species
- soot-min.js                front page soot sprite easter egg

Usage:
    python3 generate_site.py
    python3 generate_site.py --output-dir docs --no-minify
"""

import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from ghibli_site.cli import main


if __name__ == "__main__":
    sys.exit(main())
