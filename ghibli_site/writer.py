"""
Writes generated pages to the output directory.

The directory is created on first use. Existing files are overwritten and
files left over from earlier runs are never removed.
"""

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class SiteWriter:
    """Writes UTF-8 text files into one output directory."""

    def __init__(self, output_dir: Union[str, Path]):
        self.output_dir = Path(output_dir)
        self.written: List[Path] = []

    def ensure_dir(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write(self, filename: str, content: str) -> Path:
        """Write content to output_dir/filename and return the path."""
        self.ensure_dir()
        path = self.output_dir / filename
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
        self.written.append(path)
        logger.debug(f"Wrote {path}")
        return path
