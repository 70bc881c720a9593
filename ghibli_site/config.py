"""
Runtime configuration for the static site generator.

Values come from the environment (a local .env file is loaded first) and can
be overridden by command-line flags.

Usage:
    from ghibli_site.config import Settings

    settings = Settings.from_env()
    print(settings.output_dir)
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_API_BASE = "https://ghibliapi.vercel.app"
DEFAULT_OUTPUT_DIR = "public"
DEFAULT_IMAGE_HOST = "https://marsbj.folk.ntnu.no/images"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Settings for one generation run."""
    api_base: str = DEFAULT_API_BASE
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    image_host: str = DEFAULT_IMAGE_HOST
    minify: bool = True
    exact_references: bool = False  # substring matching unless enabled
    show_progress: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """Build settings from GHIBLI_* environment variables."""
        if dotenv:
            load_dotenv()
        return cls(
            api_base=os.getenv("GHIBLI_API_BASE", DEFAULT_API_BASE).rstrip("/"),
            output_dir=Path(os.getenv("GHIBLI_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            image_host=os.getenv("GHIBLI_IMAGE_HOST", DEFAULT_IMAGE_HOST).rstrip("/"),
            minify=_env_flag("GHIBLI_MINIFY", True),
            exact_references=_env_flag("GHIBLI_EXACT_REFERENCES", False),
            show_progress=_env_flag("GHIBLI_PROGRESS", True),
            log_level=os.getenv("GHIBLI_LOG_LEVEL", "INFO").upper(),
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "output_dir" in changes:
            changes["output_dir"] = Path(changes["output_dir"])
        if "api_base" in changes:
            changes["api_base"] = changes["api_base"].rstrip("/")
        return replace(self, **changes)
