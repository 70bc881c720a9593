"""
Command-line entry point.

Usage:
    python generate_site.py                    # settings from environment / .env
    python generate_site.py --output-dir site  # write somewhere else
    python generate_site.py --no-minify --no-progress

Exit status is 0 on success and 1 when required data is missing or
generation fails for any other reason.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings
from .generator import MissingDataError, SiteGenerator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate the static Studio Ghibli site")
    parser.add_argument("--output-dir", help="Output directory (default: GHIBLI_OUTPUT_DIR or public)")
    parser.add_argument("--api-base", help="API base URL (default: GHIBLI_API_BASE)")
    parser.add_argument("--no-minify", action="store_true", help="Write pages without minification")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    parser.add_argument("--exact-references", action="store_true",
                        help="Match film references by exact id instead of substring")
    parser.add_argument("--log-level", help="Logging level (default: GHIBLI_LOG_LEVEL or INFO)")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    settings = base or Settings.from_env()
    return settings.with_overrides(
        output_dir=args.output_dir,
        api_base=args.api_base,
        minify=False if args.no_minify else None,
        show_progress=False if args.no_progress else None,
        exact_references=True if args.exact_references else None,
        log_level=args.log_level.upper() if args.log_level else None,
    )


def main(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args, settings)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    logger.info("Studio Ghibli Static HTML Generator")
    try:
        result = SiteGenerator.from_settings(settings).run()
    except MissingDataError as e:
        logger.error(str(e))
        return 1
    except Exception:
        logger.exception("Fatal error")
        return 1

    for line in result.summary().splitlines():
        logger.info(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
