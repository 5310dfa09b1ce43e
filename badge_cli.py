"""
Shared command line plumbing for the badge sheet scripts.
"""

import argparse
import logging
from typing import Callable

from badge_errors import BadgeError
from badge_settings import DEFAULT_IMG_DIR

log = logging.getLogger("badges")


def base_parser(description: str, output: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=description)
    p.add_argument("--img-dir", default=DEFAULT_IMG_DIR,
                   help=f"Folder holding template-<name>.png images (default {DEFAULT_IMG_DIR})")
    p.add_argument("--output", default=output, help=f"Output PDF path (default {output})")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return p


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run(job: Callable[[], None]) -> None:
    """Run ``job``, turning badge errors into a logged message and exit status 1."""
    try:
        job()
    except BadgeError as e:
        log.error("%s", e)
        raise SystemExit(1) from e
