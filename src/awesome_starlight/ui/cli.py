from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from awesome_starlight.app import update_catalog
from awesome_starlight.config import RunConfig, configure_logging
from awesome_starlight.config.run import DEFAULT_README_PATH

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Rebuild the Awesome Starlight catalog from its sources"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log a preview of the generated content instead of writing the README",
    )
    parser.add_argument(
        "--readme",
        type=Path,
        default=DEFAULT_README_PATH,
        help="README file containing the generated-content markers (default: %(default)s)",
    )
    parser.add_argument(
        "--require-categorization",
        action="store_true",
        help="Fail instead of using the keyword fallback when GITHUB_TOKEN is not set",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv))


def _build_run_config(args: argparse.Namespace) -> RunConfig:
    readme_path: Path = args.readme
    if not readme_path.is_file():
        raise ValueError(f"README not found: {readme_path}")
    return RunConfig(readme_path=readme_path, dry_run=args.dry_run)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        run_config = _build_run_config(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        update_catalog(run_config, require_categorization=parsed_args.require_categorization)
    except Exception:
        log.exception("Fatal error during catalog update")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
