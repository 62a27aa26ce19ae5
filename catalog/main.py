"""Composition root for the catalog.

This module is the only place that wires configuration, logging and the
core domain together into a runnable entry point.

Module Structure:
- Configuration loading via config module
- Logging setup
- Entry point: build a Category from command line arguments and print it
"""

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from catalog.config import load_settings
from catalog.core.exceptions import EntityValidationError
from catalog.core.models import Category


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Logs go to stderr so stdout carries only the JSON result.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog",
        description="Validate a catalog category and print it as JSON.",
    )
    parser.add_argument("name", help="Category name (3-255 characters)")
    parser.add_argument(
        "description",
        nargs="?",
        default="",
        help="Category description (up to 10000 characters)",
    )
    parser.add_argument(
        "--inactive",
        action="store_true",
        help="Create the category in the inactive state",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Application entry point.

    Loads configuration, configures logging, builds a Category from the
    command line arguments and prints it as JSON.

    Exit codes:
        0: Category is valid
        1: Validation failure or unexpected error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    args = _build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.effective_log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    try:
        category = Category(
            args.name,
            args.description,
            is_active=not args.inactive,
        )
    except EntityValidationError as e:
        logger.error(f"Invalid category: {e}")
        print(json.dumps({
            "status": "error",
            "message": e.message,
        }, indent=2))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)

    logger.info(f"Category {category.id} is valid")
    print(json.dumps(category.to_dict(), indent=2))


if __name__ == "__main__":
    main()
