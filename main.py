# main.py

"""Entry point for the storefront application (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _positive_int(value: str) -> int:
    """argparse type for page numbers."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("page must be >= 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse and filter the product catalog.",
        epilog=f"Catalog API: {Settings.API_BASE_URL}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Search text. Omit to launch the interactive TUI.",
    )
    parser.add_argument(
        "-c",
        "--category",
        default=None,
        help="Only keep products in this category.",
    )
    parser.add_argument(
        "--price-from",
        default=None,
        dest="price_from",
        help="Minimum price (inclusive).",
    )
    parser.add_argument(
        "--price-to",
        default=None,
        dest="price_to",
        help="Maximum price (inclusive).",
    )
    parser.add_argument(
        "-b",
        "--brand",
        action="append",
        default=None,
        dest="brands",
        help="Brand to keep; repeat for several.",
    )
    parser.add_argument(
        "-r",
        "--rating",
        action="append",
        type=int,
        choices=Settings.RATINGS,
        default=None,
        dest="ratings",
        help="Whole-star rating to keep; repeat for several.",
    )
    parser.add_argument(
        "-p",
        "--page",
        type=_positive_int,
        default=1,
        help="Page number, 1-based (default: 1).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--categories",
        action="store_true",
        default=False,
        help="List the category tabs and exit.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Run one headless query and exit."""
    from src.cli.runner import build_query, cli_search

    query = build_query(
        search=args.query,
        category=args.category,
        price_from=args.price_from,
        price_to=args.price_to,
        brands=args.brands,
        ratings=args.ratings,
        page=args.page,
    )
    exit_code = asyncio.run(cli_search(query, args.output_format))
    sys.exit(exit_code)


def _run_list_categories() -> None:
    """Print the category list and exit."""
    from src.cli.runner import list_categories

    exit_code = asyncio.run(list_categories())
    sys.exit(exit_code)


def main() -> None:
    """Route to TUI (no args) or headless CLI (query provided)."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.categories:
        _run_list_categories()
    elif args.query is None:
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
