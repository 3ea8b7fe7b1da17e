#!/usr/bin/env python3
"""Book Catalog CLI - print the valid records of a catalog file."""
import argparse
import json
import logging
import sys
from typing import List, Optional
from tabulate import tabulate
from book_catalog.config import Config
from book_catalog.models import Book, format_book, format_price
from book_catalog.parse import summarize

logger = logging.getLogger(__name__)

FORMATS = ["line", "table", "json"]


def non_negative_int(value: str) -> int:
    """argparse type for --decimals."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def setup_logging(level: str):
    """Send log records to stderr so they never mix with printed books."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def display_books(books: List[Book], format_type: str, decimals: Optional[int] = None):
    """Display books in specified format."""
    if format_type == "line":
        for book in books:
            print(format_book(book, decimals))

    elif format_type == "table":
        headers = ["Title", "Author", "Price", "Description"]
        rows = [
            [
                book.title,
                book.author,
                format_price(book.price, decimals),
                book.description or ""
            ]
            for book in books
        ]
        # prices are already formatted; keep tabulate from re-parsing them
        print(tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True))

    elif format_type == "json":
        print(json.dumps([book.to_dict() for book in books], indent=2, ensure_ascii=False))


def read_catalog(args, config: Config) -> int:
    """Parse the catalog file and print its records."""
    path = args.path or config.INPUT_FILE
    logger.info(f"Reading catalog: {path}")

    with open(path, "r", encoding="utf-8") as f:
        summary = summarize(f)

    logger.info(
        f"Parsed {len(summary.books)} books, skipped {summary.comments} comments "
        f"and {summary.invalid} invalid lines"
    )

    display_books(summary.books, args.format, args.decimals)

    if args.stats:
        sys.stderr.write(
            f"records: {len(summary.books)}, comments: {summary.comments}, "
            f"invalid: {summary.invalid}, total: {summary.total}\n"
        )

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    config = Config()
    setup_logging(config.LOG_LEVEL)

    output_format = config.OUTPUT_FORMAT
    if output_format not in FORMATS:
        logger.warning(f"Unknown output format {output_format!r}, using 'line'")
        output_format = "line"

    parser = argparse.ArgumentParser(
        description="Book Catalog - parse 'TITLE; AUTHOR; PRICE[; DESCRIPTION]' lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print every valid record of input.txt
  %(prog)s

  # Table output with prices pinned to two decimals
  %(prog)s books.txt --format table --decimals 2

  # JSON output plus skipped-line counts on stderr
  %(prog)s books.txt --format json --stats
        """
    )
    parser.add_argument("path", nargs="?", help=f"Catalog file (default: {config.INPUT_FILE})")
    parser.add_argument("--format", choices=FORMATS, default=output_format, help="Output format")
    parser.add_argument("--decimals", type=non_negative_int, default=config.PRICE_DECIMALS, help="Fixed decimal places for prices")
    parser.add_argument("--stats", action="store_true", help="Print record/comment/invalid counts to stderr")

    args = parser.parse_args(argv)

    try:
        return read_catalog(args, config)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    except OSError as e:
        logger.error(f"Cannot read catalog: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
