"""Parse semicolon-delimited catalog lines into books."""
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Union

from book_catalog.models import Book, ParseError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
COMMENT_PREFIX = "//"

# ASCII only: sign, digits with optional fraction (or a bare fraction), optional exponent
PRICE_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

ParseResult = Union[Book, ParseError]


@dataclass
class ParseSummary:
    """Books parsed from a run of lines plus counts of what was skipped."""
    books: List[Book] = field(default_factory=list)
    comments: int = 0
    invalid: int = 0

    @property
    def total(self) -> int:
        return len(self.books) + self.comments + self.invalid


def parse_price(text: str) -> Union[float, ParseError]:
    """Convert a price field to a float, or INVALID_FORMAT."""
    if not PRICE_PATTERN.fullmatch(text):
        return ParseError.INVALID_FORMAT
    return float(text)


def parse_line(line: str) -> ParseResult:
    """
    Parse a single catalog line.

    Format: TITLE; AUTHOR; PRICE[; DESCRIPTION]

    Args:
        line: Raw line, surrounding whitespace per field is ignored

    Returns:
        Book on success, otherwise ParseError.COMMENT or
        ParseError.INVALID_FORMAT
    """
    parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]

    # split always yields at least one field
    title = parts[0]
    if title.startswith(COMMENT_PREFIX):
        return ParseError.COMMENT

    if len(parts) not in (3, 4):
        logger.debug(f"Expected 3 or 4 fields, got {len(parts)}: {line!r}")
        return ParseError.INVALID_FORMAT

    author = parts[1]
    if not author:
        logger.debug(f"Empty author: {line!r}")
        return ParseError.INVALID_FORMAT

    price = parse_price(parts[2])
    if price is ParseError.INVALID_FORMAT:
        logger.debug(f"Invalid price {parts[2]!r}: {line!r}")
        return price

    description = parts[3] if len(parts) == 4 else None

    return Book(
        title=title,
        author=author,
        price=price,
        description=description
    )


def summarize(lines: Iterable[str]) -> ParseSummary:
    """
    Parse many lines, counting comments and invalid lines.

    Args:
        lines: Raw catalog lines

    Returns:
        ParseSummary with books in input order
    """
    summary = ParseSummary()

    for line in lines:
        result = parse_line(line)
        if result is ParseError.COMMENT:
            summary.comments += 1
        elif result is ParseError.INVALID_FORMAT:
            summary.invalid += 1
        else:
            summary.books.append(result)

    return summary


def parse_lines(lines: Iterable[str]) -> List[Book]:
    """Parse many lines, skipping comments and invalid lines."""
    return summarize(lines).books
