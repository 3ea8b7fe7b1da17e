"""Data models for catalog records."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ParseError(Enum):
    """Why a catalog line did not produce a Book."""
    COMMENT = "comment"
    INVALID_FORMAT = "invalid_format"


@dataclass(frozen=True)
class Book:
    """One catalog entry."""
    title: str
    author: str
    price: float
    description: Optional[str] = None

    def __str__(self) -> str:
        return format_book(self)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "price": self.price,
            "description": self.description
        }


def format_price(price: float, decimals: Optional[int] = None) -> str:
    """Render a price with default float formatting, or pinned decimals."""
    if decimals is None:
        return str(price)
    return f"{price:.{decimals}f}"


def format_book(book: Book, decimals: Optional[int] = None) -> str:
    """
    Render a book as a single display line.

    Args:
        book: Book to render
        decimals: Fixed number of decimal places for the price (optional)

    Returns:
        "Title: <title>, Author: <author>, Price:<price>" plus
        ", Description: <description>" when a description is present
    """
    text = f"Title: {book.title}, Author: {book.author}, Price:{format_price(book.price, decimals)}"
    if book.description is not None:
        text += f", Description: {book.description}"
    return text
