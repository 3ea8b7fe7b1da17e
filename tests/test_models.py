"""Tests for book rendering."""
import dataclasses

import pytest

from book_catalog.models import Book, format_book, format_price


def test_format_book_without_description():
    """Test the display line for a three-field book."""
    book = Book("Bussysteme in der Fahrzeugtechnik", "Werner Zimmermann, Ralf Schmidgall", 35.96)

    assert format_book(book) == (
        "Title: Bussysteme in der Fahrzeugtechnik, "
        "Author: Werner Zimmermann, Ralf Schmidgall, Price:35.96"
    )
    assert str(book) == format_book(book)


def test_format_book_with_description():
    """Test that the description is appended when present."""
    book = Book("T", "A", 12.5, "Short blurb")

    assert format_book(book) == "Title: T, Author: A, Price:12.5, Description: Short blurb"


def test_format_book_empty_description_is_still_shown():
    """Test that an empty (but present) description is rendered."""
    book = Book("T", "A", 1.0, "")

    assert format_book(book) == "Title: T, Author: A, Price:1.0, Description: "


def test_format_price_decimals():
    """Test pinned decimal places."""
    assert format_price(35.96) == "35.96"
    assert format_price(35.0) == "35.0"
    assert format_price(35.0, 2) == "35.00"
    assert format_price(35.9, 2) == "35.90"
    assert format_book(Book("T", "A", 3.0), decimals=2) == "Title: T, Author: A, Price:3.00"


def test_book_is_immutable():
    """Test that a parsed book cannot be changed."""
    book = Book("T", "A", 1.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        book.price = 2.0


def test_to_dict():
    """Test the JSON-ready representation."""
    assert Book("T", "A", 1.5).to_dict() == {
        "title": "T",
        "author": "A",
        "price": 1.5,
        "description": None
    }
