"""
Business logic for books.

``BookService`` keeps books in an in-memory list in insertion order and
hands out identifiers from a counter that only ever increases, so an
id is never reused even after the book holding it is deleted.  Every
operation is synchronous and completes inside a single request
handler; there is no persistence.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ..core.errors import NotFound, ValidationError
from ..schemas.book import BookCreate, BookRead, BookReplace, BookUpdate

logger = logging.getLogger(__name__)

DEFAULT_GENRE = "General"
SORTABLE_FIELDS = tuple(BookRead.model_fields)


@dataclass
class BookPatchResult:
    """Outcome of a partial update."""

    previous: BookRead
    updated: BookRead
    fields_changed: List[str]


class BookService:
    """In-memory collection of books."""

    def __init__(self, seed: Iterable[BookRead] = ()) -> None:
        self._books: List[BookRead] = [book.model_copy() for book in seed]
        self._next_id = max((book.id for book in self._books), default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._books)

    def list_books(
        self,
        genre: Optional[str] = None,
        sort: Optional[str] = None,
        limit: Optional[float] = None,
    ) -> List[BookRead]:
        """Return books filtered by genre, sorted by a field and truncated.

        ``genre`` is compared case-insensitively for equality.  ``sort``
        orders ascending by the named field; unknown names keep insertion
        order.  ``limit`` keeps the first N results, and a limit of zero
        or less gives an empty list, as does NaN.
        """
        result = list(self._books)
        if genre:
            wanted = genre.lower()
            result = [book for book in result if book.genre.lower() == wanted]
        if sort in SORTABLE_FIELDS:
            result.sort(key=lambda book: getattr(book, sort))
        if limit is not None:
            result = [] if math.isnan(limit) else result[: max(int(limit), 0)]
        return result

    def get_book(self, book_id: Optional[int]) -> BookRead:
        """Return the book with ``book_id`` or raise ``NotFound``."""
        return self._books[self._index_of(book_id)]

    def search_books(
        self,
        query: Optional[str] = None,
        min_year: Optional[float] = None,
        max_year: Optional[float] = None,
        author: Optional[str] = None,
    ) -> List[BookRead]:
        """Return books matching every supplied criterion.

        ``query`` matches a case-insensitive substring of the title,
        author or genre.  Year bounds are inclusive, and a NaN bound
        matches nothing.  ``author`` matches a case-insensitive substring
        of the author only.
        """
        results = list(self._books)
        if query:
            needle = query.lower()
            results = [
                book
                for book in results
                if needle in book.title.lower()
                or needle in book.author.lower()
                or needle in book.genre.lower()
            ]
        if min_year is not None:
            results = [book for book in results if book.year >= min_year]
        if max_year is not None:
            results = [book for book in results if book.year <= max_year]
        if author:
            needle = author.lower()
            results = [book for book in results if needle in book.author.lower()]
        return results

    def create_book(self, data: BookCreate) -> BookRead:
        """Append a new book and return it.

        ``year`` defaults to the current year and ``genre`` to
        ``"General"``.  Raises ``ValidationError`` without touching the
        collection or the id counter if title or author is missing.
        """
        if not data.title or not data.author:
            raise ValidationError(
                "Missing required fields",
                required=["title", "author"],
                received=data.model_dump(exclude_unset=True),
                tip="Send a JSON body with at least 'title' and 'author'",
            )
        book = BookRead(
            id=self._next_id,
            title=data.title,
            author=data.author,
            year=data.year or date.today().year,
            genre=data.genre or DEFAULT_GENRE,
        )
        self._next_id += 1
        self._books.append(book)
        logger.info("Created book %s (%r)", book.id, book.title)
        return book

    def replace_book(self, book_id: Optional[int], data: BookReplace) -> BookRead:
        """Overwrite every field of a book except its id."""
        index = self._index_of(book_id)
        if not (data.title and data.author and data.year and data.genre):
            raise ValidationError(
                "PUT requires ALL fields (title, author, year, genre)",
                tip="Use PATCH if you only want to update some fields",
            )
        book = BookRead(
            id=self._books[index].id,
            title=data.title,
            author=data.author,
            year=data.year,
            genre=data.genre,
        )
        self._books[index] = book
        logger.info("Replaced book %s", book.id)
        return book

    def update_book(self, book_id: Optional[int], data: BookUpdate) -> BookPatchResult:
        """Merge the supplied fields onto an existing book.

        Fields absent from the payload, or sent as ``null``, keep their
        current value.
        """
        index = self._index_of(book_id)
        previous = self._books[index]
        changes = {
            name: value
            for name, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        updated = previous.model_copy(update=changes)
        self._books[index] = updated
        logger.info("Updated book %s fields %s", updated.id, list(changes))
        return BookPatchResult(previous=previous, updated=updated, fields_changed=list(changes))

    def delete_book(self, book_id: Optional[int]) -> BookRead:
        """Remove a book and return it."""
        index = self._index_of(book_id)
        book = self._books.pop(index)
        logger.info("Deleted book %s", book.id)
        return book

    def _index_of(self, book_id: Optional[int]) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        raise NotFound(
            "Book not found",
            requestedId=book_id,
            tip=f"Try an ID between 1 and {self._next_id - 1}",
        )
