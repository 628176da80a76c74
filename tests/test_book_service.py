"""
Tests for the in-memory book collection.
"""
from datetime import date

import pytest

from api_playground.app.core.errors import NotFound, ValidationError
from api_playground.app.schemas.book import BookCreate, BookReplace, BookUpdate
from api_playground.app.services.store import ResourceStore


class TestBookService:
    """Test BookService against a freshly seeded store."""

    def setup_method(self):
        self.books = ResourceStore().books

    def test_list_without_parameters_returns_insertion_order(self):
        assert [book.id for book in self.books.list_books()] == [1, 2, 3, 4]

    def test_genre_filter_is_case_insensitive_exact_match(self):
        result = self.books.list_books(genre="technology")
        assert [book.id for book in result] == [1, 2, 4]
        assert self.books.list_books(genre="Tech") == []

    def test_sort_by_year_and_title(self):
        assert [book.year for book in self.books.list_books(sort="year")] == [2019, 2020, 2021, 2022]
        titles = [book.title for book in self.books.list_books(sort="title")]
        assert titles == sorted(titles)

    def test_unknown_sort_field_keeps_order(self):
        assert [book.id for book in self.books.list_books(sort="pages")] == [1, 2, 3, 4]

    def test_sort_does_not_reorder_the_collection(self):
        self.books.list_books(sort="year")
        assert [book.id for book in self.books.list_books()] == [1, 2, 3, 4]

    def test_limit_applies_after_filter_and_sort(self):
        result = self.books.list_books(genre="Technology", sort="year", limit=2)
        assert [book.id for book in result] == [2, 1]

    @pytest.mark.parametrize("limit", [0, -3])
    def test_non_positive_limit_gives_empty_list(self, limit):
        assert self.books.list_books(limit=limit) == []

    def test_nan_limit_and_year_bound_match_nothing(self):
        assert self.books.list_books(limit=float("nan")) == []
        assert self.books.search_books(max_year=float("nan")) == []

    def test_limit_larger_than_collection(self):
        assert len(self.books.list_books(limit=100)) == 4

    def test_get_missing_book_raises_not_found(self):
        with pytest.raises(NotFound):
            self.books.get_book(99)
        with pytest.raises(NotFound):
            self.books.get_book(None)

    def test_search_matches_title_author_or_genre(self):
        assert [b.id for b in self.books.search_books(query="rest")] == [1, 4]
        assert [b.id for b in self.books.search_books(query="PROGRAMMING")] == [3]

    def test_search_filters_are_anded(self):
        result = self.books.search_books(query="technology", min_year=2020, max_year=2021)
        assert [b.id for b in result] == [1]

    def test_search_year_bounds_are_inclusive(self):
        assert [b.id for b in self.books.search_books(min_year=2021)] == [3, 4]
        assert [b.id for b in self.books.search_books(max_year=2019)] == [2]

    def test_search_by_author_substring(self):
        assert [b.id for b in self.books.search_books(author="andy")] == [4]

    def test_create_assigns_next_id_and_defaults(self):
        book = self.books.create_book(BookCreate(title="New", author="Someone"))
        assert book.id == 5
        assert book.year == date.today().year
        assert book.genre == "General"
        assert self.books.get_book(5) == book

    @pytest.mark.parametrize(
        "payload",
        [{"author": "A"}, {"title": "T"}, {"title": "", "author": "A"}, {}],
    )
    def test_create_without_required_fields_changes_nothing(self, payload):
        with pytest.raises(ValidationError):
            self.books.create_book(BookCreate(**payload))
        assert len(self.books) == 4
        assert self.books.next_id == 5

    def test_ids_are_never_reused(self):
        self.books.delete_book(4)
        book = self.books.create_book(BookCreate(title="T", author="A"))
        assert book.id == 5

    def test_replace_overwrites_every_field(self):
        data = BookReplace(title="T", author="A", year=1999, genre="Fiction")
        book = self.books.replace_book(1, data)
        assert book.model_dump() == {"id": 1, "title": "T", "author": "A", "year": 1999, "genre": "Fiction"}
        assert self.books.get_book(1) == book

    def test_replace_missing_field_leaves_book_unchanged(self):
        before = self.books.get_book(1)
        with pytest.raises(ValidationError):
            self.books.replace_book(1, BookReplace(title="T", author="A", year=1999))
        assert self.books.get_book(1) == before

    def test_replace_missing_book_is_checked_before_fields(self):
        with pytest.raises(NotFound):
            self.books.replace_book(42, BookReplace())

    def test_update_changes_only_supplied_fields(self):
        before = self.books.get_book(2)
        result = self.books.update_book(2, BookUpdate(year=2030))
        assert result.fields_changed == ["year"]
        assert result.previous == before
        assert result.updated.year == 2030
        assert result.updated.model_dump(exclude={"year"}) == before.model_dump(exclude={"year"})

    def test_update_ignores_id_and_null_values(self):
        update = BookUpdate.model_validate({"id": 77, "title": None, "genre": "Science"})
        result = self.books.update_book(3, update)
        assert result.updated.id == 3
        assert result.updated.title == "JavaScript Mastery"
        assert result.fields_changed == ["genre"]

    def test_update_missing_book_raises_not_found(self):
        with pytest.raises(NotFound):
            self.books.update_book(42, BookUpdate(year=2000))

    def test_delete_twice(self):
        deleted = self.books.delete_book(1)
        assert deleted.id == 1
        with pytest.raises(NotFound):
            self.books.delete_book(1)
        with pytest.raises(NotFound):
            self.books.get_book(1)


def test_stores_do_not_share_state():
    first = ResourceStore()
    second = ResourceStore()
    first.books.delete_book(1)
    assert len(first.books) == 3
    assert len(second.books) == 4


def test_user_service_create_and_list():
    from api_playground.app.schemas.user import UserCreate

    users = ResourceStore().users
    user = users.create_user(UserCreate(username="new", email="new@example.com"))
    assert user.id == 3
    assert user.role == "student"
    assert [u.username for u in users.list_users()] == ["learner", "teacher", "new"]

    with pytest.raises(ValidationError):
        users.create_user(UserCreate(username="nomail"))
    assert len(users) == 3
