"""
The resource store shared by all request handlers.

A ``ResourceStore`` owns the books and users collections.  ``create_app``
builds one per application and keeps it on ``app.state.store``;
handlers reach it through the ``get_store`` dependency, so every test
can work against its own freshly seeded store.
"""

from fastapi import Request

from ..schemas.book import BookRead
from ..schemas.user import UserRead
from .book_service import BookService
from .user_service import UserService

SEED_BOOKS = (
    BookRead(id=1, title="The API Design Book", author="RESTful Roy", year=2020, genre="Technology"),
    BookRead(id=2, title="HTTP: The Definitive Guide", author="Web Walker", year=2019, genre="Technology"),
    BookRead(id=3, title="JavaScript Mastery", author="Code Carter", year=2021, genre="Programming"),
    BookRead(id=4, title="The Art of REST", author="API Andy", year=2022, genre="Technology"),
)

SEED_USERS = (
    UserRead(id=1, username="learner", email="learner@api101.com", role="student"),
    UserRead(id=2, username="teacher", email="teacher@api101.com", role="admin"),
)


class ResourceStore:
    """Books and users held in process memory."""

    def __init__(self, seed: bool = True) -> None:
        self.books = BookService(SEED_BOOKS if seed else ())
        self.users = UserService(SEED_USERS if seed else ())


def get_store(request: Request) -> ResourceStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store
