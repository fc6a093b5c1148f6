"""
In-memory book store.

Books live in a plain dict keyed by a generated UUID. Data is lost on
restart -- there is no persistence layer, and no delete or update.

FastAPI runs the book handlers on its worker thread pool, so the dict is
guarded by a reader/writer lock: lookups share it, inserts take it alone.
Nothing blocking ever happens while the lock is held.
"""

import threading
import uuid
from contextlib import contextmanager
from typing import Iterator

from library_api.models.schemas import Book


class ReadWriteLock:
    """Many readers or a single writer. Waiting writers do not starve."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class BookStore:
    """book_id -> Book. One instance per application."""

    def __init__(self) -> None:
        self._books: dict[str, Book] = {}
        self._lock = ReadWriteLock()

    def create(self, book: Book) -> str:
        """Store ``book`` under a fresh id and return the id.

        The caller is responsible for validating the book first.
        """
        with self._lock.write_locked():
            book_id = str(uuid.uuid4())
            while book_id in self._books:
                book_id = str(uuid.uuid4())
            self._books[book_id] = book
        return book_id

    def exists(self, book_id: str) -> bool:
        with self._lock.read_locked():
            return book_id in self._books

    def get(self, book_id: str) -> Book | None:
        with self._lock.read_locked():
            return self._books.get(book_id)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._books)
