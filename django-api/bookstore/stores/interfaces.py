"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from bookstore.domain import Book, Transaction


class CatalogStore(ABC):
    """Interface for the collection of books in the store."""

    @abstractmethod
    def add(self, book: Book) -> None:
        """Add a book.

        Raises:
            DuplicateBookError: If a book with the same isbn exists.
        """
        ...

    @abstractmethod
    def remove(self, isbn: str) -> int:
        """Remove every book with this isbn and return how many were removed."""
        ...

    @abstractmethod
    def lookup(self, isbn: str) -> Book:
        """Return the live book for an isbn.

        Raises:
            BookNotFoundError: If no book matches.
        """
        ...

    @abstractmethod
    def list_books(self) -> list[Book]:
        """Return all books in insertion order."""
        ...

    def __iter__(self) -> Iterator[Book]:
        return iter(self.list_books())


class TransactionLog(ABC):
    """Interface for the append-only log of processed transactions."""

    @abstractmethod
    def append(self, transaction: Transaction) -> None:
        """Record a transaction at the end of the log."""
        ...

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """Return all transactions in the order they were recorded."""
        ...

    def __len__(self) -> int:
        return len(self.list_transactions())
