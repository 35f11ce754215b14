"""In-memory implementations of the bookstore stores.

State lives for the lifetime of the process only.
"""

from bookstore.domain import Book, BookNotFoundError, DuplicateBookError, Transaction
from bookstore.stores.interfaces import CatalogStore, TransactionLog


class InMemoryCatalog(CatalogStore):
    """Catalog backed by a list kept in insertion order."""

    def __init__(self) -> None:
        self._books: list[Book] = []

    def add(self, book: Book) -> None:
        if any(existing.isbn == book.isbn for existing in self._books):
            raise DuplicateBookError(book.isbn)
        self._books.append(book)

    def remove(self, isbn: str) -> int:
        kept = [book for book in self._books if book.isbn != isbn]
        removed = len(self._books) - len(kept)
        self._books = kept
        return removed

    def lookup(self, isbn: str) -> Book:
        for book in self._books:
            if book.isbn == isbn:
                return book
        raise BookNotFoundError(isbn)

    def list_books(self) -> list[Book]:
        return list(self._books)


class InMemoryTransactionLog(TransactionLog):
    """Append-only list of processed transactions."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []

    def append(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)

    def list_transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)
