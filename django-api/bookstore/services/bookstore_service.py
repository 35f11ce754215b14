"""Bookstore service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every public method runs under one lock so the catalog and the log have a
single writer even when requests are served from several threads.
"""

import logging
import threading
from collections.abc import Iterator
from dataclasses import replace
from functools import lru_cache

from bookstore.domain import (
    Book,
    BookNotFoundError,
    Date,
    Money,
    Transaction,
    TransactionKind,
)
from bookstore.stores import (
    CatalogStore,
    InMemoryCatalog,
    InMemoryTransactionLog,
    TransactionLog,
)

logger = logging.getLogger(__name__)


class Bookstore:
    """Aggregate owning one catalog and one transaction log."""

    def __init__(self, catalog: CatalogStore, log: TransactionLog) -> None:
        self._catalog = catalog
        self._log = log
        self._lock = threading.Lock()

    def add_book(
        self,
        title: str,
        author: str,
        genre: str,
        isbn: str,
        publication_date: Date,
        price: int,
        quantity: int,
    ) -> Book:
        """Add a new book to the catalog.

        Raises:
            DuplicateBookError: If the isbn is already in the catalog.
            ValueError: If price or quantity is negative.
        """
        book = Book(
            title=title,
            author=author,
            genre=genre,
            isbn=isbn,
            publication_date=publication_date,
            price=Money(price),
            quantity=quantity,
        )
        with self._lock:
            self._catalog.add(book)
            added = replace(book)
        logger.info("Book added", extra={"isbn": isbn})
        return added

    def remove_book(self, isbn: str) -> int:
        """Remove the book with this isbn. Removing an unknown isbn is a no-op."""
        with self._lock:
            removed = self._catalog.remove(isbn)
        logger.info("Books removed", extra={"isbn": isbn, "count": removed})
        return removed

    def get_book(self, isbn: str) -> Book:
        """Return a copy of the book for an isbn, taken under the lock.

        Raises:
            BookNotFoundError: If the book does not exist.
        """
        with self._lock:
            return replace(self._catalog.lookup(isbn))

    def list_books(self) -> Iterator[Book]:
        """Iterate over copies of the books, taken together under the lock."""
        with self._lock:
            books = [replace(book) for book in self._catalog.list_books()]
        return iter(books)

    def record_transaction(
        self,
        kind: TransactionKind,
        transaction_id: str,
        transaction_date: Date,
        customer_id: str,
        isbn: str,
        quantity: int,
    ) -> Transaction:
        """Process an order or sale against the catalog and log it.

        The transaction is logged whether or not there was enough stock;
        the returned transaction carries the outcome.

        Raises:
            BookNotFoundError: If the isbn is not in the catalog. Nothing is logged.
            ValueError: If quantity is negative.
        """
        transaction = Transaction(
            kind=kind,
            transaction_id=transaction_id,
            transaction_date=transaction_date,
            customer_id=customer_id,
            isbn=isbn,
            quantity=quantity,
        )
        with self._lock:
            try:
                book = self._catalog.lookup(isbn)
            except BookNotFoundError:
                logger.info(
                    "Transaction rejected, book not found",
                    extra={"transaction_id": transaction_id, "isbn": isbn},
                )
                raise
            processed = transaction.process(book)
            self._log.append(processed)
        return processed

    def list_transactions(self) -> Iterator[Transaction]:
        with self._lock:
            transactions = self._log.list_transactions()
        return iter(transactions)


@lru_cache(maxsize=None)
def get_bookstore() -> Bookstore:
    """Return the process-wide bookstore used by the HTTP handlers."""
    return Bookstore(catalog=InMemoryCatalog(), log=InMemoryTransactionLog())
