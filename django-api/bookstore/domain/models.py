"""Domain models for the bookstore catalog and transaction log.

These are plain domain objects with no persistence or API input rules.
A Book is the only mutable record: its quantity changes when a
transaction is processed against it.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

from bookstore.domain.errors import TransactionAlreadyProcessedError
from bookstore.domain.value_objects import Date, Money

logger = logging.getLogger(__name__)


@dataclass
class Book:
    """Domain representation of a catalog entry and its on-hand stock."""

    title: str
    author: str
    genre: str
    isbn: str
    publication_date: Date
    price: Money
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Book quantity cannot be negative")


class TransactionKind(Enum):
    """Closed set of transaction variants."""

    ORDER = "order"
    SALE = "sale"

    @property
    def book_label(self) -> str:
        return "ordered book" if self is TransactionKind.ORDER else "sold book"


class StockOutcome(Enum):
    """Result of processing a transaction against a book's stock."""

    PROCESSED = "processed"
    INSUFFICIENT_STOCK = "insufficient_stock"


@dataclass(frozen=True)
class Transaction:
    """An order or sale requesting a stock deduction for one isbn.

    The transaction refers to the catalog entry by isbn instead of holding
    a copy of it, so processing changes the live stock.
    """

    kind: TransactionKind
    transaction_id: str
    transaction_date: Date
    customer_id: str
    isbn: str
    quantity: int
    outcome: StockOutcome | None = None

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Transaction quantity cannot be negative")

    @property
    def id(self) -> str:
        return self.transaction_id

    @property
    def date(self) -> Date:
        return self.transaction_date

    @property
    def is_processed(self) -> bool:
        return self.outcome is not None

    def process(self, book: Book) -> "Transaction":
        """Deduct the requested quantity from ``book`` if enough is on hand.

        Returns a copy of this transaction carrying the outcome. Running
        out of stock is reported through the outcome, never raised.

        Raises:
            TransactionAlreadyProcessedError: If an outcome is already set.
            ValueError: If ``book`` is not the book this transaction refers to.
        """
        if self.is_processed:
            raise TransactionAlreadyProcessedError(self.transaction_id)
        if book.isbn != self.isbn:
            raise ValueError("Book does not match the transaction ISBN")

        if self.quantity <= book.quantity:
            book.quantity -= self.quantity
            logger.info(
                "%s processed successfully.",
                self.kind.value.capitalize(),
                extra={"transaction_id": self.transaction_id, "isbn": self.isbn},
            )
            return replace(self, outcome=StockOutcome.PROCESSED)

        logger.warning(
            "Insufficient stock for the %s.",
            self.kind.book_label,
            extra={"transaction_id": self.transaction_id, "isbn": self.isbn},
        )
        return replace(self, outcome=StockOutcome.INSUFFICIENT_STOCK)
