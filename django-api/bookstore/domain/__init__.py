from bookstore.domain.errors import (
    BookNotFoundError,
    DomainError,
    DuplicateBookError,
    ErrorCode,
    TransactionAlreadyProcessedError,
)
from bookstore.domain.models import (
    Book,
    StockOutcome,
    Transaction,
    TransactionKind,
)
from bookstore.domain.value_objects import Date, Money

__all__ = [
    "Book",
    "Transaction",
    "TransactionKind",
    "StockOutcome",
    "Date",
    "Money",
    "ErrorCode",
    "DomainError",
    "BookNotFoundError",
    "DuplicateBookError",
    "TransactionAlreadyProcessedError",
]
