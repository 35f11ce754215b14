"""Domain error codes for the bookstore module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    BOOK_NOT_FOUND = "BOOK_NOT_FOUND"
    DUPLICATE_BOOK = "DUPLICATE_BOOK"
    TRANSACTION_ALREADY_PROCESSED = "TRANSACTION_ALREADY_PROCESSED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BookNotFoundError(DomainError):
    """Raised when no book in the catalog matches an isbn."""

    def __init__(self, isbn: str) -> None:
        super().__init__(
            code=ErrorCode.BOOK_NOT_FOUND,
            message="Book not found",
        )
        object.__setattr__(self, "isbn", isbn)


class DuplicateBookError(DomainError):
    """Raised when a book with the same isbn is already in the catalog."""

    def __init__(self, isbn: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_BOOK,
            message="A book with this ISBN already exists",
        )
        object.__setattr__(self, "isbn", isbn)


class TransactionAlreadyProcessedError(DomainError):
    """Raised when a transaction is processed a second time."""

    def __init__(self, transaction_id: str) -> None:
        super().__init__(
            code=ErrorCode.TRANSACTION_ALREADY_PROCESSED,
            message="Transaction has already been processed",
        )
        object.__setattr__(self, "transaction_id", transaction_id)
