"""Unit tests for domain primitives and transaction processing.

Run with: pytest tests/test_domain.py -v
"""

import logging

import pytest

from bookstore.domain import (
    Book,
    Date,
    Money,
    StockOutcome,
    Transaction,
    TransactionAlreadyProcessedError,
    TransactionKind,
)


def make_book(quantity: int = 5, isbn: str = "111") -> Book:
    return Book(
        title="Dune",
        author="Frank Herbert",
        genre="Science Fiction",
        isbn=isbn,
        publication_date=Date(day=1, month=8, year=1965),
        price=Money(1250),
        quantity=quantity,
    )


def make_transaction(
    kind: TransactionKind = TransactionKind.SALE, quantity: int = 3, isbn: str = "111"
) -> Transaction:
    return Transaction(
        kind=kind,
        transaction_id="T-1",
        transaction_date=Date(day=2, month=3, year=2024),
        customer_id="C-1",
        isbn=isbn,
        quantity=quantity,
    )


class TestDate:
    """Tests for Date value object."""

    def test_str_uses_day_month_year(self):
        """Date renders as d/m/y without padding."""
        assert str(Date(day=1, month=2, year=2024)) == "1/2/2024"

    def test_no_calendar_validation(self):
        """Out-of-range values are kept as given."""
        date = Date(day=31, month=2, year=2023)
        assert (date.day, date.month, date.year) == (31, 2, 2023)

    def test_from_string_parses_three_parts(self):
        """Date.from_string parses the 'dd mm yyyy' form."""
        assert Date.from_string(" 05 11 1999 ") == Date(day=5, month=11, year=1999)

    def test_from_string_rejects_wrong_part_count(self):
        """Date.from_string raises ValueError for a missing part."""
        with pytest.raises(ValueError):
            Date.from_string("05 11")

    def test_from_string_rejects_non_integer(self):
        """Date.from_string raises ValueError for non-numeric parts."""
        with pytest.raises(ValueError):
            Date.from_string("aa 11 1999")


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_zero(self):
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_str(self):
        assert str(Money(1999)) == "1999"


class TestBook:
    """Tests for Book entity."""

    def test_book_rejects_negative_quantity(self):
        with pytest.raises(ValueError):
            make_book(quantity=-1)

    def test_book_accepts_zero_quantity(self):
        assert make_book(quantity=0).quantity == 0


class TestTransaction:
    """Tests for Transaction processing."""

    def test_process_deducts_stock(self):
        """Processing a sale within stock reduces the book quantity."""
        book = make_book(quantity=5)

        processed = make_transaction(quantity=3).process(book)

        assert book.quantity == 2
        assert processed.outcome is StockOutcome.PROCESSED

    def test_process_exact_stock(self):
        """Requesting exactly the stock on hand empties it."""
        book = make_book(quantity=3)

        processed = make_transaction(quantity=3).process(book)

        assert book.quantity == 0
        assert processed.outcome is StockOutcome.PROCESSED

    def test_process_insufficient_stock_leaves_book_untouched(self):
        """Requesting more than the stock reports insufficient stock."""
        book = make_book(quantity=2)

        processed = make_transaction(quantity=10).process(book)

        assert book.quantity == 2
        assert processed.outcome is StockOutcome.INSUFFICIENT_STOCK

    def test_process_returns_copy(self):
        """The original transaction is left without an outcome."""
        transaction = make_transaction()

        processed = transaction.process(make_book())

        assert transaction.outcome is None
        assert processed is not transaction
        assert processed.id == "T-1"
        assert processed.date == Date(day=2, month=3, year=2024)

    def test_order_deducts_stock(self):
        """Orders follow the same deduction rule as sales."""
        book = make_book(quantity=5)

        make_transaction(kind=TransactionKind.ORDER, quantity=5).process(book)

        assert book.quantity == 0

    def test_process_twice_raises(self):
        """A processed transaction cannot be processed again."""
        book = make_book(quantity=5)
        processed = make_transaction(quantity=1).process(book)

        with pytest.raises(TransactionAlreadyProcessedError):
            processed.process(book)
        assert book.quantity == 4

    def test_process_rejects_other_book(self):
        with pytest.raises(ValueError):
            make_transaction(isbn="111").process(make_book(isbn="222"))

    def test_zero_quantity_is_processed(self):
        """A zero request succeeds without changing stock."""
        book = make_book(quantity=5)

        processed = make_transaction(quantity=0).process(book)

        assert book.quantity == 5
        assert processed.outcome is StockOutcome.PROCESSED

    def test_zero_quantity_on_empty_stock_is_processed(self):
        book = make_book(quantity=0)

        assert make_transaction(quantity=0).process(book).outcome is StockOutcome.PROCESSED

    def test_negative_quantity_raises(self):
        with pytest.raises(ValueError):
            make_transaction(quantity=-1)

    def test_insufficient_stock_is_logged_with_variant_label(self, caplog):
        """Each variant names its own book in the warning."""
        with caplog.at_level(logging.WARNING, logger="bookstore"):
            make_transaction(kind=TransactionKind.ORDER, quantity=9).process(make_book(quantity=1))
            make_transaction(kind=TransactionKind.SALE, quantity=9).process(make_book(quantity=1))

        messages = [record.getMessage() for record in caplog.records]
        assert "Insufficient stock for the ordered book." in messages
        assert "Insufficient stock for the sold book." in messages
