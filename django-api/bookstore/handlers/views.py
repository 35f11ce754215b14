"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from bookstore.domain import DomainError, ErrorCode, TransactionKind
from bookstore.handlers.serializers import (
    BookInputSerializer,
    BookSerializer,
    TransactionInputSerializer,
    TransactionSerializer,
    TransactionSummarySerializer,
)
from bookstore.services import get_bookstore

ERROR_STATUS = {
    ErrorCode.BOOK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_BOOK: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


class BookListView(APIView):
    """Handler for GET/POST /api/books"""

    def get(self, request: Request) -> Response:
        books = get_bookstore().list_books()
        return Response(BookSerializer(books, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = BookInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            book = get_bookstore().add_book(**serializer.validated_data)
        except DomainError as error:
            return error_response(error)
        return Response(BookSerializer(book).data, status=status.HTTP_201_CREATED)


class BookDetailView(APIView):
    """Handler for GET/DELETE /api/books/{isbn}"""

    def get(self, request: Request, isbn: str) -> Response:
        try:
            book = get_bookstore().get_book(isbn)
        except DomainError as error:
            return error_response(error)
        return Response(BookSerializer(book).data)

    def delete(self, request: Request, isbn: str) -> Response:
        get_bookstore().remove_book(isbn)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TransactionCreateView(APIView):
    """Base handler for recording one kind of transaction."""

    kind: TransactionKind

    def post(self, request: Request) -> Response:
        serializer = TransactionInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            transaction = get_bookstore().record_transaction(
                kind=self.kind, **serializer.validated_data
            )
        except DomainError as error:
            return error_response(error)
        return Response(
            TransactionSerializer(transaction).data, status=status.HTTP_201_CREATED
        )


class OrderCreateView(TransactionCreateView):
    """Handler for POST /api/orders"""

    kind = TransactionKind.ORDER


class SaleCreateView(TransactionCreateView):
    """Handler for POST /api/sales"""

    kind = TransactionKind.SALE


class TransactionListView(APIView):
    """Handler for GET /api/transactions"""

    def get(self, request: Request) -> Response:
        transactions = get_bookstore().list_transactions()
        return Response(TransactionSummarySerializer(transactions, many=True).data)
