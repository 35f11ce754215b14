from bookstore.handlers.views import (
    BookDetailView,
    BookListView,
    OrderCreateView,
    SaleCreateView,
    TransactionListView,
)

__all__ = [
    "BookListView",
    "BookDetailView",
    "OrderCreateView",
    "SaleCreateView",
    "TransactionListView",
]
