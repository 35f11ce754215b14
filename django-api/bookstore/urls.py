from django.urls import path

from bookstore.handlers import (
    BookDetailView,
    BookListView,
    OrderCreateView,
    SaleCreateView,
    TransactionListView,
)

urlpatterns = [
    path("books", BookListView.as_view(), name="book-list"),
    path("books/<path:isbn>", BookDetailView.as_view(), name="book-detail"),
    path("orders", OrderCreateView.as_view(), name="order-create"),
    path("sales", SaleCreateView.as_view(), name="sale-create"),
    path("transactions", TransactionListView.as_view(), name="transaction-list"),
]
