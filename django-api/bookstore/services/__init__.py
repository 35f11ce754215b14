from bookstore.services.bookstore_service import Bookstore, get_bookstore

__all__ = ["Bookstore", "get_bookstore"]
