from bookstore.stores.interfaces import CatalogStore, TransactionLog
from bookstore.stores.memory_store import InMemoryCatalog, InMemoryTransactionLog

__all__ = [
    "CatalogStore",
    "TransactionLog",
    "InMemoryCatalog",
    "InMemoryTransactionLog",
]
