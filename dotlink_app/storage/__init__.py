"""
Record storage module.

Strategy Pattern for the mapping collection: a flat JSON file by default,
or a SQLAlchemy table when a transactional store is wanted.
"""

from .strategies import RecordStoreStrategy, JSONFileRecordStore, SQLRecordStore
from .factory import RecordStoreFactory, RecordStoreBackend

__all__ = [
    "RecordStoreStrategy",
    "JSONFileRecordStore",
    "SQLRecordStore",
    "RecordStoreFactory",
    "RecordStoreBackend",
]
