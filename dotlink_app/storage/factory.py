"""
Factory for creating record store instances.
Simple, clean factory with singleton caching.
"""

from enum import Enum

from loguru import logger

from .strategies import RecordStoreStrategy, JSONFileRecordStore, SQLRecordStore
from dotlink_app.config import settings


class RecordStoreBackend(Enum):
    """Available record store backends"""
    JSON = "json"
    SQL = "sql"


class RecordStoreFactory:
    """
    Simple factory for creating record store instances.

    Gets configuration from settings (not passed as parameters).
    """

    _instance: RecordStoreStrategy = None  # Single cached instance

    @classmethod
    def create(cls, backend: RecordStoreBackend) -> RecordStoreStrategy:
        """
        Create or return cached record store instance.

        Args:
            backend: Type of store backend (from enum)

        Returns:
            Singleton record store instance
        """
        if cls._instance is not None:
            return cls._instance

        if backend == RecordStoreBackend.JSON:
            cls._instance = JSONFileRecordStore(path=settings.urls_file_path)
            logger.info("JSON record store initialized ({})", settings.urls_file_path)

        elif backend == RecordStoreBackend.SQL:
            cls._instance = SQLRecordStore(database_url=settings.database_url)
            logger.info("SQL record store initialized ({})", settings.database_url)

        else:
            raise ValueError(f"Unknown record store backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
