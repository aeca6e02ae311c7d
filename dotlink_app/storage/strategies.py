"""
Record store strategies using Strategy Pattern.

Every backend keeps the same whole-collection contract:
- load_all() returns every mapping in insertion order
- save_all() replaces the stored collection with the one given

Backends:
- JSONFileRecordStore: flat ``urls.json`` file (default)
- SQLRecordStore: SQLAlchemy table, one transaction per save
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from loguru import logger
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.exc import SQLAlchemyError

from dotlink_app.database.connection import Base, create_db_engine, create_session_factory
from dotlink_app.models.url import URLMapping, URLRecord
from dotlink_app.services.exceptions import StorageError


_mapping_list = TypeAdapter(List[URLMapping])


class RecordStoreStrategy(ABC):
    """
    Abstract base class for record stores.

    The store owns the whole mapping collection. There is no partial read
    or write: callers load everything, change it and save everything.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Create an empty collection if none exists yet (called once at startup)."""
        pass

    @abstractmethod
    def load_all(self) -> List[URLMapping]:
        """
        Load every mapping.

        Raises:
            StorageError: if the backing storage is missing or unreadable
        """
        pass

    @abstractmethod
    def save_all(self, mappings: List[URLMapping]) -> None:
        """
        Overwrite the stored collection.

        Raises:
            StorageError: if the backing storage cannot be written
        """
        pass


class JSONFileRecordStore(RecordStoreStrategy):
    """
    Flat JSON file implementation.

    The file holds a JSON array of ``{"originalUrl", "shortUrl"}`` objects,
    indented for diffability. Writes go to a temporary file first and are
    renamed over the target, so readers never see a half-written file.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def initialize(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not create {self.path}: {e}") from e
        logger.info("Created empty record file {}", self.path)

    def load_all(self) -> List[URLMapping]:
        try:
            data = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            return _mapping_list.validate_json(data)
        except ValidationError as e:
            raise StorageError(f"Malformed record file {self.path}: {e}") from e

    def save_all(self, mappings: List[URLMapping]) -> None:
        payload = json.dumps(
            [m.model_dump(by_alias=True) for m in mappings],
            indent=2,
        )
        directory = self.path.parent
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e


class SQLRecordStore(RecordStoreStrategy):
    """
    SQLAlchemy implementation (SQLite by default).

    save_all() replaces the table contents inside a single transaction, so a
    failed save leaves the previous collection intact.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = create_db_engine(database_url)
        self.session_factory = create_session_factory(self.engine)

    def initialize(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not initialize {self.database_url}: {e}") from e
        logger.info("Record table ready at {}", self.database_url)

    def load_all(self) -> List[URLMapping]:
        try:
            with self.session_factory() as session:
                rows = session.query(URLRecord).order_by(URLRecord.id).all()
                return [
                    URLMapping(original_url=row.original_url, short_url=row.short_url)
                    for row in rows
                ]
        except SQLAlchemyError as e:
            raise StorageError(f"Could not read records: {e}") from e

    def save_all(self, mappings: List[URLMapping]) -> None:
        try:
            with self.session_factory() as session, session.begin():
                session.query(URLRecord).delete()
                session.add_all([
                    URLRecord(id=position, original_url=m.original_url, short_url=m.short_url)
                    for position, m in enumerate(mappings, start=1)
                ])
        except SQLAlchemyError as e:
            raise StorageError(f"Could not write records: {e}") from e
