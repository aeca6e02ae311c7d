from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import Column, Integer, String, Text

from dotlink_app.database.connection import Base


class URLMapping(BaseModel):
    """One shortening relationship; never mutated once created.

    Serialized with the camelCase names used in ``urls.json``.
    """

    original_url: str = Field(..., alias="originalUrl")
    short_url: str = Field(..., alias="shortUrl")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class URLRecord(Base):
    """Table row backing ``SQLRecordStore``; ``id`` keeps insertion order."""
    __tablename__ = "url_mappings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    original_url = Column(Text, nullable=False)
    short_url = Column(String(64), unique=True, nullable=False, index=True)
