"""
Data models for dotlink.

``URLMapping`` is the record every store hands back; ``URLRecord`` is only
used by the SQL-backed store.
"""

from .url import URLMapping, URLRecord

__all__ = ["URLMapping", "URLRecord"]
