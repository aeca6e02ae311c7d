"""
Blacklist filter for submitted URLs.

The blacklist is a JSON array of strings curated outside the service. It is
re-read on every check so edits take effect without a restart.
"""

from pathlib import Path
from typing import List, Set

from pydantic import TypeAdapter, ValidationError

from dotlink_app.services.exceptions import StorageError


_term_list = TypeAdapter(List[str])


class BlacklistFilter:
    """Case-insensitive substring filter backed by a JSON file."""

    def __init__(self, path: str):
        self.path = Path(path)

    def load_terms(self) -> Set[str]:
        """
        Read the blacklist file and lower-case every term.

        A missing file means an empty blacklist. Empty strings are skipped,
        since an empty term would match every URL; whitespace terms are kept.

        Raises:
            StorageError: if the file exists but cannot be read or parsed
        """
        if not self.path.exists():
            return set()

        try:
            data = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            terms = _term_list.validate_json(data)
        except ValidationError as e:
            raise StorageError(f"Malformed blacklist file {self.path}: {e}") from e

        return {term.lower() for term in terms if term}

    def is_blacklisted(self, url: str) -> bool:
        lowered = url.lower()
        return any(term in lowered for term in self.load_terms())
