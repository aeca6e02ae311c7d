import threading
from dataclasses import dataclass

from loguru import logger

from dotlink_app.models.url import URLMapping
from dotlink_app.services.blacklist import BlacklistFilter
from dotlink_app.services.exceptions import BlacklistedURLError, URLNotFoundError
from dotlink_app.services.normalizer import normalize_url
from dotlink_app.services.short_code_strategies import ShortCodeStrategy
from dotlink_app.storage.strategies import RecordStoreStrategy


# Serialises load-check-append-save across request threads in this process.
_write_lock = threading.Lock()


@dataclass(frozen=True)
class ShortenResult:
    original_url: str
    short_code: str
    short_url: str
    created: bool


class URLService:
    """
    URL Service with dependency injection for storage, blacklist and code generation.

    - Record store, blacklist and strategy are injected (not created internally)
    - Easy to test (inject a fixed-code strategy or a temp-dir store)
    - Flexible (swap the JSON file for SQL without changing this class)
    """

    def __init__(
        self,
        store: RecordStoreStrategy,
        blacklist: BlacklistFilter,
        short_code_strategy: ShortCodeStrategy,
        base_url: str
    ):
        self.store = store
        self.blacklist = blacklist
        self.short_code_strategy = short_code_strategy
        self.base_url = base_url.rstrip("/")

    def build_short_url(self, short_code: str) -> str:
        return f"{self.base_url}/r/{short_code}"

    def shorten(self, raw_url: str) -> ShortenResult:
        """Shorten a URL, reusing the existing code if it was shortened before.

        Process:
        1. Normalize the scheme
        2. Reject blacklisted URLs before touching the record store
        3. Return the existing mapping for this URL, if any
        4. Otherwise generate a code, append the mapping and save everything

        Raises:
            BlacklistedURLError: if the normalized URL contains a blacklisted term
            StorageError: if the record store cannot be read or written
            ShortCodeGenerationError: if no usable code could be generated
        """
        original_url = normalize_url(raw_url)

        if self.blacklist.is_blacklisted(original_url):
            logger.warning("Rejected blacklisted URL {}", original_url)
            raise BlacklistedURLError(original_url)

        with _write_lock:
            mappings = self.store.load_all()

            existing = next(
                (m for m in mappings if m.original_url == original_url), None
            )
            if existing:
                return ShortenResult(
                    original_url=original_url,
                    short_code=existing.short_url,
                    short_url=self.build_short_url(existing.short_url),
                    created=False
                )

            short_code = self.short_code_strategy.generate(
                len(mappings) + 1, {m.short_url for m in mappings}
            )
            mappings.append(URLMapping(original_url=original_url, short_url=short_code))
            self.store.save_all(mappings)

        logger.info("Shortened {} -> {}", original_url, short_code)
        return ShortenResult(
            original_url=original_url,
            short_code=short_code,
            short_url=self.build_short_url(short_code),
            created=True
        )

    def resolve(self, short_code: str) -> str:
        """
        Get the original URL for a short code.

        Raises:
            URLNotFoundError: if no mapping has this code
            StorageError: if the record store cannot be read
        """
        for mapping in self.store.load_all():
            if mapping.short_url == short_code:
                return mapping.original_url

        raise URLNotFoundError(short_code)
