"""
FastAPI dependencies for dependency injection.

This module provides singleton instances of the record store, blacklist,
short code strategy and templates that are injected into services and routes.
Tests override these through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from fastapi.templating import Jinja2Templates

from dotlink_app.config import settings
from dotlink_app.services.blacklist import BlacklistFilter
from dotlink_app.services.short_code_strategies import (
    ShortCodeStrategy,
    ShortCodeStrategyType,
    RandomShortCodeStrategy,
    Base62ShortCodeStrategy
)
from dotlink_app.services.url_service import URLService
from dotlink_app.storage.factory import RecordStoreFactory, RecordStoreBackend
from dotlink_app.storage.strategies import RecordStoreStrategy


@lru_cache()
def get_record_store() -> RecordStoreStrategy:
    """
    Get record store instance (singleton).

    Factory gets config from settings internally.
    """
    backend = RecordStoreBackend(settings.record_store_backend)
    return RecordStoreFactory.create(backend)


@lru_cache()
def get_blacklist() -> BlacklistFilter:
    return BlacklistFilter(settings.blacklist_file_path)


@lru_cache()
def get_short_code_strategy() -> ShortCodeStrategy:
    """
    Get the configured short code strategy (singleton).

    Raises:
        ValueError: if settings.short_code_strategy names no known strategy
    """
    strategy_type = ShortCodeStrategyType(settings.short_code_strategy)

    if strategy_type == ShortCodeStrategyType.BASE62:
        return Base62ShortCodeStrategy(
            salt=settings.short_code_salt,
            max_length=settings.short_code_length
        )

    return RandomShortCodeStrategy(
        length=settings.short_code_length,
        max_retries=settings.max_retries
    )


@lru_cache()
def get_templates() -> Jinja2Templates:
    return Jinja2Templates(directory=settings.templates_dir)


def get_url_service(
    store: RecordStoreStrategy = Depends(get_record_store),
    blacklist: BlacklistFilter = Depends(get_blacklist),
    short_code_strategy: ShortCodeStrategy = Depends(get_short_code_strategy)
) -> URLService:
    """
    Get URLService with all dependencies injected.

    Controller depends on service; service depends on storage, blacklist and strategy.
    """
    return URLService(
        store=store,
        blacklist=blacklist,
        short_code_strategy=short_code_strategy,
        base_url=settings.base_url
    )


def clear_cached_dependencies():
    """Drop every cached singleton so the next request rebuilds them from settings (for testing)"""
    get_record_store.cache_clear()
    get_blacklist.cache_clear()
    get_short_code_strategy.cache_clear()
    get_templates.cache_clear()
    RecordStoreFactory.clear_instance()
