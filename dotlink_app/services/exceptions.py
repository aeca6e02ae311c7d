"""Exceptions for the dotlink service layer.

Route handlers translate these into HTTP responses; nothing below the
service layer knows about HTTP.
"""


BLACKLISTED_MESSAGE = "URL contains blacklisted term/phrase"


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class BlacklistedURLError(ServiceError):
    """The URL contains a blacklisted term."""

    def __init__(self, url: str):
        super().__init__(BLACKLISTED_MESSAGE)
        self.url = url


class URLNotFoundError(ServiceError):
    """No mapping exists for the given short code."""

    def __init__(self, short_code: str):
        super().__init__(f"Short URL '{short_code}' not found")
        self.short_code = short_code


class StorageError(ServiceError):
    """A backing file or database could not be read or written."""
    pass


class ShortCodeGenerationError(ServiceError):
    """Failed to generate a usable short code."""
    pass
