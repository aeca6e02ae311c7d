import re


_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def normalize_url(url: str) -> str:
    """Prepend ``https://`` unless the URL already starts with http:// or https://.

    Only the prefix is checked; the rest of the string is not validated.
    """
    if not _SCHEME_RE.match(url):
        return f"https://{url}"
    return url
