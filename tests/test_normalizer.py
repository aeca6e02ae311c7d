import pytest

from dotlink_app.services.normalizer import normalize_url


class TestNormalizeURL:
    """Test scheme normalization"""

    @pytest.mark.parametrize("url", [
        "example.com",
        "example.com/deal",
        "www.python.org/downloads?os=linux",
        "ftp://files.example.com",
    ])
    def test_prepends_https_when_scheme_missing(self, url):
        assert normalize_url(url) == f"https://{url}"

    @pytest.mark.parametrize("url", [
        "http://example.com",
        "https://example.com/deal",
        "HTTP://EXAMPLE.COM",
        "Https://Example.com/Path",
    ])
    def test_keeps_existing_http_scheme(self, url):
        assert normalize_url(url) == url

    def test_scheme_must_be_a_prefix(self):
        """A scheme appearing later in the string does not count"""
        url = "example.com/?next=https://other.example"
        assert normalize_url(url) == f"https://{url}"

    def test_does_not_validate(self):
        """Anything is normalized structurally, even if it is not a real URL"""
        assert normalize_url("not a url") == "https://not a url"
