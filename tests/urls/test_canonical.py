"""Tests for CanonicalURL."""

import pytest

from linkprint.domain.exceptions import UnsupportedURLError
from linkprint.domain.hash_algorithms import HashAlgorithm
from linkprint.domain.hashes import Hash
from linkprint.urls.canonical import CanonicalURL
from linkprint.urls.display import DecodeMethod
from linkprint.urls.uri import Uri, resolve_uri

MD5_DIGEST = "d41d8cd98f00b204e9800998ecf8427e"


class TestCanonicalURLConstruction:
    """Scheme validation and fragment handling."""

    def test_extracts_fingerprint_and_clears_fragment(self):
        url = CanonicalURL(f"http://example.com/x#hash(md5:{MD5_DIGEST})")

        assert url.spec == "http://example.com/x"
        assert url.uri.fragment == ""
        assert url.fingerprint == Hash.from_text(MD5_DIGEST, "md5")
        assert url.fingerprint.algorithm is HashAlgorithm.MD5

    def test_clears_fragment_without_fingerprint(self):
        """Fragments never take part in a URL's identity."""
        url = CanonicalURL("http://example.com/page#section")
        assert url.spec == "http://example.com/page"
        assert url.fingerprint is None

    def test_malformed_fingerprint_is_dropped(self):
        url = CanonicalURL(f"http://example.com/x#hash(md5:{MD5_DIGEST[:-1]})")
        assert url.spec == "http://example.com/x"
        assert url.fingerprint is None

    def test_keeps_metalink_reference(self):
        url = CanonicalURL("http://example.com/dir/f.iso#!metalink4!f.meta4")
        assert url.spec == "http://example.com/dir/f.iso"
        assert url.metalink == Uri("http://example.com/dir/f.meta4")

    @pytest.mark.parametrize(
        "text",
        [
            "http://example.com/f",
            "https://example.com/f",
            "ftp://example.com/f",
            "data:text/plain,hello",
        ],
    )
    def test_supported_schemes(self, text):
        assert CanonicalURL(text).spec == text

    def test_unsupported_scheme(self):
        with pytest.raises(UnsupportedURLError):
            CanonicalURL("gopher://example.com/1")

    def test_unsupported_scheme_fast(self):
        """The fast path trusts the URL as-is."""
        url = CanonicalURL("gopher://example.com/1", fast=True)
        assert url.spec == "gopher://example.com/1"

    def test_fast_skips_fragment_handling(self):
        url = CanonicalURL(f"http://example.com/x#hash(md5:{MD5_DIGEST})", fast=True)
        assert url.fingerprint is None
        assert url.uri.fragment == f"hash(md5:{MD5_DIGEST})"

    @pytest.mark.parametrize("value", ["not a url", "", 42, None])
    def test_rejects_non_urls(self, value):
        with pytest.raises(UnsupportedURLError):
            CanonicalURL(value)

    def test_accepts_parsed_uri(self):
        uri = resolve_uri("http://example.com/%FC", "ISO-8859-1")
        url = CanonicalURL(uri)
        assert url.uri == uri
        assert url.url_charset == "ISO-8859-1"

    def test_charset_for_text(self):
        url = CanonicalURL("http://example.com/ü", charset="ISO-8859-1")
        assert url.spec == "http://example.com/%FC"
        assert url.url_charset == "ISO-8859-1"


class TestCanonicalURLPreference:
    """Mirror preference defaults."""

    def test_default(self):
        assert CanonicalURL("http://example.com/").preference == 100

    @pytest.mark.parametrize("value", [None, 0])
    def test_falsy_falls_back(self, value):
        assert CanonicalURL("http://example.com/", value).preference == 100

    def test_explicit(self):
        assert CanonicalURL("http://example.com/", 42).preference == 42


class TestCanonicalURLDisplay:
    """usable display form."""

    def test_decodes_with_charset(self):
        url = CanonicalURL("http://example.com/%C3%BCber")
        assert url.usable == "http://example.com/über"
        assert str(url) == "http://example.com/über"

    def test_decodes_with_origin_charset(self):
        url = CanonicalURL("http://example.com/ü", charset="ISO-8859-1")
        assert url.usable == "http://example.com/ü"

    def test_usable_never_raises(self, mock_logger):
        """Invalid bytes for the charset degrade to the raw spec."""
        url = CanonicalURL("http://example.com/%FF%FE", logger=mock_logger)

        assert url.usable == "http://example.com/%FF%FE"
        assert url.display.method is DecodeMethod.RAW
        mock_logger.warning.assert_called_once()

    def test_memoized(self, mocker):
        decoder = mocker.Mock(return_value="decoded")
        url = CanonicalURL("http://example.com/a", decoder=decoder)

        assert url.usable == "decoded"
        assert url.usable == "decoded"
        assert url.spec is url.spec
        decoder.assert_called_once_with("http://example.com/a", "UTF-8")


class TestCanonicalURLSerialization:
    """Records, equality and hashing."""

    def test_to_record(self):
        url = CanonicalURL(f"http://example.com/x#hash(md5:{MD5_DIGEST})", 80)
        assert url.to_record() == {
            "url": "http://example.com/x",
            "charset": "UTF-8",
            "preference": 80,
        }

    def test_round_trip(self):
        url = CanonicalURL("http://example.com/ü", 50, charset="ISO-8859-1")
        loaded = CanonicalURL.load(url.to_record())

        assert loaded == url
        assert loaded.to_record() == url.to_record()

    @pytest.mark.parametrize(
        "record",
        [None, {}, {"url": 5}, {"url": "gopher://example.com/"}, {"url": "nope"}],
    )
    def test_load_rejects_malformed(self, record):
        with pytest.raises(UnsupportedURLError):
            CanonicalURL.load(record)

    @pytest.mark.parametrize("preference", ["abc", "80", True, [80], {"q": 1}])
    def test_load_rejects_non_numeric_preference(self, preference):
        record = {"url": "http://example.com/x", "preference": preference}
        with pytest.raises(UnsupportedURLError, match="Preference"):
            CanonicalURL.load(record)

    def test_load_missing_preference_uses_default(self):
        loaded = CanonicalURL.load({"url": "http://example.com/x"})
        assert loaded.preference == 100

    def test_identity_ignores_fragment(self):
        first = CanonicalURL("http://example.com/x#a")
        second = CanonicalURL("http://example.com/x", 10)
        assert first == second
        assert len({first, second}) == 1

    def test_different_urls_differ(self):
        first = CanonicalURL("http://example.com/x")
        assert first != CanonicalURL("http://example.com/y")
