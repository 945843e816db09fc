"""Absolute URI values and relative resolution."""

import codecs
import re
from dataclasses import dataclass
from typing import Final
from urllib.parse import SplitResult, quote, urljoin, urlsplit, urlunsplit

from ..domain.exceptions import InvalidURIError

DEFAULT_CHARSET: Final = "UTF-8"

# Schemes a download can be fetched from
SUPPORTED_SCHEMES: Final = ("http", "https", "ftp", "data")

# Characters left untouched when percent-encoding URL text; "%" keeps
# existing escapes intact
_SAFE_CHARS: Final = "!#$%&'()*+,-./:;=?@[]_~"
_SCHEME_PATTERN: Final = re.compile(r"^[a-z][a-z0-9+.-]*$")
_STRIPPED_CHARS: Final = re.compile(r"[\t\r\n]")

# Schemes that always carry an authority and a path rooted at "/"
_AUTHORITY_SCHEMES: Final = frozenset({"http", "https", "ftp"})


@dataclass(frozen=True)
class Uri:
    """An absolute URI together with the charset of the page it came from.

    Build instances with ``resolve_uri``; the constructor trusts ``spec``.
    """

    spec: str
    origin_charset: str = DEFAULT_CHARSET

    @property
    def parts(self) -> SplitResult:
        return urlsplit(self.spec)

    @property
    def scheme(self) -> str:
        return self.parts.scheme

    @property
    def fragment(self) -> str:
        return self.parts.fragment

    def without_fragment(self) -> "Uri":
        """Return a copy of this URI with the fragment cleared."""
        parts = self.parts
        if not parts.fragment and "#" not in self.spec:
            return self
        spec = urlunsplit(parts._replace(fragment=""))
        return Uri(spec=spec, origin_charset=self.origin_charset)

    def __str__(self) -> str:
        return self.spec


def _normalize_netloc(netloc: str) -> str:
    userinfo, separator, hostport = netloc.rpartition("@")
    return f"{userinfo}{separator}{hostport.lower()}"


def resolve_uri(
    text: str,
    charset: str | None = None,
    base: Uri | None = None,
) -> Uri:
    """Parse ``text`` into an absolute URI, relative to ``base`` if given.

    Non-ASCII characters are percent-encoded with ``charset`` (falling back to
    the base's origin charset, then UTF-8), which also becomes the result's
    origin charset.

    Raises:
        InvalidURIError: If the text is not a string, cannot be encoded with
            the charset, or does not resolve to an absolute URI.
    """
    if not isinstance(text, str):
        raise InvalidURIError(f"URI must be a string, got {type(text).__name__}")
    charset = charset or (base.origin_charset if base else DEFAULT_CHARSET)

    cleaned = _STRIPPED_CHARS.sub("", text.strip())
    if not cleaned:
        raise InvalidURIError("URI is empty")

    try:
        codecs.lookup(charset)
        encoded = quote(cleaned, safe=_SAFE_CHARS, encoding=charset, errors="strict")
    except LookupError as exc:
        raise InvalidURIError(f"Unknown charset: {charset}") from exc
    except UnicodeEncodeError as exc:
        raise InvalidURIError(f"Cannot encode {text!r} as {charset}") from exc

    try:
        if base is not None:
            encoded = urljoin(base.spec, encoded)
        parts = urlsplit(encoded)
        # Accessing the port validates it
        _ = parts.port
    except ValueError as exc:
        raise InvalidURIError(f"Malformed URI: {text!r}") from exc

    if not _SCHEME_PATTERN.fullmatch(parts.scheme):
        raise InvalidURIError(f"Not an absolute URI: {text!r}")

    netloc = _normalize_netloc(parts.netloc)
    path = parts.path
    if parts.scheme in _AUTHORITY_SCHEMES:
        if not parts.hostname:
            raise InvalidURIError(f"Missing host in URI: {text!r}")
        path = path or "/"

    spec = urlunsplit((parts.scheme, netloc, path, parts.query, parts.fragment))
    return Uri(spec=spec, origin_charset=charset)
