"""Canonical download URLs."""

import typing as t
from collections.abc import Mapping
from functools import cached_property

from ..domain.exceptions import InvalidURIError, UnsupportedURLError
from ..domain.hashes import Hash
from ..infrastructure.logging import get_logger
from .display import DecodeResult, Decoder, decode_for_display
from .fingerprint import extract_hash, extract_metalink
from .uri import SUPPORTED_SCHEMES, Uri, resolve_uri

if t.TYPE_CHECKING:
    import loguru

DEFAULT_PREFERENCE = 100


class CanonicalURL:
    """A download URL normalized into a stable identity key.

    The fragment never takes part in a URL's identity. On construction any
    link fingerprint embedded there is kept as ``fingerprint``, any metalink
    reference as ``metalink``, and the fragment is cleared.

    ``fast=True`` skips the scheme check and fragment handling; use it only
    for URLs built internally that are known to be well-formed and
    fragment-free.

    Two instances are equal when their ``spec`` is equal.
    """

    def __init__(
        self,
        url: Uri | str,
        preference: float | None = DEFAULT_PREFERENCE,
        *,
        fast: bool = False,
        charset: str | None = None,
        decoder: Decoder | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """
        Args:
            url: Parsed URI, or URL text parsed with ``charset``
            preference: Mirror preference; falsy values mean the default
            fast: Trust the URL as-is
            charset: Origin charset for URL text (ignored for a ``Uri``)
            decoder: Charset-aware decoder used to build ``usable``
            logger: Logger for decoding and extraction diagnostics

        Raises:
            UnsupportedURLError: If the text is not a URL, or the scheme is
                not supported and ``fast`` is False.
        """
        self._logger = logger or get_logger(__name__)
        self._decoder = decoder
        self._preference = preference or DEFAULT_PREFERENCE

        if isinstance(url, str):
            try:
                url = resolve_uri(url, charset)
            except InvalidURIError as exc:
                raise UnsupportedURLError(str(exc), url=url) from exc
        elif not isinstance(url, Uri):
            raise UnsupportedURLError(
                f"Expected a URI or URL text, got {type(url).__name__}"
            )

        if not fast and url.scheme not in SUPPORTED_SCHEMES:
            raise UnsupportedURLError("Not a supported URL", url=url.spec)

        self._fingerprint: Hash | None = None
        self._metalink: Uri | None = None
        if not fast:
            self._fingerprint = extract_hash(url, self._logger)
            self._metalink = extract_metalink(url, self._logger)
            url = url.without_fragment()
        self._uri = url

    @classmethod
    def load(cls, record: t.Any, **kwargs: t.Any) -> "CanonicalURL":
        """Rebuild a URL from its ``{"url", "charset", "preference"}`` record.

        Raises:
            UnsupportedURLError: If the record is malformed or holds an
                unsupported URL.
        """
        if not isinstance(record, Mapping) or not isinstance(record.get("url"), str):
            raise UnsupportedURLError("URL record must be a mapping with a 'url'")
        preference = record.get("preference")
        if preference is not None and (
            not isinstance(preference, (int, float)) or isinstance(preference, bool)
        ):
            raise UnsupportedURLError(
                f"Preference must be a number, got {preference!r}",
                url=record["url"],
            )
        return cls(
            record["url"],
            preference,
            charset=record.get("charset") or None,
            **kwargs,
        )

    @property
    def uri(self) -> Uri:
        return self._uri

    @property
    def fingerprint(self) -> Hash | None:
        """Hash embedded in the original fragment, if any."""
        return self._fingerprint

    @property
    def metalink(self) -> Uri | None:
        """Metalink descriptor referenced by the original fragment, if any."""
        return self._metalink

    @property
    def preference(self) -> float:
        return self._preference

    @property
    def url_charset(self) -> str:
        return self._uri.origin_charset

    @cached_property
    def spec(self) -> str:
        """Absolute serialized form of the URL."""
        return self._uri.spec

    @cached_property
    def display(self) -> DecodeResult:
        """Decoded display text and the method that produced it."""
        return decode_for_display(
            self.spec,
            self.url_charset,
            decoder=self._decoder,
            logger=self._logger,
        )

    @property
    def usable(self) -> str:
        """Human-readable form of ``spec``; never raises."""
        return self.display.text

    def to_record(self) -> dict[str, t.Any]:
        return {
            "url": self.spec,
            "charset": self.url_charset,
            "preference": self.preference,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalURL):
            return NotImplemented
        return self.spec == other.spec

    def __hash__(self) -> int:
        return hash(self.spec)

    def __str__(self) -> str:
        return self.usable

    def __repr__(self) -> str:
        return f"CanonicalURL({self.spec!r}, preference={self.preference!r})"
