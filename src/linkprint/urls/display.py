"""Decoding URLs into human-readable display text."""

import codecs
import enum
import typing as t
from dataclasses import dataclass
from urllib.parse import unquote

from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

Decoder = t.Callable[[str, str], str]


class DecodeMethod(enum.Enum):
    """How display text was obtained, from best to worst fidelity."""

    CHARSET = "charset"  # Decoded with the URL's origin charset
    PERCENT = "percent"  # Plain UTF-8 percent-decoding
    RAW = "raw"  # Undecoded text, display is degraded

    @property
    def degraded(self) -> bool:
        return self is DecodeMethod.RAW


@dataclass(frozen=True)
class DecodeResult:
    text: str
    method: DecodeMethod


def charset_decode(text: str, charset: str) -> str:
    """Unescape percent-encoded ``text`` using ``charset``.

    Raises:
        ValueError: If no charset is given or the bytes are invalid for it.
        LookupError: If the charset is unknown.
    """
    if not charset:
        raise ValueError("No charset to decode with")
    codecs.lookup(charset)
    return unquote(text, encoding=charset, errors="strict")


def percent_decode(text: str) -> str:
    """Strict UTF-8 percent-decoding.

    Raises:
        UnicodeDecodeError: If the escapes do not form valid UTF-8.
    """
    return unquote(text, encoding="utf-8", errors="strict")


def decode_for_display(
    text: str,
    charset: str,
    decoder: Decoder | None = None,
    logger: t.Optional["loguru.Logger"] = None,
) -> DecodeResult:
    """Decode URL text for display, never raising.

    Tries ``decoder`` (``charset_decode`` by default) with the origin charset,
    then strict UTF-8 percent-decoding, and finally gives back ``text``
    unchanged, logging a warning for that last case.
    """
    decoder = decoder or charset_decode
    logger = logger or get_logger(__name__)

    try:
        return DecodeResult(decoder(text, charset), DecodeMethod.CHARSET)
    except Exception as charset_exc:
        logger.debug(
            "Charset decoding failed, trying percent-decoding",
            charset=charset,
            error=str(charset_exc),
        )
        try:
            return DecodeResult(percent_decode(text), DecodeMethod.PERCENT)
        except ValueError as exc:
            logger.warning(
                "Failed to decode URL for display",
                url=text,
                charset=charset,
                error=str(exc),
            )
    return DecodeResult(text, DecodeMethod.RAW)
