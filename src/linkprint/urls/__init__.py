"""URL identity - parsing, link fingerprints and canonical URLs."""

from .canonical import DEFAULT_PREFERENCE, CanonicalURL
from .display import (
    DecodeMethod,
    DecodeResult,
    Decoder,
    charset_decode,
    decode_for_display,
    percent_decode,
)
from .fingerprint import extract_hash, extract_metalink
from .uri import DEFAULT_CHARSET, SUPPORTED_SCHEMES, Uri, resolve_uri

__all__ = [
    # URIs
    "Uri",
    "resolve_uri",
    "DEFAULT_CHARSET",
    "SUPPORTED_SCHEMES",
    # Canonical URLs
    "CanonicalURL",
    "DEFAULT_PREFERENCE",
    # Fingerprints
    "extract_hash",
    "extract_metalink",
    # Display decoding
    "Decoder",
    "DecodeMethod",
    "DecodeResult",
    "charset_decode",
    "decode_for_display",
    "percent_decode",
]
