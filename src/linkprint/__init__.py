"""Link fingerprints, checksum collections and canonical download URLs."""

from .domain import (
    WANT_DIGEST,
    Hash,
    HashAlgorithm,
    HashCollection,
    InvalidHashCollectionError,
    InvalidHashError,
    LinkprintError,
    UnknownAlgorithmError,
    UnsupportedURLError,
    resolve_algorithm,
)
from .urls import CanonicalURL, Uri, extract_hash, extract_metalink, resolve_uri

__all__ = [
    "CanonicalURL",
    "Hash",
    "HashAlgorithm",
    "HashCollection",
    "Uri",
    "WANT_DIGEST",
    "extract_hash",
    "extract_metalink",
    "resolve_algorithm",
    "resolve_uri",
    "InvalidHashCollectionError",
    "InvalidHashError",
    "LinkprintError",
    "UnknownAlgorithmError",
    "UnsupportedURLError",
]
