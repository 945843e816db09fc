"""Domain layer - checksums, numbering and save paths."""

from .exceptions import (
    InvalidHashCollectionError,
    InvalidHashError,
    InvalidURIError,
    LinkprintError,
    UnknownAlgorithmError,
    UnsupportedURLError,
)
from .hash_algorithms import (
    ALGORITHM_ALIASES,
    WANT_DIGEST,
    HashAlgorithm,
    preferred_order,
    resolve_algorithm,
    want_digest_string,
)
from .hash_collection import HashCollection
from .hashes import Hash
from .save_path import compose_save_dir
from .series import CounterStore, InMemoryCounterStore, SeriesCounter

__all__ = [
    # Hash Models
    "HashAlgorithm",
    "ALGORITHM_ALIASES",
    "WANT_DIGEST",
    "resolve_algorithm",
    "preferred_order",
    "want_digest_string",
    "Hash",
    "HashCollection",
    # Series
    "CounterStore",
    "InMemoryCounterStore",
    "SeriesCounter",
    # Paths
    "compose_save_dir",
    # Exceptions
    "LinkprintError",
    "UnknownAlgorithmError",
    "InvalidHashError",
    "InvalidHashCollectionError",
    "InvalidURIError",
    "UnsupportedURLError",
]
