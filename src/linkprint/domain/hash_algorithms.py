"""Supported hash algorithms and the digest negotiation string."""

import enum
import re
from types import MappingProxyType
from typing import Final, Mapping

from .exceptions import UnknownAlgorithmError

_LABEL_NOISE: Final = re.compile(r"[\s-]+")


class HashAlgorithm(enum.StrEnum):
    """Supported checksum algorithms, valued by canonical name."""

    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @property
    def hex_length(self) -> int:
        """Expected hexadecimal string length for the algorithm."""
        return _HEX_LENGTHS[self]

    @property
    def preference_weight(self) -> float:
        """Relative quality used when negotiating digests with servers."""
        return _PREFERENCE_WEIGHTS[self]


_HEX_LENGTHS: Final[Mapping[HashAlgorithm, int]] = MappingProxyType(
    {
        HashAlgorithm.MD5: 32,
        HashAlgorithm.SHA1: 40,
        HashAlgorithm.SHA256: 64,
        HashAlgorithm.SHA384: 96,
        HashAlgorithm.SHA512: 128,
    }
)

_PREFERENCE_WEIGHTS: Final[Mapping[HashAlgorithm, float]] = MappingProxyType(
    {
        HashAlgorithm.MD5: 0.3,
        HashAlgorithm.SHA1: 0.4,
        HashAlgorithm.SHA256: 1.0,
        HashAlgorithm.SHA384: 0.8,
        HashAlgorithm.SHA512: 1.0,
    }
)

# Keys are normalized labels: upper case, no whitespace, no hyphens
ALGORITHM_ALIASES: Final[Mapping[str, HashAlgorithm]] = MappingProxyType(
    {
        "MD5": HashAlgorithm.MD5,
        "SHA": HashAlgorithm.SHA1,
        "SHA1": HashAlgorithm.SHA1,
        "SHA256": HashAlgorithm.SHA256,
        "SHA384": HashAlgorithm.SHA384,
        "SHA512": HashAlgorithm.SHA512,
    }
)

# SHA384 is accepted for validation but never offered to servers
_NEGOTIATION_TOKENS: Final = ("MD5", "SHA", "SHA1", "SHA256", "SHA512")


def normalize_label(label: str) -> str:
    """Upper-case a type label and drop whitespace and hyphens.

    Examples:
        >>> normalize_label("sha-256")
        'SHA256'
        >>> normalize_label(" Sha 1 ")
        'SHA1'
    """
    return _LABEL_NOISE.sub("", label.upper())


def resolve_algorithm(label: str) -> HashAlgorithm:
    """Resolve a free-form hash type label to a supported algorithm.

    Raises:
        UnknownAlgorithmError: If the label is not a string or matches no alias.
    """
    if not isinstance(label, str):
        raise UnknownAlgorithmError(label)
    try:
        return ALGORITHM_ALIASES[normalize_label(label)]
    except KeyError as exc:
        raise UnknownAlgorithmError(label) from exc


def preferred_order() -> tuple[tuple[str, float], ...]:
    """Return ``(token, weight)`` pairs in digest negotiation order."""
    return tuple(
        (token, ALGORITHM_ALIASES[token].preference_weight)
        for token in _NEGOTIATION_TOKENS
    )


def want_digest_string() -> str:
    """Render the quality-weighted list sent in a ``Want-Digest`` header.

    Examples:
        >>> want_digest_string()
        'MD5;q=0.3, SHA;q=0.4, SHA1;q=0.4, SHA256;q=1, SHA512;q=1'
    """
    return ", ".join(f"{token};q={weight:g}" for token, weight in preferred_order())


WANT_DIGEST: Final = want_digest_string()
