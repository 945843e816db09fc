"""Link fingerprints and metalink references embedded in URL fragments.

Two fragment micro-formats are recognized::

    http://example.com/file.iso#hash(sha256:<hex digest>)
    http://example.com/file.iso#!metalink4!file.iso.meta4

Both extractors degrade gracefully: a fragment that does not parse means
there is nothing to extract, never an error.
"""

import re
import typing as t
from typing import Final

from ..domain.exceptions import InvalidHashError, InvalidURIError
from ..domain.hashes import Hash
from ..infrastructure.logging import get_logger
from .uri import SUPPORTED_SCHEMES, Uri, resolve_uri

if t.TYPE_CHECKING:
    import loguru

_LINK_FINGERPRINT: Final = re.compile(
    r"^hash\((md5|sha(?:-?(?:1|256|384|512))?):([\da-f]+)\)$", re.IGNORECASE
)
_METALINK_REFERENCE: Final = re.compile(r"^!meta(?:link)?(?:3|4)!(.+)$")


def _as_uri(url: Uri | str) -> Uri | None:
    if isinstance(url, Uri):
        return url
    if isinstance(url, str):
        try:
            return resolve_uri(url)
        except InvalidURIError:
            return None
    return None


def extract_hash(
    url: Uri | str,
    logger: t.Optional["loguru.Logger"] = None,
) -> Hash | None:
    """Get the link-fingerprint hash from a URL's fragment.

    Returns:
        The embedded hash, or None if there is none or it is malformed.
    """
    uri = _as_uri(url)
    if uri is None:
        return None
    match = _LINK_FINGERPRINT.match(uri.fragment)
    if not match:
        return None

    algorithm, digest = match.group(1), match.group(2)
    try:
        return Hash.from_text(digest, algorithm)
    except InvalidHashError as exc:
        (logger or get_logger(__name__)).debug(
            "Ignoring malformed link fingerprint",
            url=uri.spec,
            error=str(exc),
        )
        return None


def extract_metalink(
    url: Uri | str,
    logger: t.Optional["loguru.Logger"] = None,
) -> Uri | None:
    """Get the metalink descriptor a URL's fragment points to.

    The target is resolved as written, relative to the URL and with its
    origin charset. Existing escapes are kept, so an encoded "/" or "#" stays
    part of the path. The target must use a supported scheme and comes back
    without a fragment.

    Returns:
        The resolved metalink URI, or None if there is none or it is invalid.
    """
    uri = _as_uri(url)
    if uri is None:
        return None
    match = _METALINK_REFERENCE.match(uri.fragment)
    if not match:
        return None

    try:
        resolved = resolve_uri(match.group(1), uri.origin_charset, base=uri)
    except InvalidURIError as exc:
        (logger or get_logger(__name__)).debug(
            "Ignoring invalid metalink reference",
            url=uri.spec,
            error=str(exc),
        )
        return None

    if resolved.scheme not in SUPPORTED_SCHEMES:
        (logger or get_logger(__name__)).debug(
            "Ignoring metalink reference with unsupported scheme",
            url=uri.spec,
            scheme=resolved.scheme,
        )
        return None
    return resolved.without_fragment()
