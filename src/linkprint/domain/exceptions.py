"""Custom exceptions for linkprint."""


class LinkprintError(Exception):
    """Base exception for linkprint errors."""

    pass


class UnknownAlgorithmError(LinkprintError):
    """Raised when a hash type label does not name a supported algorithm."""

    def __init__(self, label: object) -> None:
        self.label = label
        super().__init__(f"Unknown hash algorithm: {label!r}")


class InvalidHashError(LinkprintError):
    """Raised when a digest or its type label cannot form a valid hash.

    Covers wrong digest length, non-hexadecimal characters, non-text input
    and unresolvable algorithm labels.
    """

    pass


class InvalidHashCollectionError(LinkprintError):
    """Raised when a hash collection is missing or has a malformed full hash,
    or when a serialized collection holds a malformed partial hash.
    """

    pass


class InvalidURIError(LinkprintError):
    """Raised when text cannot be parsed or resolved into an absolute URI."""

    pass


class UnsupportedURLError(LinkprintError):
    """Raised when a URL cannot be used as a canonical download URL.

    This typically means the scheme is not one of http, https, ftp or data.
    """

    def __init__(self, message: str, *, url: str | None = None) -> None:
        self.url = url
        super().__init__(message)
