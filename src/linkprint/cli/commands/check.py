"""Checksum commands."""

import typer

from ...domain.exceptions import InvalidHashError
from ...domain.hash_algorithms import WANT_DIGEST
from ...domain.hashes import Hash
from ..output.display import display_error, display_hash


def check(
    digest: str = typer.Argument(..., help="Checksum in hexadecimal form"),
    hash_type: str = typer.Option(
        ..., "--type", "-t", help="Hash algorithm, e.g. sha256 or SHA-1"
    ),
) -> None:
    """Validate a checksum against its algorithm.

    Examples:
        linkprint check d41d8cd98f00b204e9800998ecf8427e --type md5
    """
    try:
        parsed = Hash.from_text(digest, hash_type)
    except InvalidHashError as e:
        display_error("Invalid checksum", e)
        raise typer.Exit(code=1)

    display_hash(parsed)


def want_digest() -> None:
    """Print the Want-Digest header value offered to servers."""
    typer.echo(WANT_DIGEST)
