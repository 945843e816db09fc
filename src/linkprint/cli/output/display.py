"""Display functions for CLI."""

import typer

from ...domain.hashes import Hash
from ...urls.canonical import CanonicalURL


def display_error(message: str, error: Exception) -> None:
    """Display error message."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, err=True)
    typer.secho(f"  Error: {error}", fg=typer.colors.RED, err=True)


def display_hash(parsed: Hash) -> None:
    """Display a validated checksum."""
    typer.secho(f"✓ {parsed.algorithm}: {parsed.digest}", fg=typer.colors.GREEN)


def display_canonical_url(url: CanonicalURL) -> None:
    """Display a canonical URL and the metadata taken from its fragment."""
    typer.echo(f"URL:         {url.spec}")
    typer.echo(f"Display:     {url.usable}")
    typer.echo(f"Charset:     {url.url_charset}")
    if url.display.method.degraded:
        typer.secho(
            "  (display decoding failed, showing raw URL)", fg=typer.colors.YELLOW
        )

    if url.fingerprint:
        typer.secho(
            f"Fingerprint: {url.fingerprint.algorithm} {url.fingerprint.digest}",
            fg=typer.colors.GREEN,
        )
    else:
        typer.echo("Fingerprint: none")

    if url.metalink:
        typer.echo(f"Metalink:    {url.metalink.spec}")
