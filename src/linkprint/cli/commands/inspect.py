"""Inspect command implementation."""

import json

import typer

from ...domain.exceptions import UnsupportedURLError
from ...urls.canonical import CanonicalURL
from ..output.display import display_canonical_url, display_error
from ..state import CLIState


def canonicalize(url: str, state: CLIState) -> CanonicalURL:
    """Build a CanonicalURL using the charset and preference from settings.

    Raises:
        typer.Exit: If the URL is not a supported download URL
    """
    try:
        return CanonicalURL(
            url,
            state.settings.default_preference,
            charset=state.settings.default_charset,
        )
    except UnsupportedURLError as e:
        display_error(f"Unsupported URL: {url}", e)
        raise typer.Exit(code=1)


def inspect(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to inspect"),
    as_json: bool = typer.Option(
        False, "--json", help="Print the URL record and fingerprint as JSON"
    ),
) -> None:
    """Show the canonical form of a URL and what its fragment carries.

    Examples:
        linkprint inspect "https://example.com/f.iso#hash(sha256:abc...)"
        linkprint inspect "https://example.com/f.iso#!metalink4!f.meta4" --json
    """
    state: CLIState = ctx.obj
    canonical = canonicalize(url, state)

    if as_json:
        fingerprint = canonical.fingerprint
        metalink = canonical.metalink
        payload = {
            **canonical.to_record(),
            "fingerprint": fingerprint.to_record() if fingerprint else None,
            "metalink": metalink.spec if metalink else None,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    display_canonical_url(canonical)
