"""Command line interface for inspecting pnjwt tokens."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import jwt
import typer

from pnjwt import ConfigurationError, decode, load_config, sha_jwt, verify_auto

app = typer.Typer(help="CLI for privacy network JWTs")


@app.callback()
def main() -> None:
    """pnjwt CLI entry point."""
    pass


@app.command("decode")
def decode_token(token: str) -> None:
    """
    Print the header and payload of a token without verifying it.

    Example:
        pnjwt decode eyJhbGciOi...
    """
    try:
        decoded = decode(token)
    except jwt.DecodeError as exc:
        typer.secho(f"Malformed token: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(decoded.model_dump(), indent=2))


@app.command("verify")
def verify_token(
    token: str,
    config: Optional[Path] = typer.Option(
        None, help="Signing config YAML, needed for HS256 tokens"
    ),
) -> None:
    """
    Verify a token using the algorithm declared in its header.

    RS256 tokens are checked against their embedded public key, HS256 tokens
    against the secret from the loaded config.

    Example:
        pnjwt verify eyJhbGciOi...
        PNJWT_SECRET=secret pnjwt verify eyJhbGciOi...
    """
    signing_config = load_config(str(config) if config else None)
    try:
        claims = verify_auto(token, signing_config)
    except (jwt.InvalidTokenError, ConfigurationError) as exc:
        typer.secho(f"Verification failed: {exc}", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(claims, indent=2))


@app.command("hash")
def hash_token(token: str) -> None:
    """Print the SHA-256 hex digest of the complete token."""
    typer.echo(sha_jwt(token))


if __name__ == "__main__":  # pragma: no cover
    app()
