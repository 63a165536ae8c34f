"""Exception types raised by pnjwt."""

from __future__ import annotations

import jwt


class ConfigurationError(ValueError):
    """A required signing option, property or input is missing or inconsistent.

    Always raised before any signature is computed.
    """

    def __init__(self, field: str, message: str = "") -> None:
        self.field = field
        super().__init__(message or f"{field} is missing")


class MissingEmbeddedKeyError(jwt.InvalidTokenError):
    """An RS256 token header does not carry the embedded public key PEM."""


class InvalidEmbeddedKeyError(MissingEmbeddedKeyError):
    """The embedded public key is not an RSA public key in PEM form."""
