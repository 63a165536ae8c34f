"""Decoding and verification of privacy network JWTs."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import jwt
from cryptography.exceptions import UnsupportedAlgorithm

from ..claims import HEADER_PUBLIC_KEY_PEM
from ..config import JwtAlgorithm, SigningConfig
from ..contracts import DecodedToken
from ..errors import ConfigurationError, InvalidEmbeddedKeyError, MissingEmbeddedKeyError
from .keys import load_public_key

logger = logging.getLogger(__name__)


def decode(token: str) -> DecodedToken:
    """Return the header and payload of ``token`` without verifying it.

    The result must never be used as a trust decision.

    Raises:
        jwt.DecodeError: If ``token`` is not a well formed compact JWS.
    """
    header = jwt.get_unverified_header(token)
    payload = jwt.decode(token, options={"verify_signature": False})
    return DecodedToken(header=header, payload=payload)


def _verify(token: str, key: str, algorithm: JwtAlgorithm) -> Dict[str, Any]:
    # issuer and subject are deliberately not checked; that is the caller's job
    try:
        return jwt.decode(token, key, algorithms=[algorithm.value])
    except jwt.InvalidTokenError as exc:
        logger.warning(f"{algorithm.value} token verification failed: {exc}")
        raise


def _hs256_key(config: Optional[SigningConfig]) -> str:
    if config is None or not config.secret:
        raise ConfigurationError("secret", "secret is required to verify an HS256 token")
    return config.secret


def _rs256_config_key(config: Optional[SigningConfig]) -> str:
    if config is None or not config.public_key_pem:
        raise ConfigurationError(
            "public_key_pem", "public_key_pem is required to verify an RS256 token"
        )
    return config.public_key_pem


_CONFIG_KEYS: Dict[JwtAlgorithm, Callable[[Optional[SigningConfig]], str]] = {
    JwtAlgorithm.HS256: _hs256_key,
    JwtAlgorithm.RS256: _rs256_config_key,
}


def verify_config_bound(token: str, config: SigningConfig) -> Dict[str, Any]:
    """Verify ``token`` against the algorithm and keys in ``config``.

    Returns the verified claim set.

    Raises:
        ConfigurationError: If ``config`` lacks the verification key.
        jwt.InvalidTokenError: On signature mismatch or a malformed token.
    """
    if not token:
        raise ConfigurationError("token", "token param to verify missing")
    if config is None:
        raise ConfigurationError("config", "signing config is required")
    key = _CONFIG_KEYS[config.algorithm](config)
    return _verify(token, key, config.algorithm)


def _embedded_public_key(header: Dict[str, Any]) -> str:
    public_key_pem = header.get(HEADER_PUBLIC_KEY_PEM)
    if not public_key_pem:
        raise MissingEmbeddedKeyError(f"{HEADER_PUBLIC_KEY_PEM} is missing from the header")
    if not isinstance(public_key_pem, str):
        logger.warning(f"RS256 token embeds a non-string {HEADER_PUBLIC_KEY_PEM}")
        raise InvalidEmbeddedKeyError(f"{HEADER_PUBLIC_KEY_PEM} must be a PEM string")
    try:
        load_public_key(public_key_pem)
    except (ValueError, UnsupportedAlgorithm) as exc:
        logger.warning(f"RS256 token embeds an unusable public key: {exc}")
        raise InvalidEmbeddedKeyError(
            f"{HEADER_PUBLIC_KEY_PEM} is not an RSA public key: {exc}"
        ) from exc
    return public_key_pem


def verify_auto(token: str, config: Optional[SigningConfig] = None) -> Dict[str, Any]:
    """Verify ``token`` using the algorithm declared in its own header.

    RS256 tokens are checked against the public key embedded in the same
    header, so no configuration is needed; the embedded certificate is not
    validated here.  HS256 tokens need ``config.secret``.

    Raises:
        jwt.InvalidAlgorithmError: If the header declares any other algorithm.
        MissingEmbeddedKeyError: If an RS256 header has no embedded key.
        InvalidEmbeddedKeyError: If the embedded key is not an RSA PEM.
        ConfigurationError: If an HS256 token is given without a secret.
    """
    if not token:
        raise ConfigurationError("token", "token param to verify missing")
    header = jwt.get_unverified_header(token)

    try:
        algorithm = JwtAlgorithm(header.get("alg"))
    except ValueError:
        raise jwt.InvalidAlgorithmError(
            f"Unsupported token algorithm: {header.get('alg')}"
        ) from None

    if algorithm is JwtAlgorithm.RS256:
        key = _embedded_public_key(header)
    else:
        key = _hs256_key(config)
    return _verify(token, key, algorithm)
