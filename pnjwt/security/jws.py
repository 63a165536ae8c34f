"""Shared signing routine for privacy network JWTs."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional

import jwt

from ..claims import (
    HEADER_PUBLIC_KEY_PEM,
    HEADER_X509_CERT_PEM,
    ISSUED_AT,
    ISSUER,
    PN_JWT_TYPE_CLAIM,
    SUBJECT,
)
from ..config import JwtAlgorithm, SigningConfig
from ..contracts import ClaimProps, PropsLike, SigningOptions
from ..errors import ConfigurationError
from .keys import certificate_matches_public_key

logger = logging.getLogger(__name__)


def _hs256_options(config: SigningConfig, issuer: str, subject: Optional[str]) -> SigningOptions:
    if not config.secret:
        raise ConfigurationError("secret", "secret is required for HS256 signing")
    return SigningOptions(
        algorithm=JwtAlgorithm.HS256, key=config.secret, issuer=issuer, subject=subject
    )


def _rs256_options(config: SigningConfig, issuer: str, subject: Optional[str]) -> SigningOptions:
    if not config.public_key_pem:
        raise ConfigurationError("public_key_pem", "public_key_pem is required for RS256 signing")
    if not config.x509_cert_pem:
        raise ConfigurationError("x509_cert_pem", "x509_cert_pem is required for RS256 signing")
    if not config.private_key:
        raise ConfigurationError("private_key", "private_key is required for RS256 signing")

    try:
        matches = certificate_matches_public_key(config.x509_cert_pem, config.public_key_pem)
    except ValueError as exc:
        raise ConfigurationError("x509_cert_pem", f"unable to load key material: {exc}") from exc
    if not matches:
        raise ConfigurationError(
            "x509_cert_pem", "x509_cert_pem does not certify public_key_pem"
        )

    return SigningOptions(
        algorithm=JwtAlgorithm.RS256,
        key=config.private_key,
        issuer=issuer,
        subject=subject,
        headers={
            HEADER_PUBLIC_KEY_PEM: config.public_key_pem,
            HEADER_X509_CERT_PEM: config.x509_cert_pem,
        },
    )


_OPTION_RESOLVERS: Dict[JwtAlgorithm, Callable[..., SigningOptions]] = {
    JwtAlgorithm.HS256: _hs256_options,
    JwtAlgorithm.RS256: _rs256_options,
}


def resolve_signing_options(config: SigningConfig, props: PropsLike = None) -> SigningOptions:
    """Build the options for one signing call from ``config`` and ``props``.

    ``props.issuer`` takes precedence over ``config.issuer``; the subject only
    ever comes from ``props``.  Neither input is modified.

    Raises:
        ConfigurationError: If the issuer or the key material required by
            ``config.algorithm`` is missing.
    """
    if config is None:
        raise ConfigurationError("config", "signing config is required")
    props = ClaimProps.coerce(props)

    issuer = props.issuer or config.issuer
    if not issuer:
        raise ConfigurationError("issuer", "issuer missing from both config and props")

    return _OPTION_RESOLVERS[config.algorithm](config, issuer, props.subject)


def encode(claims: Mapping[str, Any], options: SigningOptions) -> str:
    """Sign ``claims`` with pre-resolved ``options``.

    The registered ``iss``, ``sub`` and ``iat`` claims are added here.
    """
    payload = dict(claims)
    payload[ISSUER] = options.issuer
    if options.subject:
        payload[SUBJECT] = options.subject
    payload[ISSUED_AT] = int(time.time())

    logger.debug(
        f"Signing {payload.get(PN_JWT_TYPE_CLAIM, 'untyped')} token "
        f"with {options.algorithm.value} for issuer={options.issuer}"
    )
    return jwt.encode(
        payload,
        options.key,
        algorithm=options.algorithm.value,
        headers=options.headers or None,
    )


def sign_payload(payload: Mapping[str, Any], config: SigningConfig, props: PropsLike = None) -> str:
    """Sign a pre-built claim ``payload`` under ``config``.

    All configuration checks complete before any cryptographic work starts,
    so a failure never yields a partially signed token.
    """
    if payload is None:
        raise ConfigurationError("payload", "payload param missing")
    options = resolve_signing_options(config, props)
    return encode(payload, options)
