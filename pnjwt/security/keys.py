"""PEM key helpers used when signing and verifying RS256 tokens."""

from __future__ import annotations

from typing import Union

from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

PemLike = Union[str, bytes]


def _as_bytes(pem: PemLike) -> bytes:
    return pem.encode("utf-8") if isinstance(pem, str) else pem


def load_public_key(public_key_pem: PemLike) -> RSAPublicKey:
    """Parse an RSA public key from ``public_key_pem``."""
    key = serialization.load_pem_public_key(_as_bytes(public_key_pem))
    if not isinstance(key, RSAPublicKey):
        raise ValueError("public key is not an RSA key")
    return key


def _spki(key: RSAPublicKey) -> bytes:
    return key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def certificate_matches_public_key(x509_cert_pem: PemLike, public_key_pem: PemLike) -> bool:
    """Return ``True`` if the certificate certifies ``public_key_pem``.

    This only binds the two pieces of embedded material together; it does not
    validate the certificate chain, validity period or issuer.
    """
    cert = x509.load_pem_x509_certificate(_as_bytes(x509_cert_pem))
    cert_key = cert.public_key()
    if not isinstance(cert_key, RSAPublicKey):
        return False
    return _spki(cert_key) == _spki(load_public_key(public_key_pem))
