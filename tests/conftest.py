import datetime

import jwt
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from pnjwt import CounterIdGenerator, EnvelopeCodec, SigningConfig

HS256_SECRET = "bob-shared-secret-for-hs256-signing-0123456789"


def generate_key_material(common_name: str = "bob.com"):
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    private_pem = key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ).decode()
    public_pem = key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()

    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(minutes=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )
    cert_pem = cert.public_bytes(serialization.Encoding.PEM).decode()
    return private_pem, public_pem, cert_pem


@pytest.fixture(scope="session")
def key_material():
    return generate_key_material()


@pytest.fixture(scope="session")
def other_key_material():
    return generate_key_material("mallory.com")


@pytest.fixture
def no_signing(monkeypatch):
    """Fail the test if anything reaches the signature primitive."""

    def fail(*args, **kwargs):
        raise AssertionError("jwt.encode must not be called")

    monkeypatch.setattr(jwt, "encode", fail)


@pytest.fixture
def hs256_config():
    return SigningConfig(issuer="bob.com", algorithm="HS256", secret=HS256_SECRET)


@pytest.fixture
def rs256_config(key_material):
    private_pem, public_pem, cert_pem = key_material
    return SigningConfig(
        issuer="bob.com",
        algorithm="RS256",
        private_key=private_pem,
        public_key_pem=public_pem,
        x509_cert_pem=cert_pem,
    )


@pytest.fixture
def hs256_codec(hs256_config):
    return EnvelopeCodec(hs256_config, id_generator=CounterIdGenerator())


@pytest.fixture
def rs256_codec(rs256_config):
    return EnvelopeCodec(rs256_config, id_generator=CounterIdGenerator())


@pytest.fixture(params=["HS256", "RS256"])
def codec(request, hs256_codec, rs256_codec):
    """Run a test once per algorithm family."""
    return hs256_codec if request.param == "HS256" else rs256_codec


@pytest.fixture
def subject_node():
    return {
        "@id": "http://bogus.domain.com/bogus1",
        "@type": "http:/bogus.domain.com/type#Bogus",
        "http:bogus.domain.com/prop#name": "heya",
    }
