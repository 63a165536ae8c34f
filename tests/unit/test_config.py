"""Tests for signing configuration loading."""

import pytest
from pydantic import ValidationError

from pnjwt.config import JwtAlgorithm, SigningConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PNJWT_CONFIG", "PNJWT_ISSUER", "PNJWT_ALGORITHM", "PNJWT_SECRET"):
        monkeypatch.delenv(name, raising=False)


def test_load_config_from_env_path(tmp_path, monkeypatch):
    config_path = tmp_path / "pnjwt.yaml"
    config_path.write_text(
        """
issuer: bob.com
algorithm: HS256
secret: from-file
"""
    )
    monkeypatch.setenv("PNJWT_CONFIG", str(config_path))

    config = load_config()
    assert config.issuer == "bob.com"
    assert config.algorithm is JwtAlgorithm.HS256
    assert config.secret == "from-file"


def test_load_config_reads_key_files(tmp_path, key_material):
    private_pem, public_pem, cert_pem = key_material
    (tmp_path / "rsa-private.pem").write_text(private_pem)
    (tmp_path / "rsa-public.pem").write_text(public_pem)
    (tmp_path / "rsa.x509crt").write_text(cert_pem)
    config_path = tmp_path / "pnjwt.yaml"
    config_path.write_text(
        """
issuer: bob.com
algorithm: RS256
private_key_file: rsa-private.pem
public_key_file: rsa-public.pem
x509_cert_file: rsa.x509crt
"""
    )

    config = load_config(str(config_path))
    assert config.algorithm is JwtAlgorithm.RS256
    assert config.private_key == private_pem
    assert config.public_key_pem == public_pem
    assert config.x509_cert_pem == cert_pem


def test_env_overrides_file(tmp_path, monkeypatch):
    config_path = tmp_path / "pnjwt.yaml"
    config_path.write_text("issuer: bob.com\nsecret: from-file\n")
    monkeypatch.setenv("PNJWT_ISSUER", "alice.com")
    monkeypatch.setenv("PNJWT_SECRET", "from-env")

    config = load_config(str(config_path))
    assert config.issuer == "alice.com"
    assert config.secret == "from-env"


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(str(tmp_path / "absent.yaml"))
    assert config.issuer is None
    assert config.algorithm is JwtAlgorithm.HS256


def test_unsupported_algorithm_rejected():
    with pytest.raises(ValidationError):
        SigningConfig(issuer="bob.com", algorithm="none", secret="s")


def test_config_is_immutable():
    config = SigningConfig(issuer="bob.com", secret="s")
    with pytest.raises(ValidationError):
        config.issuer = "mallory.com"


def test_secrets_not_in_repr():
    config = SigningConfig(issuer="bob.com", secret="top-secret", private_key="PRIVATE-KEY-MATERIAL")
    assert "top-secret" not in repr(config)
    assert "PRIVATE-KEY-MATERIAL" not in repr(config)


def test_unknown_config_keys_rejected(tmp_path):
    config_path = tmp_path / "pnjwt.yaml"
    config_path.write_text("issuer: bob.com\nsecert: typo\n")

    with pytest.raises(ValidationError):
        load_config(str(config_path))
