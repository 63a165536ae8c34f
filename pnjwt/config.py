"""Signing configuration for pnjwt."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field


class JwtAlgorithm(str, Enum):
    """Supported signing algorithm families."""

    HS256 = "HS256"
    RS256 = "RS256"


class SigningConfig(BaseModel):
    """Issuer identity, algorithm and key material used to sign tokens.

    Only the fields required by ``algorithm`` are consulted: ``secret`` for
    HS256; ``private_key``, ``public_key_pem`` and ``x509_cert_pem`` for RS256.
    Presence is checked when signing so that verify-only configurations can
    omit signing material.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    issuer: Optional[str] = None
    algorithm: JwtAlgorithm = JwtAlgorithm.HS256
    secret: Optional[str] = Field(default=None, repr=False)
    private_key: Optional[str] = Field(default=None, repr=False)
    public_key_pem: Optional[str] = None
    x509_cert_pem: Optional[str] = None


_FILE_FIELDS = {
    "private_key_file": "private_key",
    "public_key_file": "public_key_pem",
    "x509_cert_file": "x509_cert_pem",
}


def _read_key_files(data: Dict[str, Any], base: Path) -> Dict[str, Any]:
    for file_key, field in _FILE_FIELDS.items():
        file_path = data.pop(file_key, None)
        if file_path:
            path = Path(file_path)
            if not path.is_absolute():
                path = base / path
            data[field] = path.read_text()
    return data


def load_config(path: Optional[str] = None) -> SigningConfig:
    """Load signing configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to PNJWT_CONFIG env
            variable or 'pnjwt.yaml' in the current directory.

    ``PNJWT_ISSUER``, ``PNJWT_ALGORITHM`` and ``PNJWT_SECRET`` override the
    values read from the file.  Relative ``*_file`` entries are resolved
    against the directory holding the config file.
    """

    config_path = Path(path or os.getenv("PNJWT_CONFIG", "pnjwt.yaml"))
    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        data = _read_key_files(data, config_path.parent)

    env_overrides = {
        "issuer": os.getenv("PNJWT_ISSUER"),
        "algorithm": os.getenv("PNJWT_ALGORITHM"),
        "secret": os.getenv("PNJWT_SECRET"),
    }
    data.update({k: v for k, v in env_overrides.items() if v})
    return SigningConfig(**data)
