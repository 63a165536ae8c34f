from __future__ import annotations

import hashlib


def sha_jwt(token: str) -> str:
    """Return the SHA-256 hex digest of the complete compact ``token``."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
