"""Typed inputs and outputs shared by the envelope codec."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import JwtAlgorithm


class ClaimProps(BaseModel):
    """Cross-cutting overrides supplied alongside an envelope's data.

    ``subject`` becomes the registered ``sub`` claim and ``issuer`` overrides
    the configured issuer.  The remaining fields feed kind-specific claims.
    Unknown fields are rejected so a misspelt override cannot be silently
    ignored.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    subject: Optional[str] = None
    issuer: Optional[str] = None
    privacy_pipe: Optional[str] = Field(default=None, alias="privacyPipe")
    provision: Optional[Any] = None
    jwt_id: Optional[str] = Field(default=None, alias="jwtID")

    @classmethod
    def coerce(cls, props: Union["ClaimProps", Mapping[str, Any], None]) -> "ClaimProps":
        """Accept ``None``, a mapping or an existing instance."""
        if props is None:
            return cls()
        if isinstance(props, cls):
            return props
        return cls.model_validate(dict(props))


PropsLike = Union[ClaimProps, Mapping[str, Any], None]


class SigningOptions(BaseModel):
    """Fully resolved parameters for one signing call."""

    model_config = ConfigDict(frozen=True)

    algorithm: JwtAlgorithm
    key: str = Field(repr=False)
    issuer: str
    subject: Optional[str] = None
    headers: Dict[str, str] = Field(default_factory=dict)


class DecodedToken(BaseModel):
    """Header and payload of a token read without signature verification."""

    model_config = ConfigDict(frozen=True)

    header: Dict[str, Any]
    payload: Dict[str, Any]

    @property
    def algorithm(self) -> Optional[str]:
        return self.header.get("alg")
