"""pnjwt: signed claim envelopes for privacy network services."""

from . import claims
from .claims import JwtType
from .config import JwtAlgorithm, SigningConfig, load_config
from .contracts import ClaimProps, DecodedToken, SigningOptions
from .envelopes import EnvelopeCodec, get_pn_graph, get_privacy_pipe
from .errors import ConfigurationError, InvalidEmbeddedKeyError, MissingEmbeddedKeyError
from .security.jws import resolve_signing_options, sign_payload
from .security.tokens import decode, verify_auto, verify_config_bound
from .utils.hashing import sha_jwt
from .utils.ids import CounterIdGenerator, IdGenerator

__version__ = "0.1.0"
__all__ = [
    "claims",
    "JwtType",
    "JwtAlgorithm",
    "SigningConfig",
    "load_config",
    "ClaimProps",
    "DecodedToken",
    "SigningOptions",
    "EnvelopeCodec",
    "get_pn_graph",
    "get_privacy_pipe",
    "ConfigurationError",
    "MissingEmbeddedKeyError",
    "InvalidEmbeddedKeyError",
    "resolve_signing_options",
    "sign_payload",
    "decode",
    "verify_auto",
    "verify_config_bound",
    "sha_jwt",
    "CounterIdGenerator",
    "IdGenerator",
]
