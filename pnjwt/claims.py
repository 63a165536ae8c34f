"""Claim vocabulary for privacy network JWTs.

Every private claim lives in the ``https://pn.schema.webshield.io/prop#``
namespace so it can never collide with the registered JWT claims (``iss``,
``sub``, ``iat``).  Header claims use their own namespace.  These strings are
part of the wire format; tokens already issued depend on them, so existing
values must never change.
"""

from __future__ import annotations

from enum import Enum

_PROP = "https://pn.schema.webshield.io/prop#"
_TYPE = "https://pn.schema.webshield.io/type#"

# Registered claims, set by the signing routine rather than by the envelopes.
ISSUER = "iss"
SUBJECT = "sub"
ISSUED_AT = "iat"

# holds the JwtType of the token so a verifier can dispatch on it
PN_JWT_TYPE_CLAIM = f"{_PROP}jwt_type"

# unique id of the token, provided by the issuer or generated
JWT_ID_CLAIM = f"{_PROP}jwt_id"

# a complete nested token being passed on to another service
EMBEDDED_JWT_MESSAGE_CLAIM = f"{_PROP}embedded_jwt_message_claim"

ENCRYPT_KEY_MD_CLAIM = f"{_PROP}encrypt_key_md"
ERROR_CLAIM = f"{_PROP}error"

# @id of the message being acknowledged
MESSAGE_ACK_ID_CLAIM = f"{_PROP}message_ack_id"

METADATA_CLAIM = f"{_PROP}metadata"
SYNDICATE_REQUEST_CLAIM = f"{_PROP}syndicate_request"
SUBJECT_LINK_CLAIM = f"{_PROP}subject_link"
SUBJECT_LINK_JWTS_CLAIM = f"{_PROP}subject_link_jwts"
SUBJECT_JWTS_CLAIM = f"{_PROP}subject_jwts"

# a subject JSON-LD node, or a list of them
SUBJECT_CLAIM = f"{_PROP}subject"

# @id of the syndication that produced a subject or subject link token
SYNDICATION_ID_CLAIM = f"{_PROP}syndication_id"

PN_GRAPH_CLAIM = f"{_PROP}pn_graph"
PN_DATA_MODEL_CLAIM = f"{_PROP}pn_data_model"
PRIVACY_PIPE_CLAIM = f"{_PROP}privacy_pipe"
PROVISION_CLAIM = f"{_PROP}provision"

# the query command node, never the subject data itself
QUERY_CLAIM = f"{_PROP}query"

# Header claims carrying the signer's PEM material for RS256 tokens.
HEADER_PUBLIC_KEY_PEM = "http://pn.schema.webshield.io/prop#jwk_pem"
HEADER_X509_CERT_PEM = "http://pn.schema.webshield.io/prop#x5c_pem"


class JwtType(str, Enum):
    """Message kind stored under :data:`PN_JWT_TYPE_CLAIM`."""

    MESSAGE_ACK = f"{_TYPE}message_ack"
    ENCRYPT_KEY_MD = f"{_TYPE}encrypt_key_md"
    ERROR = f"{_TYPE}error"
    METADATA = f"{_TYPE}metadata"
    RS_QUERY = f"{_TYPE}rs_query"
    RS_QUERY_RESULT = f"{_TYPE}rs_query_result"
    RSP_QUERY_RESULT = f"{_TYPE}rsp_query_result"
    SUBJECT = f"{_TYPE}subject"
    SUBJECT_LINK = f"{_TYPE}subject_link"
    SYNDICATE_REQUEST = f"{_TYPE}syndicate_request"
    PROVISION = f"{_TYPE}provision"
    V1_GRAPH = f"{_TYPE}v1Graph"


PAYLOAD_CLAIMS = frozenset(
    {
        PN_JWT_TYPE_CLAIM,
        JWT_ID_CLAIM,
        EMBEDDED_JWT_MESSAGE_CLAIM,
        ENCRYPT_KEY_MD_CLAIM,
        ERROR_CLAIM,
        MESSAGE_ACK_ID_CLAIM,
        METADATA_CLAIM,
        SYNDICATE_REQUEST_CLAIM,
        SUBJECT_LINK_CLAIM,
        SUBJECT_LINK_JWTS_CLAIM,
        SUBJECT_JWTS_CLAIM,
        SUBJECT_CLAIM,
        SYNDICATION_ID_CLAIM,
        PN_GRAPH_CLAIM,
        PN_DATA_MODEL_CLAIM,
        PRIVACY_PIPE_CLAIM,
        PROVISION_CLAIM,
        QUERY_CLAIM,
    }
)

HEADER_CLAIMS = frozenset({HEADER_PUBLIC_KEY_PEM, HEADER_X509_CERT_PEM})
