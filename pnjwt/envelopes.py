"""Construction of typed privacy network JWTs ("envelopes").

Each ``sign_*`` method validates its inputs, assembles the claims for one
:class:`~pnjwt.claims.JwtType` and hands them to the shared signing routine in
:mod:`pnjwt.security.jws`.  Validation always completes before signing.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from .claims import (
    EMBEDDED_JWT_MESSAGE_CLAIM,
    ENCRYPT_KEY_MD_CLAIM,
    ERROR_CLAIM,
    JWT_ID_CLAIM,
    MESSAGE_ACK_ID_CLAIM,
    METADATA_CLAIM,
    PN_DATA_MODEL_CLAIM,
    PN_GRAPH_CLAIM,
    PN_JWT_TYPE_CLAIM,
    PRIVACY_PIPE_CLAIM,
    PROVISION_CLAIM,
    QUERY_CLAIM,
    SUBJECT_CLAIM,
    SUBJECT_JWTS_CLAIM,
    SUBJECT_LINK_CLAIM,
    SUBJECT_LINK_JWTS_CLAIM,
    SYNDICATE_REQUEST_CLAIM,
    SYNDICATION_ID_CLAIM,
    JwtType,
)
from .config import SigningConfig
from .contracts import ClaimProps, PropsLike
from .errors import ConfigurationError
from .security.jws import sign_payload
from .security.tokens import verify_config_bound
from .utils.ids import DEFAULT_ID_GENERATOR, IdGenerator

Node = Mapping[str, Any]


def _require(value: Any, field: str) -> None:
    # empty lists and nodes are legal, absent values are not
    if value is None or value == "":
        raise ConfigurationError(field, f"{field} param missing")


def _require_subject(props: ClaimProps, purpose: str) -> None:
    if not props.subject:
        raise ConfigurationError("subject", f"props.subject is missing the {purpose}")


def _claims(jwt_type: JwtType) -> Dict[str, Any]:
    return {PN_JWT_TYPE_CLAIM: jwt_type.value}


def get_pn_graph(claims: Mapping[str, Any]) -> Optional[Any]:
    """Return the graph data carried by ``claims``, if any."""
    return claims.get(PN_GRAPH_CLAIM)


def get_privacy_pipe(claims: Mapping[str, Any]) -> Optional[str]:
    """Return the privacy pipe @id carried by ``claims``, if any."""
    return claims.get(PRIVACY_PIPE_CLAIM)


class EnvelopeCodec:
    """Signs envelopes of every kind under one :class:`SigningConfig`.

    ``id_generator`` supplies the counter used for generated token ids when a
    subject or subject link is signed without ``props.jwt_id``.  The default
    is shared by the whole process.
    """

    def __init__(
        self,
        config: SigningConfig,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        self.config = config
        self.id_generator = id_generator or DEFAULT_ID_GENERATOR

    def _sign(self, claims: Dict[str, Any], props: ClaimProps) -> str:
        return sign_payload(claims, self.config, props)

    def _jwt_id(self, props: ClaimProps) -> str:
        if props.jwt_id:
            return props.jwt_id
        return f"{props.subject}-{self.id_generator.next()}"

    # -- generic data paths -------------------------------------------------

    def sign_data(self, data: Any, props: PropsLike = None) -> str:
        """Sign arbitrary graph ``data``; ``props.subject`` is optional."""
        _require(data, "data")
        props = ClaimProps.coerce(props)

        claims = _claims(JwtType.V1_GRAPH)
        claims[PN_GRAPH_CLAIM] = data
        if props.privacy_pipe:
            claims[PRIVACY_PIPE_CLAIM] = props.privacy_pipe
        return self._sign(claims, props)

    def sign_pipe_data(self, graph: Node, props: PropsLike) -> str:
        """Sign a JSON-LD ``graph`` being sent down a privacy pipe.

        The graph must have a top level ``@graph`` entry and
        ``props.privacy_pipe`` is required.
        """
        _require(graph, "graph")
        if not isinstance(graph, Mapping) or graph.get("@graph") is None:
            raise ConfigurationError("graph", "graph must have a top level @graph property")
        props = ClaimProps.coerce(props)
        if not props.privacy_pipe:
            raise ConfigurationError("privacy_pipe", "props.privacy_pipe missing")
        return self.sign_data(graph, props)

    def verify_get_pn_graph(self, token: str) -> Optional[Any]:
        """Verify ``token`` against this codec's config and return its graph."""
        return get_pn_graph(verify_config_bound(token, self.config))

    # -- metadata and provisioning -------------------------------------------

    def sign_metadata(self, metadata: Node, props: PropsLike) -> str:
        """Sign a metadata node, optionally with ``props.provision``."""
        _require(metadata, "metadata")
        props = ClaimProps.coerce(props)
        _require_subject(props, "metadata @id")

        claims = _claims(JwtType.METADATA)
        claims[METADATA_CLAIM] = metadata
        if props.provision is not None:
            claims[PROVISION_CLAIM] = props.provision
        return self._sign(claims, props)

    def sign_provision(self, provision: Node, props: PropsLike) -> str:
        _require(provision, "provision")
        props = ClaimProps.coerce(props)
        _require_subject(props, "provision @id")
        if not props.privacy_pipe:
            raise ConfigurationError(
                "privacy_pipe", "props.privacy_pipe is missing the privacy pipe @id"
            )

        claims = _claims(JwtType.PROVISION)
        claims[PROVISION_CLAIM] = provision
        claims[PRIVACY_PIPE_CLAIM] = props.privacy_pipe
        return self._sign(claims, props)

    def sign_encrypt_key_metadata(self, ekmd: Node, props: PropsLike) -> str:
        _require(ekmd, "ekmd")
        props = ClaimProps.coerce(props)
        _require_subject(props, "encrypt key metadata @id")

        claims = _claims(JwtType.ENCRYPT_KEY_MD)
        claims[ENCRYPT_KEY_MD_CLAIM] = ekmd
        return self._sign(claims, props)

    # -- subjects ---------------------------------------------------------------

    def sign_subject(
        self,
        subject: Node,
        pn_data_model_id: str,
        syndication_id: str,
        props: PropsLike,
    ) -> str:
        """Sign a subject node produced by a syndication.

        ``props.jwt_id`` is used verbatim when given, otherwise an id of the
        form ``<props.subject>-<counter>`` is generated.
        """
        _require(subject, "subject")
        _require(pn_data_model_id, "pn_data_model_id")
        _require(syndication_id, "syndication_id")
        props = ClaimProps.coerce(props)
        _require_subject(props, "subject @id")

        claims = _claims(JwtType.SUBJECT)
        claims[PN_DATA_MODEL_CLAIM] = pn_data_model_id
        claims[SYNDICATION_ID_CLAIM] = syndication_id
        claims[SUBJECT_CLAIM] = subject
        claims[JWT_ID_CLAIM] = self._jwt_id(props)
        if props.privacy_pipe:
            claims[PRIVACY_PIPE_CLAIM] = props.privacy_pipe
        return self._sign(claims, props)

    def sign_subject_link(self, link: Node, syndication_id: str, props: PropsLike) -> str:
        """Sign a subject link node; ids are generated as for subjects."""
        _require(link, "link")
        _require(syndication_id, "syndication_id")
        props = ClaimProps.coerce(props)
        _require_subject(props, "link @id")

        claims = _claims(JwtType.SUBJECT_LINK)
        claims[SYNDICATION_ID_CLAIM] = syndication_id
        claims[SUBJECT_LINK_CLAIM] = link
        claims[JWT_ID_CLAIM] = self._jwt_id(props)
        if props.privacy_pipe:
            claims[PRIVACY_PIPE_CLAIM] = props.privacy_pipe
        return self._sign(claims, props)

    # -- syndication and queries ----------------------------------------------

    def sign_syndicate_request(
        self,
        synd_request: Node,
        subject_jwts: List[str],
        privacy_pipe_id: str,
        props: PropsLike,
    ) -> str:
        _require(synd_request, "synd_request")
        _require(subject_jwts, "subject_jwts")
        _require(privacy_pipe_id, "privacy_pipe_id")
        props = ClaimProps.coerce(props)
        _require_subject(props, "syndicate request @id")

        claims = _claims(JwtType.SYNDICATE_REQUEST)
        claims[SYNDICATE_REQUEST_CLAIM] = synd_request
        claims[SUBJECT_JWTS_CLAIM] = list(subject_jwts)
        claims[PRIVACY_PIPE_CLAIM] = privacy_pipe_id
        return self._sign(claims, props)

    def sign_rs_query(
        self,
        query: Node,
        subject: Union[Node, List[Node]],
        privacy_pipe_id: str,
        props: PropsLike,
    ) -> str:
        """Sign a resource service query; ``subject`` may be a node or a list."""
        _require(query, "query")
        _require(subject, "subject")
        _require(privacy_pipe_id, "privacy_pipe_id")
        props = ClaimProps.coerce(props)
        _require_subject(props, "query @id")

        claims = _claims(JwtType.RS_QUERY)
        claims[QUERY_CLAIM] = query
        claims[SUBJECT_CLAIM] = subject
        claims[PRIVACY_PIPE_CLAIM] = privacy_pipe_id
        return self._sign(claims, props)

    def sign_rs_query_result(
        self,
        query: Node,
        subject_jwts: List[str],
        subject_link_jwts: List[str],
        privacy_pipe_id: str,
        props: PropsLike,
    ) -> str:
        _require(query, "query")
        _require(subject_jwts, "subject_jwts")
        _require(subject_link_jwts, "subject_link_jwts")
        _require(privacy_pipe_id, "privacy_pipe_id")
        props = ClaimProps.coerce(props)
        _require_subject(props, "query result @id")

        claims = _claims(JwtType.RS_QUERY_RESULT)
        claims[QUERY_CLAIM] = query
        claims[SUBJECT_JWTS_CLAIM] = list(subject_jwts)
        claims[SUBJECT_LINK_JWTS_CLAIM] = list(subject_link_jwts)
        claims[PRIVACY_PIPE_CLAIM] = privacy_pipe_id
        return self._sign(claims, props)

    def sign_rsp_query_result(self, query: Node, message: str, props: PropsLike) -> str:
        """Sign a resource service proxy result wrapping one nested token."""
        _require(query, "query")
        _require(message, "message")
        props = ClaimProps.coerce(props)
        _require_subject(props, "query result @id")

        claims = _claims(JwtType.RSP_QUERY_RESULT)
        claims[QUERY_CLAIM] = query
        claims[EMBEDDED_JWT_MESSAGE_CLAIM] = message
        return self._sign(claims, props)

    # -- acknowledgements ------------------------------------------------------

    def sign_message_ack(self, message_id: str, props: PropsLike = None) -> str:
        """Acknowledge ``message_id``, which also becomes the token subject."""
        _require(message_id, "message_id")
        props = ClaimProps.coerce(props).model_copy(update={"subject": message_id})

        claims = _claims(JwtType.MESSAGE_ACK)
        claims[MESSAGE_ACK_ID_CLAIM] = message_id
        return self._sign(claims, props)

    def sign_error(self, message_id: str, error: Node, props: PropsLike = None) -> str:
        """Report ``error`` for the inbound message ``message_id``."""
        _require(message_id, "message_id")
        _require(error, "error")
        props = ClaimProps.coerce(props).model_copy(update={"subject": message_id})

        claims = _claims(JwtType.ERROR)
        claims[MESSAGE_ACK_ID_CLAIM] = message_id
        claims[ERROR_CLAIM] = error
        return self._sign(claims, props)
