"""Claim vocabulary tests."""

from pnjwt import JwtType
from pnjwt import claims as pn_claims


def test_payload_claims_are_namespaced_and_unique():
    values = list(pn_claims.PAYLOAD_CLAIMS)
    assert len(values) == 18
    for value in values:
        assert value.startswith("https://pn.schema.webshield.io/prop#")
    assert not pn_claims.PAYLOAD_CLAIMS & pn_claims.HEADER_CLAIMS
    assert not pn_claims.PAYLOAD_CLAIMS & {"iss", "sub", "iat"}


def test_wire_values_are_stable():
    assert pn_claims.PN_JWT_TYPE_CLAIM == "https://pn.schema.webshield.io/prop#jwt_type"
    assert pn_claims.SYNDICATION_ID_CLAIM == "https://pn.schema.webshield.io/prop#syndication_id"
    assert pn_claims.HEADER_PUBLIC_KEY_PEM == "http://pn.schema.webshield.io/prop#jwk_pem"
    assert pn_claims.HEADER_X509_CERT_PEM == "http://pn.schema.webshield.io/prop#x5c_pem"
    assert JwtType.V1_GRAPH.value == "https://pn.schema.webshield.io/type#v1Graph"
    assert JwtType.SUBJECT_LINK.value == "https://pn.schema.webshield.io/type#subject_link"


def test_jwt_types_are_distinct():
    assert len({t.value for t in JwtType}) == len(JwtType) == 12

