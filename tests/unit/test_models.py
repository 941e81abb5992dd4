"""Test resolution models."""

from did_prism.models import (
    DidDocument,
    DidResolutionResult,
    Service,
    VerificationMethod,
)

DID = "did:prism:9b5118411248d9663b6ab15128fba8106511230ff654e7514cdcc4ce919bde9b"


def test_document_context_alias():
    document = DidDocument.model_validate(
        {"@context": "https://www.w3.org/ns/did/v1", "id": DID}
    )
    assert document.context == "https://www.w3.org/ns/did/v1"
    assert document.serialize() == {
        "@context": "https://www.w3.org/ns/did/v1",
        "id": DID,
    }


def test_unknown_fields_kept():
    document = DidDocument.model_validate({"id": DID, "custom": {"a": 1}})
    assert document.model_extra == {"custom": {"a": 1}}
    assert document.serialize()["custom"] == {"a": 1}


def test_serialize_omits_unset():
    assert DidDocument().serialize() == {}
    assert DidResolutionResult().serialize() == {}


def test_relationships_accept_references_and_embedded():
    document = DidDocument.model_validate(
        {
            "id": DID,
            "authentication": [
                f"{DID}#master0",
                {"id": f"{DID}#auth1", "type": "JsonWebKey2020", "controller": DID},
            ],
        }
    )
    reference, embedded = document.authentication
    assert reference == f"{DID}#master0"
    assert isinstance(embedded, VerificationMethod)
    assert embedded.controller == DID


def test_service_endpoint_shapes():
    services = [
        Service.model_validate(
            {"id": "#s1", "type": "LinkedDomains", "serviceEndpoint": "https://a.example"}
        ),
        Service.model_validate(
            {
                "ID": "#s2",
                "TYPE": ["LinkedDomains", "DIDCommMessaging"],
                "SERVICEENDPOINT": {"origins": ["https://b.example"]},
            }
        ),
    ]
    assert services[0].serviceEndpoint == "https://a.example"
    assert services[1].type == ["LinkedDomains", "DIDCommMessaging"]
    assert services[1].serviceEndpoint == {"origins": ["https://b.example"]}


def test_last_matching_key_wins():
    method = VerificationMethod.model_validate({"ID": "first", "id": "second"})
    assert method.id == "second"

    method = VerificationMethod.model_validate({"id": "first", "Id": "second"})
    assert method.id == "second"
