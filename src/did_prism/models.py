"""DID resolution models.

Response models match JSON keys without regard to case and keep unknown
properties as extras so documents round-trip without loss.
"""

from datetime import datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ResolverModel(BaseModel):
    """Base for models deserialized from resolver responses."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        """Rename incoming keys to the declared field names, ignoring case."""
        if not isinstance(data, Mapping):
            return data

        keys: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            keys[name.lower()] = key
            keys[key.lower()] = key

        matched = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = keys.get(key.lower(), key)
            matched[key] = value
        return matched

    def serialize(self) -> dict[str, Any]:
        """Serialize to a JSON compatible dict, omitting unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResolutionOptions(BaseModel):
    """Per call resolution options."""

    versionId: str | None = None
    versionTime: datetime | None = None
    includeNetworkIdentifier: bool | None = None


class PublicKeyJwk(ResolverModel):
    kty: str | None = None
    crv: str | None = None
    x: str | None = None
    y: str | None = None


class VerificationMethod(ResolverModel):
    """Verification method entry of a DID document."""

    id: str | None = None
    type: str | None = None
    controller: str | None = None
    publicKeyJwk: PublicKeyJwk | None = None


class Service(ResolverModel):
    """Service entry of a DID document."""

    id: str | None = None
    type: str | list[str] | None = None
    serviceEndpoint: Any = None


VerificationRelationship = list[str | VerificationMethod]


class DidDocument(ResolverModel):
    """DID Document."""

    context: str | list[Any] | None = Field(default=None, alias="@context")
    id: str | None = None
    controller: str | list[str] | None = None
    alsoKnownAs: list[str] | None = None
    verificationMethod: list[VerificationMethod] | None = None
    authentication: VerificationRelationship | None = None
    assertionMethod: VerificationRelationship | None = None
    keyAgreement: VerificationRelationship | None = None
    capabilityInvocation: VerificationRelationship | None = None
    capabilityDelegation: VerificationRelationship | None = None
    service: list[Service] | None = None


class DidResolutionMetadata(ResolverModel):
    contentType: str | None = None
    error: str | None = None
    errorMessage: str | None = None


class DidDocumentMetadata(ResolverModel):
    created: str | None = None
    updated: str | None = None
    deactivated: bool | None = None
    versionId: str | None = None
    nextUpdate: str | None = None
    nextVersionId: str | None = None
    equivalentId: list[str] | None = None
    canonicalId: str | None = None


class DidResolutionResult(ResolverModel):
    """DID Resolution Result: document plus resolution and document metadata."""

    context: str | list[Any] | None = Field(default=None, alias="@context")
    didDocument: DidDocument | None = None
    didResolutionMetadata: DidResolutionMetadata | None = None
    didDocumentMetadata: DidDocumentMetadata | None = None
