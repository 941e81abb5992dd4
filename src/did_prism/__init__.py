"""Client to the DID resolver of a Prism node."""

from did_prism.client import (
    DID_JSON,
    DID_LD_JSON,
    DID_RESOLUTION_RESULT,
    PrismDidClient,
    PrismDidClientError,
    ResolutionError,
)
from did_prism.config import ClientConfig, ConfigurationError
from did_prism.http import HTTPClientError, InvalidResponseError
from did_prism.models import (
    DidDocument,
    DidDocumentMetadata,
    DidResolutionMetadata,
    DidResolutionResult,
    PublicKeyJwk,
    ResolutionOptions,
    Service,
    VerificationMethod,
)

__all__ = [
    "DID_JSON",
    "DID_LD_JSON",
    "DID_RESOLUTION_RESULT",
    "ClientConfig",
    "ConfigurationError",
    "DidDocument",
    "DidDocumentMetadata",
    "DidResolutionMetadata",
    "DidResolutionResult",
    "HTTPClientError",
    "InvalidResponseError",
    "PrismDidClient",
    "PrismDidClientError",
    "PublicKeyJwk",
    "ResolutionError",
    "ResolutionOptions",
    "Service",
    "VerificationMethod",
]
