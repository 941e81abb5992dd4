"""Client to a Prism node DID resolver."""

from datetime import timezone
import logging
from typing import Literal
from urllib.parse import quote

from httpx import AsyncClient

from did_prism.config import ClientConfig, ConfigurationError
from did_prism.http import HTTPClient, RequestFailedError
from did_prism.models import DidDocument, DidResolutionResult, ResolutionOptions

LOGGER = logging.getLogger(__name__)

DID_RESOLUTION_RESULT = 'application/ld+json;profile="https://w3id.org/did-resolution"'
DID_LD_JSON = "application/did+ld+json"
DID_JSON = "application/did+json"

DocumentMediaType = Literal["application/did+ld+json", "application/did+json"]

VERSION_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class PrismDidClientError(Exception):
    """Raised on errors in prism client."""


class ResolutionError(PrismDidClientError):
    """Raised when the resolver responds with a non-success status."""

    def __init__(self, message: str, status_code: int, body: str):
        """Init the error."""
        super().__init__(f"{message}. Status: {status_code}, Body: {body}")
        self.status_code = status_code
        self.body = body


def _escape(value: str) -> str:
    return quote(value, safe="")


class PrismDidClient(HTTPClient):
    """Client to the DID resolver of a Prism node."""

    def __init__(self, client: AsyncClient | None, config: ClientConfig | None):
        """Init the client."""
        if config is None:
            raise ConfigurationError("Client configuration is required")

        super().__init__(client, config.base_url)
        self.config = config

    @staticmethod
    def _build_url(
        did: str, options: ResolutionOptions | None, ledger: str | None
    ) -> str:
        """Build the identifiers path and query string.

        Example: /api/v1.0/identifiers/did%3Aprism%3Aabc?versionId=1&ledger=preprod
        """
        url = f"/api/v1.0/identifiers/{_escape(did)}"
        query: list[str] = []

        if options is not None:
            if options.versionId:
                query.append(f"versionId={_escape(options.versionId)}")

            if options.versionTime is not None:
                version_time = options.versionTime.astimezone(timezone.utc)
                query.append(
                    f"versionTime={_escape(version_time.strftime(VERSION_TIME_FORMAT))}"
                )

            if options.includeNetworkIdentifier is not None:
                include = str(options.includeNetworkIdentifier).lower()
                query.append(f"includeNetworkIdentifier={include}")

        if ledger and ledger.strip():
            query.append(f"ledger={_escape(ledger)}")

        if query:
            url += "?" + "&".join(query)

        return url

    def _prepare(
        self, did: str, options: ResolutionOptions | None, ledger: str | None
    ) -> str:
        if not did or not did.strip():
            raise ValueError("A DID is required")

        if ledger is None:
            ledger = self.config.default_ledger

        LOGGER.debug("Resolving %s (ledger: %s)", did, ledger)
        return self._build_url(did, options, ledger)

    async def resolve_did_full(
        self,
        did: str,
        options: ResolutionOptions | None = None,
        ledger: str | None = None,
    ) -> DidResolutionResult:
        """Resolve a DID to a DID Resolution Result (document and metadata).

        If ledger is not given, the configured default ledger is used.
        """
        url = self._prepare(did, options, ledger)
        try:
            result = await self.get(
                url,
                headers={"Accept": DID_RESOLUTION_RESULT},
                response=DidResolutionResult,
            )
        except RequestFailedError as error:
            raise ResolutionError(
                "Error resolving DID", error.status_code, error.body
            ) from error

        if result is None:
            return DidResolutionResult()
        return result

    async def resolve_did_document(
        self,
        did: str,
        options: ResolutionOptions | None = None,
        ledger: str | None = None,
        accept_type: DocumentMediaType | str = DID_LD_JSON,
    ) -> DidDocument:
        """Resolve a DID to its DID Document only.

        accept_type selects between the JSON-LD (default) and plain JSON
        representations of the document.
        """
        url = self._prepare(did, options, ledger)
        try:
            document = await self.get(
                url,
                headers={"Accept": accept_type},
                response=DidDocument,
            )
        except RequestFailedError as error:
            raise ResolutionError(
                "Error resolving DID document", error.status_code, error.body
            ) from error

        if document is None:
            return DidDocument()
        return document
