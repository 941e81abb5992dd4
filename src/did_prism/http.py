"""Base HTTP Client.

This provides convenient elements like logging requests and responses,
automatically deserializing responses into an object, etc.
"""

import logging
from typing import Any, Type, TypeVar

from httpx import AsyncClient, Response
from pydantic import BaseModel, ValidationError

from did_prism.config import ConfigurationError


LOGGER = logging.getLogger(__name__)


M = TypeVar("M", bound=BaseModel)


class HTTPClientError(Exception):
    """Raised on errors in HTTP client."""


class RequestFailedError(HTTPClientError):
    """Raised when the server responds with a non-success status."""

    def __init__(self, status_code: int, body: str, url: str):
        """Init the error."""
        super().__init__(f"Request failed: {url} {status_code} {body}")
        self.status_code = status_code
        self.body = body
        self.url = url


class InvalidResponseError(HTTPClientError):
    """Raised when a success response body cannot be decoded."""


def _deserialize(value: Any, as_type: Type[M]) -> M | None:
    """Deserialize value."""
    if value is None:
        return None
    try:
        return as_type.model_validate(value)
    except ValidationError as error:
        raise InvalidResponseError(
            f"Could not deserialize value into type {as_type.__name__}: {error}"
        ) from error


class HTTPClient:
    """Base HTTP Client.

    Requests are sent over the given AsyncClient, which is shared by every
    call and never closed here.
    """

    def __init__(self, client: AsyncClient | None, base_url: str | None = None):
        """Init the client."""
        if client is None:
            raise ConfigurationError("An HTTP client is required")

        self.client = client
        if base_url and base_url.strip():
            self.client.base_url = base_url

    async def _handle_response(self, resp: Response) -> Any | None:
        if resp.is_success:
            text = resp.text
            LOGGER.debug("%s: %s", resp.status_code, text)
            if not text.strip():
                LOGGER.warning("Empty response body from %s", resp.url)
                return None
            try:
                return resp.json()
            except ValueError as error:
                raise InvalidResponseError(
                    f"Unparseable response body from {resp.url}: {text}"
                ) from error

        body = resp.text
        LOGGER.debug("%s: %s", resp.status_code, body)
        raise RequestFailedError(resp.status_code, body, str(resp.url))

    async def get(
        self,
        url: str,
        *,
        response: Type[M],
        headers: dict[str, str] | None = None,
    ) -> M | None:
        """HTTP Get."""
        LOGGER.info("GET %s", url)
        resp = await self.client.get(url, headers=headers)
        body = await self._handle_response(resp)
        return _deserialize(body, response)
