"""HTTP transport for the Kraken API.

One shared ``httpx.AsyncClient`` per ``Transport``; every call issues exactly
one request with the standard Kraken headers and returns the raw response.
Status handling and decoding belong to the caller.
"""

import logging
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from twitch_kraken.core.config import ClientConfig
from twitch_kraken.core.errors import DecodeError, RequestConstructionError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

WRITE_METHODS = ("POST", "PUT")


def build_headers(
    client_id: str,
    accept: str,
    token: str | None = None,
    json_body: bool = False,
) -> dict[str, str]:
    """Standard Kraken headers; Authorization only when a token is given."""
    headers = {"Client-ID": client_id, "Accept": accept}
    if token is not None:
        headers["Authorization"] = f"OAuth {token}"
    if json_body:
        headers["Content-Type"] = "application/json"
    return headers


def decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode a JSON response body into ``model``."""
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError(
            f"Response from {response.request.url.path} is not JSON (HTTP {response.status_code})",
            response.status_code,
        ) from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Response from {response.request.url.path} does not match {model.__name__} "
            f"(HTTP {response.status_code}): {e.error_count()} error(s)",
            response.status_code,
        ) from e


class Transport:
    """Request builder bound to one Kraken endpoint.

    Pass ``http`` to share an existing client (and its connection pool); it is
    then left open by ``close``.
    """

    def __init__(self, config: ClientConfig, http: httpx.AsyncClient | None = None):
        self.config = config
        self._owns_http = http is None
        self._http = http if http is not None else httpx.AsyncClient(timeout=config.timeout)

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_http:
            await self._http.aclose()

    def url(self, *segments: str) -> str:
        """``{base_uri}/seg1/seg2`` with every segment percent-encoded."""
        if not segments:
            return self.config.base_uri
        path = "/".join(quote(str(s), safe="") for s in segments)
        return f"{self.config.base_uri}/{path}"

    async def request(
        self,
        method: str,
        url: str,
        *,
        client_id: str | None = None,
        token: str | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Send one request.

        ``client_id=None`` sends no Kraken headers at all (token endpoint).
        """
        method = method.upper()
        headers: dict[str, str] = {}
        if client_id is not None:
            headers = build_headers(
                client_id,
                self.config.accept,
                token=token,
                json_body=token is not None and method in WRITE_METHODS,
            )

        try:
            request = self._http.build_request(
                method, url, params=params, headers=headers, json=json
            )
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestConstructionError(f"Could not build {method} {url}: {e}") from e

        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {request.url.path} failed: {type(e).__name__}: {e}")
            raise TransportError(f"{method} {request.url.path} failed: {e}") from e

        logger.debug(f"{method} {request.url.path} -> {response.status_code}")
        return response

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)
