"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from paged_cursor.kernel.errors import SerializationError, TransportError, TransportTimeoutError


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping."""

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("DELETE", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise TransportTimeoutError(f"HTTP request timed out: {method} {url}", cause=exc) from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or f"HTTP error on {method} {url}", cause=exc) from exc


def decode_json(response: httpx.Response) -> Any:
    """Decode a JSON body; an empty body decodes to ``None``."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise SerializationError(
            f"Response from {response.request.method} {response.request.url} is not valid JSON",
            payload_type=response.headers.get("content-type"),
            cause=exc,
        ) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient", "decode_json"]
