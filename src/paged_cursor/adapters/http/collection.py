"""HTTP adapter – HttpRemoteCollection."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from paged_cursor.adapters.http.client import HttpxHttpClient, decode_json
from paged_cursor.application.pagination.page_request import PageRequest
from paged_cursor.kernel.errors import ValidationError


def _to_json(payload: Any) -> Any:
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return dataclasses.asdict(payload)
    dump = getattr(payload, "model_dump", None)
    if callable(dump):
        return dump(mode="json")
    return payload


class HttpRemoteCollection:
    """:class:`~paged_cursor.RemoteCollection` over a REST endpoint.

    ===========  =================================
    ``list``     ``GET <endpoint>?page=&limit=&search[<field>]=``
    ``create``   ``POST <endpoint>``
    ``replace``  ``PUT <endpoint>/<id>``
    ``remove``   ``DELETE <endpoint>/<id>``
    ===========  =================================

    When no *client* is given one is created and closed by :meth:`aclose`
    (or ``async with``); a supplied client stays owned by the caller.
    """

    def __init__(
        self,
        endpoint: str,
        client: HttpxHttpClient | None = None,
        *,
        base_url: str = "",
        timeout: float = 10.0,
        **client_kwargs: Any,
    ) -> None:
        if not endpoint:
            raise ValidationError("Endpoint is required", field="endpoint")
        self.endpoint = endpoint
        self._owns_client = client is None
        self._client = client or HttpxHttpClient(base_url, timeout, **client_kwargs)

    async def __aenter__(self) -> "HttpRemoteCollection":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _item_url(self, id: Any) -> str:  # noqa: A002
        return f"{self.endpoint.rstrip('/')}/{quote(str(id), safe='')}"

    async def list(self, request: PageRequest) -> Sequence[Any] | Mapping[str, Any]:
        response = await self._client.get(self.endpoint, params=request.to_params())
        return decode_json(response)

    async def create(self, payload: Any) -> Any:
        response = await self._client.post(self.endpoint, json=_to_json(payload))
        return decode_json(response)

    async def replace(self, id: Any, payload: Any) -> Any:  # noqa: A002
        response = await self._client.put(self._item_url(id), json=_to_json(payload))
        return decode_json(response)

    async def remove(self, id: Any) -> None:  # noqa: A002
        await self._client.delete(self._item_url(id))

    def __repr__(self) -> str:
        return f"HttpRemoteCollection(endpoint={self.endpoint!r})"


__all__ = ["HttpRemoteCollection"]
