from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from stuff_manager.domain.exceptions import StuffFetchError, StuffFetchErrorCodes
from stuff_manager.domain.models.stuff import Stuff
from stuff_manager.domain.ports.services.stuff_api_client import StuffApiClientPort

FETCH_FAILED_MESSAGE = "Failed to fetch stuff items"

_stuff_list_adapter = TypeAdapter(List[Stuff])


class HttpxStuffApiClient(StuffApiClientPort):
    """Client for ``GET /stuff`` built on httpx.

    ``transport`` lets callers route requests somewhere other than the network,
    e.g. ``httpx.ASGITransport`` to talk to an in-process app.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url
        self._timeout = timeout_seconds
        self._transport = transport

    def _make_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    @staticmethod
    def _error_message(resp: httpx.Response) -> str:
        try:
            body: Any = resp.json()
        except ValueError:
            return FETCH_FAILED_MESSAGE
        if isinstance(body, dict):
            for key in ("detail", "message"):
                if isinstance(body.get(key), str) and body[key]:
                    return body[key]
        if isinstance(body, str) and body:
            return body
        return FETCH_FAILED_MESSAGE

    async def fetch_page(self, page: int) -> List[Stuff]:
        try:
            async with self._make_client() as client:
                resp = await client.get("/stuff", params={"page": page})
        except httpx.HTTPError as e:
            raise StuffFetchError(StuffFetchErrorCodes.NETWORK_ERROR, FETCH_FAILED_MESSAGE, cause=e) from e

        if not resp.is_success:
            raise StuffFetchError(StuffFetchErrorCodes.HTTP_ERROR, self._error_message(resp))

        try:
            return _stuff_list_adapter.validate_json(resp.content)
        except PydanticValidationError as e:
            raise StuffFetchError(StuffFetchErrorCodes.INVALID_RESPONSE, FETCH_FAILED_MESSAGE, cause=e) from e
