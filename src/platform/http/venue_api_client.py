from typing import Any, Optional

import attrs
import httpx
import orjson
from pydantic import SecretStr

from src.platform.exception.exceptions import VenueApiError
from src.platform.logging.loguru_io import Logger


# Reason code for failures where no usable answer came back from the venue API
NETWORK_ERROR = 'network_error'


@attrs.define(frozen=True)
class VenueApiResponse:
    status_code: int
    payload: dict[str, Any]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300 and self.payload.get('success', True) is not False

    @property
    def message(self) -> str:
        return str(self.payload.get('message') or self.payload.get('error') or '')


class VenueApiClient:
    """
    Async client for the venue REST API (layouts, event seating, seat requests).

    No timeout or retry policy is layered on top of httpx defaults; a failed
    call surfaces as VenueApiError and the caller decides whether to retry.

    Usage:
        venue_api_client = VenueApiClient(base_url=settings.VENUE_API_BASE_URL)
        response = await venue_api_client.get('/seating-layouts/default')
        await venue_api_client.aclose()  # In shutdown
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[SecretStr] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self._token = token
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def get_client(self) -> httpx.AsyncClient:
        """Create the pooled client on first use"""
        if self._client is None:
            headers = {'Accept': 'application/json', 'Content-Type': 'application/json'}
            if self._token is not None and self._token.get_secret_value():
                headers['Authorization'] = f'Bearer {self._token.get_secret_value()}'
            self._client = httpx.AsyncClient(
                base_url=self.base_url, headers=headers, transport=self._transport
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @staticmethod
    def _decode(response: httpx.Response) -> dict[str, Any]:
        if not response.content:
            return {}
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            if response.is_success:
                raise VenueApiError(
                    f'Venue API returned non-JSON body for {response.url}',
                    reason_code=NETWORK_ERROR,
                )
            return {'success': False, 'message': response.text.strip()}
        return body if isinstance(body, dict) else {'data': body}

    @Logger.io
    async def request(
        self, method: str, path: str, *, json: Optional[dict[str, Any]] = None
    ) -> VenueApiResponse:
        content = orjson.dumps(json) if json is not None else None
        try:
            response = await self.get_client().request(method, path, content=content)
        except httpx.HTTPError as e:
            Logger.base.warning(f'⚠️ [VENUE_API] {method} {path} failed: {e}')
            raise VenueApiError(f'Venue API unreachable: {e}', reason_code=NETWORK_ERROR) from e

        if response.status_code >= 500:
            Logger.base.warning(f'⚠️ [VENUE_API] {method} {path} -> {response.status_code}')
        return VenueApiResponse(status_code=response.status_code, payload=self._decode(response))

    async def get(self, path: str) -> VenueApiResponse:
        return await self.request('GET', path)

    async def post(self, path: str, *, json: dict[str, Any]) -> VenueApiResponse:
        return await self.request('POST', path, json=json)

    async def put(self, path: str, *, json: dict[str, Any]) -> VenueApiResponse:
        return await self.request('PUT', path, json=json)

    async def delete(self, path: str) -> VenueApiResponse:
        return await self.request('DELETE', path)
