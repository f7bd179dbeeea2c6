"""
Layout Repository Implementation - venue REST API backed
"""

from src.platform.exception.exceptions import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    VenueApiError,
)
from src.platform.http.venue_api_client import VenueApiClient, VenueApiResponse
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_layout_repo import ILayoutRepo
from src.service.seating.domain.entity.layout_document import LayoutDocument


class LayoutRepoImpl(ILayoutRepo):
    def __init__(self, venue_api_client: VenueApiClient) -> None:
        self.venue_api_client = venue_api_client

    @staticmethod
    def _raise_for_failure(response: VenueApiResponse, *, action: str) -> None:
        if response.ok:
            return
        message = response.message or f'Failed to {action}'
        if response.status_code == 404:
            raise NotFoundError(message)
        if response.status_code == 403:
            raise ForbiddenError(message)
        if 400 <= response.status_code < 500:
            raise DomainError(message, response.status_code)
        raise VenueApiError(message)

    @Logger.io
    async def get_by_id(self, *, layout_id: int) -> LayoutDocument:
        response = await self.venue_api_client.get(f'/seating-layouts/{layout_id}')
        self._raise_for_failure(response, action=f'load layout {layout_id}')
        return LayoutDocument.from_dict(response.payload)

    @Logger.io
    async def get_default(self) -> LayoutDocument:
        response = await self.venue_api_client.get('/seating-layouts/default')
        self._raise_for_failure(response, action='load default layout')
        return LayoutDocument.from_dict(response.payload)

    @Logger.io
    async def save(self, *, document: LayoutDocument) -> LayoutDocument:
        payload = document.to_payload()
        if document.id is None:
            response = await self.venue_api_client.post('/seating-layouts', json=payload)
            self._raise_for_failure(response, action='create layout')
            new_id = response.payload.get('id')
            stored = LayoutDocument.from_dict({**payload, 'id': new_id})
        else:
            response = await self.venue_api_client.put(
                f'/seating-layouts/{document.id}', json=payload
            )
            self._raise_for_failure(response, action=f'save layout {document.id}')
            stored = LayoutDocument.from_dict({**payload, 'id': document.id})
        Logger.base.info(
            f'💾 [LAYOUT_REPO] Stored layout {stored.id} ({len(stored.elements)} elements)'
        )
        return stored

    @Logger.io
    async def delete(self, *, layout_id: int) -> None:
        response = await self.venue_api_client.delete(f'/seating-layouts/{layout_id}')
        self._raise_for_failure(response, action=f'delete layout {layout_id}')
