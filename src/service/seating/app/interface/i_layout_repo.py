"""
Layout Repository Interface

Layout templates live behind the venue REST API (`/seating-layouts`).
"""

from abc import ABC, abstractmethod

from src.service.seating.domain.entity.layout_document import LayoutDocument


class ILayoutRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, layout_id: int) -> LayoutDocument:
        """Raises NotFoundError when the template does not exist"""
        pass

    @abstractmethod
    async def get_default(self) -> LayoutDocument:
        pass

    @abstractmethod
    async def save(self, *, document: LayoutDocument) -> LayoutDocument:
        """
        Write the whole document in one request: update when it has an id,
        create otherwise. Returns the document as stored.
        """
        pass

    @abstractmethod
    async def delete(self, *, layout_id: int) -> None:
        pass
