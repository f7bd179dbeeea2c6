from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_layout_repo import ILayoutRepo
from src.service.seating.domain.entity.layout_document import LayoutDocument


class GetLayoutUseCase:
    def __init__(self, layout_repo: ILayoutRepo) -> None:
        self.layout_repo = layout_repo

    @classmethod
    @inject
    def depends(
        cls,
        layout_repo: ILayoutRepo = Depends(Provide[Container.layout_repo]),
    ) -> Self:
        return cls(layout_repo=layout_repo)

    @Logger.io
    async def get(self, *, layout_id: Optional[int] = None) -> LayoutDocument:
        """Load a layout template; no id means the venue's default template."""
        Logger.base.info(f'🗺️ [GET_LAYOUT] Loading layout {layout_id or "default"}')
        if layout_id is None:
            document = await self.layout_repo.get_default()
        else:
            document = await self.layout_repo.get_by_id(layout_id=layout_id)
        Logger.base.info(
            f'✅ [GET_LAYOUT] Layout {document.id} loaded with {len(document.elements)} elements'
        )
        return document
