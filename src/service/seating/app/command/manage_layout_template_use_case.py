from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_layout_repo import ILayoutRepo
from src.service.seating.domain.entity.layout_document import LayoutDocument


class ManageLayoutTemplateUseCase:
    """Duplicate and delete layout templates"""

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
    async def duplicate(self, *, layout_id: int) -> LayoutDocument:
        source = await self.layout_repo.get_by_id(layout_id=layout_id)
        copy_document = LayoutDocument.from_dict(
            {**source.to_payload(), 'name': f'{source.name} (Copy)', 'is_default': False}
        )
        stored = await self.layout_repo.save(document=copy_document)
        Logger.base.info(f'📄 [LAYOUT_TEMPLATE] Layout {layout_id} duplicated as {stored.id}')
        return stored

    @Logger.io
    async def delete(self, *, layout_id: int) -> None:
        layout = await self.layout_repo.get_by_id(layout_id=layout_id)
        if layout.is_default:
            raise ForbiddenError('Cannot delete the default layout')
        await self.layout_repo.delete(layout_id=layout_id)
        Logger.base.info(f'🗑️ [LAYOUT_TEMPLATE] Layout {layout_id} deleted')
