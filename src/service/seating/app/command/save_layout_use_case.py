"""
Save Layout Use Case

One atomic write of the whole layout document. There is no partial save:
either every element, the stage and the canvas settings are stored or
nothing is, and the caller's draft is never modified.
"""

import copy
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto.layout_dto import SaveLayoutResult
from src.service.seating.app.interface.i_layout_repo import ILayoutRepo
from src.service.seating.domain.entity.layout_document import LayoutDocument
from src.service.seating.domain.layout_geometry import in_range_seat_labels


NAME_REQUIRED_MESSAGE = 'Layout name is required'
SAVED_MESSAGE = 'Layout saved successfully'


class SaveLayoutUseCase:
    def __init__(self, layout_repo: ILayoutRepo) -> None:
        self.layout_repo = layout_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        layout_repo: ILayoutRepo = Depends(Provide[Container.layout_repo]),
    ) -> Self:
        return cls(layout_repo=layout_repo)

    @staticmethod
    def _prepare(document: LayoutDocument) -> LayoutDocument:
        """Copy of the draft with trimmed name and only in-range seat label overrides"""
        prepared = copy.deepcopy(document)
        prepared.name = prepared.name.strip()
        for element in prepared.elements:
            element.seat_labels = in_range_seat_labels(element)
        return prepared

    @Logger.io
    async def save(self, *, document: LayoutDocument) -> SaveLayoutResult:
        with self.tracer.start_as_current_span(
            'use_case.save_layout',
            attributes={
                'layout.id': document.id or 0,
                'layout.elements': len(document.elements),
            },
        ):
            if not document.name.strip():
                Logger.base.warning('⚠️ [SAVE_LAYOUT] Rejected save without a layout name')
                return SaveLayoutResult(success=False, message=NAME_REQUIRED_MESSAGE)

            try:
                stored = await self.layout_repo.save(document=self._prepare(document))
            except CustomBaseError as e:
                Logger.base.warning(f'⚠️ [SAVE_LAYOUT] Save failed: {e.message}')
                span = trace.get_current_span()
                span.record_exception(e)
                span.set_status(trace.Status(trace.StatusCode.ERROR, e.message))
                return SaveLayoutResult(success=False, message=e.message, layout_id=document.id)

            Logger.base.info(f'✅ [SAVE_LAYOUT] Layout {stored.id} saved')
            return SaveLayoutResult(success=True, message=SAVED_MESSAGE, layout_id=stored.id)
