from typing import Optional

import attrs


@attrs.define
class SaveLayoutResult:
    success: bool
    message: str
    layout_id: Optional[int] = None
