"""
Table Shape Enum

A shape picks the seat geometry template and the canonical seat count.
Standing areas are open-ended (`standing-N`) so they are parsed, not enumerated.
"""

from enum import StrEnum


class TableShape(StrEnum):
    TABLE_2 = 'table-2'
    TABLE_4 = 'table-4'
    TABLE_6 = 'table-6'
    TABLE_8 = 'table-8'
    ROUND_6 = 'round-6'
    ROUND_8 = 'round-8'
    BAR_6 = 'bar-6'
    BOOTH_4 = 'booth-4'
    CHAIR = 'chair'


class ShapeFamily(StrEnum):
    RECTANGULAR = 'rectangular'
    ROUND = 'round'
    BAR = 'bar'
    BOOTH = 'booth'
    STANDING = 'standing'
    CHAIR = 'chair'


STANDING_PREFIX = 'standing-'
DEFAULT_STANDING_CAPACITY = 10

# Legacy layouts saved the six-top without the dash
SHAPE_ALIASES: dict[str, TableShape] = {
    'table6': TableShape.TABLE_6,
}

SHAPE_CAPACITY: dict[TableShape, int] = {
    TableShape.TABLE_2: 2,
    TableShape.TABLE_4: 4,
    TableShape.TABLE_6: 6,
    TableShape.TABLE_8: 8,
    TableShape.ROUND_6: 6,
    TableShape.ROUND_8: 8,
    TableShape.BAR_6: 6,
    TableShape.BOOTH_4: 4,
    TableShape.CHAIR: 1,
}

SHAPE_FAMILY: dict[TableShape, ShapeFamily] = {
    TableShape.TABLE_2: ShapeFamily.RECTANGULAR,
    TableShape.TABLE_4: ShapeFamily.RECTANGULAR,
    TableShape.TABLE_6: ShapeFamily.RECTANGULAR,
    TableShape.TABLE_8: ShapeFamily.RECTANGULAR,
    TableShape.ROUND_6: ShapeFamily.ROUND,
    TableShape.ROUND_8: ShapeFamily.ROUND,
    TableShape.BAR_6: ShapeFamily.BAR,
    TableShape.BOOTH_4: ShapeFamily.BOOTH,
    TableShape.CHAIR: ShapeFamily.CHAIR,
}

FALLBACK_SHAPE = TableShape.TABLE_6
