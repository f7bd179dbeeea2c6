from enum import StrEnum


class ElementType(StrEnum):
    TABLE = 'table'
    CHAIR = 'chair'
    MARKER = 'marker'
    AREA = 'area'

    @classmethod
    def parse(cls, value: object) -> 'ElementType':
        """Lenient parse; blank or unknown values are treated as tables"""
        try:
            return cls(str(value or cls.TABLE).strip().lower())
        except ValueError:
            return cls.TABLE

    @property
    def is_seat_bearing(self) -> bool:
        return self in (ElementType.TABLE, ElementType.CHAIR)
