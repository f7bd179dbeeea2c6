"""
Seat Availability Resolver

Single source of truth for what a seat looks like and whether a guest may
click it. Availability sets are read-only snapshots owned by the reservation
backend; nothing here mutates them.

Nothing in this module raises: a seat id the snapshot does not know is simply
available, because ids are derived locally from the layout and a mismatch
with the server must never break the chart.
"""

from collections.abc import Iterable, Set
from typing import Optional

import attrs

from src.service.seating.domain.enum.seat_status import SeatDisableReason, SeatStatus


SeatIds = Iterable[str] | None


def _as_set(seat_ids: SeatIds) -> Set[str]:
    if seat_ids is None:
        return frozenset()
    if isinstance(seat_ids, Set):
        return seat_ids
    if isinstance(seat_ids, str):
        return frozenset((seat_ids,))
    return frozenset(seat_ids)


def _to_frozenset(seat_ids: SeatIds) -> frozenset[str]:
    return frozenset(_as_set(seat_ids))


@attrs.define(frozen=True)
class AvailabilitySnapshot:
    """Reserved / pending / hold seat ids of one event at one point in time"""

    reserved: frozenset[str] = attrs.field(factory=frozenset, converter=_to_frozenset)
    pending: frozenset[str] = attrs.field(factory=frozenset, converter=_to_frozenset)
    hold: frozenset[str] = attrs.field(factory=frozenset, converter=_to_frozenset)

    def status_of(self, seat_id: str, selected: SeatIds = None) -> SeatStatus:
        return resolve_status(seat_id, self.reserved, self.pending, self.hold, selected)

    def filter_unavailable(self, selection: Iterable[str] | None) -> list[str]:
        return filter_unavailable(selection, self.reserved, self.pending, self.hold)

    def disable_reason_for(self, seat_id: str) -> Optional[SeatDisableReason]:
        return disable_reason_for(seat_id, self.reserved, self.pending, self.hold)


EMPTY_SNAPSHOT = AvailabilitySnapshot()


def resolve_status(
    seat_id: str,
    reserved: SeatIds,
    pending: SeatIds,
    hold: SeatIds,
    selected: SeatIds = None,
) -> SeatStatus:
    """Priority: reserved > hold > pending > selected > available"""
    if not seat_id:
        return SeatStatus.AVAILABLE
    if seat_id in _as_set(reserved):
        return SeatStatus.RESERVED
    if seat_id in _as_set(hold):
        return SeatStatus.HOLD
    if seat_id in _as_set(pending):
        return SeatStatus.PENDING
    if seat_id in _as_set(selected):
        return SeatStatus.SELECTED
    return SeatStatus.AVAILABLE


def is_interactable(status: SeatStatus | str) -> bool:
    try:
        return SeatStatus(status).is_interactable
    except ValueError:
        return False


_BLOCKED_REASON: dict[SeatStatus, SeatDisableReason] = {
    SeatStatus.RESERVED: SeatDisableReason.RESERVED,
    SeatStatus.HOLD: SeatDisableReason.HOLD,
    SeatStatus.PENDING: SeatDisableReason.PENDING,
}


def disable_reason_for(
    seat_id: str, reserved: SeatIds, pending: SeatIds, hold: SeatIds = None
) -> Optional[SeatDisableReason]:
    """Reason code for a blocked seat, None when the seat can be clicked"""
    return _BLOCKED_REASON.get(resolve_status(seat_id, reserved, pending, hold))


def filter_unavailable(
    selection: Iterable[str] | None, reserved: SeatIds, pending: SeatIds, hold: SeatIds = None
) -> list[str]:
    """Drop seats that became reserved, pending or held; order is kept"""
    if not selection:
        return []
    blocked = _as_set(reserved) | _as_set(pending) | _as_set(hold)
    return [seat_id for seat_id in selection if seat_id and seat_id not in blocked]


def build_seat_status_map(
    seat_ids: Iterable[str],
    reserved: SeatIds,
    pending: SeatIds,
    hold: SeatIds = None,
    selected: SeatIds = None,
) -> dict[str, SeatStatus]:
    reserved_set, pending_set = _as_set(reserved), _as_set(pending)
    hold_set, selected_set = _as_set(hold), _as_set(selected)
    return {
        seat_id: resolve_status(seat_id, reserved_set, pending_set, hold_set, selected_set)
        for seat_id in seat_ids
    }


@attrs.define(frozen=True)
class SeatStatusVisual:
    status: SeatStatus
    label: str
    tooltip: str


SEAT_STATUS_VISUALS: dict[SeatStatus, SeatStatusVisual] = {
    SeatStatus.AVAILABLE: SeatStatusVisual(
        SeatStatus.AVAILABLE, 'Available', 'Seat currently available.'
    ),
    SeatStatus.SELECTED: SeatStatusVisual(
        SeatStatus.SELECTED, 'Your Selection', 'Seat you have selected.'
    ),
    SeatStatus.HOLD: SeatStatusVisual(
        SeatStatus.HOLD, 'Held (24h)', 'Seat is on a temporary hold window.'
    ),
    SeatStatus.PENDING: SeatStatusVisual(
        SeatStatus.PENDING, 'Pending Review', 'Seat is part of a pending request.'
    ),
    SeatStatus.RESERVED: SeatStatusVisual(
        SeatStatus.RESERVED, 'Reserved', 'Seat is fully confirmed.'
    ),
}

LEGEND_ORDER: tuple[SeatStatus, ...] = (
    SeatStatus.AVAILABLE,
    SeatStatus.SELECTED,
    SeatStatus.HOLD,
    SeatStatus.PENDING,
    SeatStatus.RESERVED,
)


def visual_for(status: SeatStatus) -> SeatStatusVisual:
    return SEAT_STATUS_VISUALS.get(status, SEAT_STATUS_VISUALS[SeatStatus.AVAILABLE])


def legend() -> list[SeatStatusVisual]:
    return [SEAT_STATUS_VISUALS[status] for status in LEGEND_ORDER]
