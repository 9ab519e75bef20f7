"""Map (group, date) to the shift label of the rotation."""

from datetime import date, timedelta

from .dates import as_date, day_difference
from .errors import InvalidScheduleEntry
from .models import ResolvedShift, RosterConfig, ShiftLabel


def cycle_index(config: RosterConfig, group: str, on: date) -> int:
    """Position in ``config.schedule`` that ``group`` works on ``on``.

    Python's ``%`` is floored, so dates before ``start_date`` and negative or
    oversized group offsets all land inside ``[0, cycle_length)``.
    """
    group_offset = config.group_offset(group)
    day_from_start = day_difference(config.start_date, on)
    cycle_length = config.cycle_length
    return (day_from_start % cycle_length + group_offset) % cycle_length


def resolve_shift(config: RosterConfig, group: str, on: date) -> ShiftLabel:
    """Shift label of ``group`` on ``on``.

    Raises:
        UnknownGroup: ``group`` is not configured.
        InvalidScheduleEntry: the cycle slot holds an unknown label.
    """
    index = cycle_index(config, group, on)
    entry = config.schedule[index]
    try:
        return ShiftLabel(entry)
    except ValueError:
        raise InvalidScheduleEntry(entry, index) from None


def resolve_range(config: RosterConfig, group: str, start: date, days: int) -> list[ResolvedShift]:
    """Resolved shifts of one group for ``days`` consecutive dates from ``start``."""
    first = as_date(start)
    resolved: list[ResolvedShift] = []
    for offset in range(days):
        current = first + timedelta(days=offset)
        resolved.append(
            ResolvedShift(shift_date=current, group=group, label=resolve_shift(config, group, current))
        )
    return resolved


def roster_for_date(config: RosterConfig, on: date) -> dict[str, ShiftLabel]:
    """Every group's label on ``on``, in configured group order."""
    return {group: resolve_shift(config, group, on) for group in config.groups}
