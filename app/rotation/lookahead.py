"""Forward queries on the rotation: next working shift and neighbouring groups."""

import logging
from datetime import datetime, timedelta
from typing import Literal

from .errors import NoAdjacentGroup, NoUpcomingShift
from .models import AdjacentShift, RosterConfig, UpcomingShift
from .resolver import resolve_shift
from .timing import shift_start_hour

logger = logging.getLogger(__name__)

MAX_SHIFT_LOOKAHEAD_DAYS = 14

Direction = Literal["previous", "next"]


def find_next_shift(
    config: RosterConfig,
    group: str,
    now: datetime | None = None,
) -> UpcomingShift:
    """Next date on which ``group`` works, with the shift label.

    Today's working shift counts as upcoming until its official start hour;
    from that hour on the scan starts tomorrow. On a rest day the scan always
    starts today. At most ``MAX_SHIFT_LOOKAHEAD_DAYS`` days are inspected.

    Raises:
        UnknownGroup: ``group`` is not configured.
        NoUpcomingShift: no working day inside the lookahead window.
    """
    now = now or datetime.now()
    today = now.date()

    start_day = 0
    today_label = resolve_shift(config, group, today)
    if not today_label.is_rest:
        cutover_hour = shift_start_hour(today_label, today)
        if now.hour >= cutover_hour:
            start_day = 1
        logger.debug(
            "Group %s works %s today, cutover %02d:00, now %02d:%02d -> start day %d",
            group,
            today_label.value,
            cutover_hour,
            now.hour,
            now.minute,
            start_day,
        )

    for i in range(start_day, start_day + MAX_SHIFT_LOOKAHEAD_DAYS):
        check_date = today + timedelta(days=i)
        label = resolve_shift(config, group, check_date)
        if not label.is_rest:
            return UpcomingShift(shift_date=check_date, label=label)

    raise NoUpcomingShift(group, today + timedelta(days=start_day), MAX_SHIFT_LOOKAHEAD_DAYS)


def find_adjacent_group(
    config: RosterConfig,
    group: str,
    direction: Direction,
    now: datetime | None = None,
) -> AdjacentShift:
    """Group working the live shift slot just before/after ``group``'s next shift.

    Shift types are walked circularly in configured order, skipping the rest
    slot. Stepping past either end of the list moves one calendar day in the
    walking direction. The walk visits each slot at most once.

    Raises:
        UnknownGroup: ``group`` is not configured.
        NoAdjacentGroup: no group found, or ``group`` has no upcoming shift.
    """
    if direction not in ("previous", "next"):
        raise ValueError(f"direction must be 'previous' or 'next', got {direction!r}")

    try:
        upcoming = find_next_shift(config, group, now)
    except NoUpcomingShift as exc:
        raise NoAdjacentGroup(group) from exc

    step = 1 if direction == "next" else -1
    slot_count = len(config.shift_types)
    shift_index = config.shift_type_position(upcoming.label)
    shift_date = upcoming.shift_date

    for _ in range(slot_count):
        shift_index += step

        if shift_index < 0:
            shift_index += slot_count
            shift_date += timedelta(days=step)
        elif shift_index >= slot_count:
            shift_index -= slot_count
            shift_date += timedelta(days=step)

        candidate = config.shift_types[shift_index].name
        if candidate.is_rest:
            continue

        for other in config.groups:
            if resolve_shift(config, other, shift_date) == candidate:
                logger.debug(
                    "%s shift of %s: %s on %s (%s)",
                    direction,
                    group,
                    other,
                    shift_date.isoformat(),
                    candidate.value,
                )
                return AdjacentShift(group=other, label=candidate, shift_date=shift_date)

    raise NoAdjacentGroup(group)
