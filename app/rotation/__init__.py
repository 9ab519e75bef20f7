"""Rotating multi-group shift roster."""

from .errors import InvalidScheduleEntry, NoAdjacentGroup, NoUpcomingShift, RosterError, UnknownGroup
from .lookahead import MAX_SHIFT_LOOKAHEAD_DAYS, find_adjacent_group, find_next_shift
from .models import (
    AdjacentShift,
    ResolvedShift,
    RosterConfig,
    ShiftLabel,
    ShiftTypeInfo,
    UpcomingShift,
    load_roster,
)
from .preferences import (
    GroupSelection,
    InMemoryPreferenceStore,
    JsonFilePreferenceStore,
    PreferenceStore,
)
from .resolver import resolve_range, resolve_shift, roster_for_date
from .timing import shift_start_hour

__all__ = [
    "AdjacentShift",
    "GroupSelection",
    "InMemoryPreferenceStore",
    "InvalidScheduleEntry",
    "JsonFilePreferenceStore",
    "MAX_SHIFT_LOOKAHEAD_DAYS",
    "NoAdjacentGroup",
    "NoUpcomingShift",
    "PreferenceStore",
    "ResolvedShift",
    "RosterConfig",
    "RosterError",
    "ShiftLabel",
    "ShiftTypeInfo",
    "UnknownGroup",
    "UpcomingShift",
    "find_adjacent_group",
    "find_next_shift",
    "load_roster",
    "resolve_range",
    "resolve_shift",
    "roster_for_date",
    "shift_start_hour",
]
