"""Errors raised by the shift rotation engine."""

from datetime import date


class RosterError(Exception):
    """Base class for every roster resolution failure."""


class UnknownGroup(RosterError):
    """Group identifier is not part of the configured roster."""

    def __init__(self, group: str) -> None:
        super().__init__(f"Unknown group: {group}")
        self.group = group


class InvalidScheduleEntry(RosterError):
    """A cycle slot holds a label outside the known shift labels."""

    def __init__(self, label: object, index: int) -> None:
        super().__init__(f"Non existing shift found: {label} (cycle slot {index})")
        self.label = label
        self.index = index


class NoUpcomingShift(RosterError):
    """Lookahead window ran out without a working shift."""

    def __init__(self, group: str, since: date, days: int) -> None:
        super().__init__(
            f"No upcoming shift found for group: {group} "
            f"within {days} days from {since.isoformat()}"
        )
        self.group = group
        self.since = since
        self.days = days


class NoAdjacentGroup(RosterError):
    """Circular shift-type scan found no group on a neighbouring shift."""

    def __init__(self, group: str) -> None:
        super().__init__(f"No adjacent group found for group: {group}")
        self.group = group
