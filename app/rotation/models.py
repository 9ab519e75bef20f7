"""Data models for the roster configuration and resolved shifts."""

import logging
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .config import roster_path
from .errors import UnknownGroup

logger = logging.getLogger(__name__)


class ShiftLabel(str, Enum):
    """Closed set of labels a cycle slot may hold."""

    MORNING = "FM"
    EVENING = "EM"
    NIGHT = "N"
    REST = "Fri"  # rotation rest day, not the weekday

    @property
    def is_rest(self) -> bool:
        return self is ShiftLabel.REST


_CAMEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ShiftTypeInfo(BaseModel):
    """One slot of the day plus its presentation metadata."""

    model_config = _CAMEL_CONFIG

    name: ShiftLabel
    title: str | None = None
    color_hue: int | None = None
    lightness_text: int | None = None
    dark_lightness_text: int | None = None


class RosterConfig(BaseModel):
    """Static rotation configuration, validated once when loaded.

    ``schedule`` is the cycle applied to the first group from ``start_date``;
    every further group runs the same cycle shifted by
    ``shift_offset_per_group`` days per position in ``groups``.
    ``shift_types`` lists the slots of one calendar day in order and is what
    adjacency walks over.
    """

    model_config = _CAMEL_CONFIG

    start_date: date
    shift_offset_per_group: int
    groups: list[str] = Field(min_length=1)
    schedule: list[str] = Field(min_length=1)
    shift_types: list[ShiftTypeInfo]

    _group_positions: dict[str, int] = PrivateAttr(default_factory=dict)
    _shift_type_positions: dict[ShiftLabel, int] = PrivateAttr(default_factory=dict)

    @field_validator("groups")
    @classmethod
    def groups_unique(cls, v: list[str]) -> list[str]:
        duplicates = sorted({g for g in v if v.count(g) > 1})
        if duplicates:
            raise ValueError(f"duplicate groups: {', '.join(duplicates)}")
        return v

    @field_validator("shift_types")
    @classmethod
    def one_slot_per_label(cls, v: list[ShiftTypeInfo]) -> list[ShiftTypeInfo]:
        """Each label must appear exactly once so one pass over the list is one day."""
        names = [s.name for s in v]
        if len(set(names)) != len(names):
            raise ValueError("shift type names must be unique")
        missing = set(ShiftLabel) - set(names)
        if missing:
            raise ValueError(
                "shift types must cover every slot of the day, missing: "
                + ", ".join(sorted(m.value for m in missing))
            )
        return v

    @model_validator(mode="after")
    def schedule_uses_known_shift_types(self) -> "RosterConfig":
        known = {s.name.value for s in self.shift_types}
        unknown = sorted({entry for entry in self.schedule if entry not in known})
        if unknown:
            raise ValueError(f"schedule contains undeclared shift types: {', '.join(unknown)}")
        return self

    def model_post_init(self, __context: Any) -> None:
        self._build_lookups()

    def _build_lookups(self) -> None:
        self._group_positions = {g: i for i, g in enumerate(self.groups)}
        self._shift_type_positions = {s.name: i for i, s in enumerate(self.shift_types)}

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "RosterConfig":
        """Copy without validation; lookup maps are rebuilt from the copied fields."""
        copied = super().model_copy(update=update, deep=deep)
        copied._build_lookups()
        return copied

    @property
    def cycle_length(self) -> int:
        return len(self.schedule)

    def group_position(self, group: str) -> int:
        try:
            return self._group_positions[group]
        except KeyError:
            raise UnknownGroup(group) from None

    def group_offset(self, group: str) -> int:
        """Phase shift of ``group`` in days relative to the first group."""
        return self.group_position(group) * self.shift_offset_per_group

    def shift_type_position(self, label: ShiftLabel) -> int:
        return self._shift_type_positions[ShiftLabel(label)]

    def shift_type(self, name: str) -> ShiftTypeInfo | None:
        try:
            return self.shift_types[self._shift_type_positions[ShiftLabel(name)]]
        except (KeyError, ValueError):
            return None

    def shift_hue(self, name: str) -> int | None:
        """Colour hue used to paint ``name``; None for unknown shift types."""
        shift = self.shift_type(name)
        return shift.color_hue if shift else None

    def shift_text_lightness(self, name: str, mode: str = "light") -> int | None:
        shift = self.shift_type(name)
        if shift is None:
            return None
        if mode == "light":
            return shift.lightness_text
        return shift.dark_lightness_text


class ResolvedShift(BaseModel):
    """Label one group works on one date."""

    model_config = ConfigDict(frozen=True)

    shift_date: date
    group: str
    label: ShiftLabel


class UpcomingShift(BaseModel):
    """Next working shift of a group."""

    model_config = ConfigDict(frozen=True)

    shift_date: date
    label: ShiftLabel


class AdjacentShift(BaseModel):
    """Group on the neighbouring live shift slot."""

    model_config = ConfigDict(frozen=True)

    group: str
    label: ShiftLabel
    shift_date: date


def load_roster(path: Path | None = None) -> RosterConfig:
    """Load roster configuration from JSON (``ROTATION_ROSTER_PATH`` or bundled file)."""
    path = path or roster_path()
    config = RosterConfig.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded roster from %s: %d groups, %d-day cycle starting %s",
        path,
        len(config.groups),
        config.cycle_length,
        config.start_date.isoformat(),
    )
    return config
