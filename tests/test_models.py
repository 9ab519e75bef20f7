"""Tests for roster configuration loading and validation."""

import json
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from app.rotation.config import ROSTER_PATH_ENV
from app.rotation.errors import UnknownGroup
from app.rotation.models import RosterConfig, ShiftLabel, load_roster


def _roster_dict(**overrides) -> dict:
    data = {
        "startDate": "2022-01-03",
        "shiftOffsetPerGroup": 7,
        "groups": ["A", "B"],
        "schedule": ["FM", "EM", "N", "Fri"],
        "shiftTypes": [
            {"name": "FM", "colorHue": 45, "lightnessText": 30, "darkLightnessText": 80},
            {"name": "EM", "colorHue": 200},
            {"name": "N"},
            {"name": "Fri"},
        ],
    }
    data.update(overrides)
    return data


def test_load_bundled_roster() -> None:
    roster = load_roster()
    assert roster.start_date == date(2022, 1, 3)
    assert roster.shift_offset_per_group == 7
    assert roster.groups == ["A", "B", "C", "D", "E"]
    assert roster.cycle_length == 35
    assert [s.name for s in roster.shift_types] == list(ShiftLabel)


def test_load_roster_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(_roster_dict(groups=["X", "Y", "Z"])), encoding="utf-8")
    monkeypatch.setenv(ROSTER_PATH_ENV, str(path))

    assert load_roster().groups == ["X", "Y", "Z"]


def test_snake_case_construction_matches_json() -> None:
    from_json = RosterConfig.model_validate(_roster_dict())
    from_names = RosterConfig(
        start_date=date(2022, 1, 3),
        shift_offset_per_group=7,
        groups=["A", "B"],
        schedule=["FM", "EM", "N", "Fri"],
        shift_types=from_json.shift_types,
    )
    assert from_names == from_json


def test_roster_is_immutable() -> None:
    roster = RosterConfig.model_validate(_roster_dict())
    with pytest.raises(ValidationError):
        roster.groups = ["Q"]


def test_duplicate_groups_rejected() -> None:
    with pytest.raises(ValidationError, match="duplicate groups: A"):
        RosterConfig.model_validate(_roster_dict(groups=["A", "B", "A"]))


def test_empty_schedule_rejected() -> None:
    with pytest.raises(ValidationError):
        RosterConfig.model_validate(_roster_dict(schedule=[]))


def test_schedule_entries_must_be_declared() -> None:
    with pytest.raises(ValidationError, match="undeclared shift types: XX"):
        RosterConfig.model_validate(_roster_dict(schedule=["FM", "XX"]))


def test_shift_types_must_cover_one_day() -> None:
    """One pass over the shift types has to be exactly one calendar day."""
    short = _roster_dict(shiftTypes=[{"name": "FM"}, {"name": "EM"}, {"name": "Fri"}])
    with pytest.raises(ValidationError, match="missing: N"):
        RosterConfig.model_validate(short)

    doubled = _roster_dict(
        shiftTypes=[{"name": "FM"}, {"name": "EM"}, {"name": "N"}, {"name": "Fri"}, {"name": "N"}]
    )
    with pytest.raises(ValidationError, match="unique"):
        RosterConfig.model_validate(doubled)


def test_unknown_shift_type_name_rejected() -> None:
    bad = _roster_dict(shiftTypes=[{"name": "FM"}, {"name": "EM"}, {"name": "N"}, {"name": "OFF"}])
    with pytest.raises(ValidationError):
        RosterConfig.model_validate(bad)


def test_group_lookups() -> None:
    roster = RosterConfig.model_validate(_roster_dict())
    assert roster.group_position("B") == 1
    assert roster.group_offset("B") == 7
    with pytest.raises(UnknownGroup, match="Unknown group: C"):
        roster.group_offset("C")


def test_shift_presentation_lookups() -> None:
    roster = RosterConfig.model_validate(_roster_dict())
    assert roster.shift_type_position(ShiftLabel.NIGHT) == 2
    assert roster.shift_hue("FM") == 45
    assert roster.shift_hue("N") is None
    assert roster.shift_hue("nope") is None
    assert roster.shift_text_lightness("FM") == 30
    assert roster.shift_text_lightness("FM", mode="dark") == 80
    assert roster.shift_text_lightness("nope") is None
