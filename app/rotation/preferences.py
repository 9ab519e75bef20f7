"""Persistence of the user's selected group."""

import json
import logging
from pathlib import Path
from typing import Protocol

from .models import RosterConfig

logger = logging.getLogger(__name__)

SELECTED_GROUP_KEY = "selectedGroup"
DEFAULT_GROUP = "B"


class PreferenceStore(Protocol):
    """Minimal key-value storage for user preferences."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    """Preferences kept for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFilePreferenceStore:
    """Preferences stored as one JSON object on disk.

    The file is created on first write. A file that exists but does not hold
    a JSON object raises instead of being overwritten.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Preference file {self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


class GroupSelection:
    """The selected group, read from and written through a ``PreferenceStore``."""

    def __init__(self, store: PreferenceStore, default: str = DEFAULT_GROUP) -> None:
        self.store = store
        self.default = default

    @property
    def group(self) -> str:
        return self.store.get(SELECTED_GROUP_KEY) or self.default

    def set(self, group: str, config: RosterConfig | None = None) -> None:
        """Select ``group`` and persist it.

        With ``config`` given the group must exist in it (``UnknownGroup``
        otherwise); nothing is written in that case.
        """
        if config is not None:
            config.group_position(group)
        self.store.set(SELECTED_GROUP_KEY, group)
        logger.info("Selected group set to %s", group)
