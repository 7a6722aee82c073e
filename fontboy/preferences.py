"""User settings stored as a named JSON file in the settings directory."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator, MutableMapping
from pathlib import Path
from typing import Any


def default_settings_directory() -> Path:
    """Return the per-user settings directory."""
    base = os.environ.get("XDG_CONFIG_HOME")
    return Path(base) if base else Path.home() / ".config"


class Preferences(MutableMapping):
    """A mapping of settings loaded from a file and written back on save.

    A missing or unreadable file yields empty settings; ``loaded`` tells
    whether the file was read. Used as a context manager, the settings are
    saved on exit.
    """

    def __init__(self, filename: str, directory: str | os.PathLike | None = None):
        base = Path(directory) if directory is not None else default_settings_directory()
        self.path = base / filename
        self._values: dict[str, Any] = {}
        self.loaded = False
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return
        if isinstance(data, dict):
            self._values = data
            self.loaded = True

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __delitem__(self, name: str) -> None:
        if name not in self._values:
            raise KeyError(f"no setting named {name!r}")
        self._values.pop(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def set(self, name: str, value: Any) -> None:
        """Replace the value of ``name``, adding it if absent."""
        self._values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def save(self) -> None:
        """Write the settings to their file, creating the directory if needed."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._values, indent=2), encoding="utf-8")

    def __enter__(self) -> Preferences:
        return self

    def __exit__(self, *args: object) -> None:
        self.save()