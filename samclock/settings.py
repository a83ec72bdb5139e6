"""Persistent clock preferences."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_path

_BOOL_KEYS = {
    "has_sec_hand": "hasSecHand",
    "has_circle": "hasCircle",
    "has_five_minute_marks": "hasFiveMinuteMarks",
    "has_minute_marks": "hasMinuteMarks",
    "has_points": "hasPoints",
    "has_sweeping_second_hand": "hasSweepingSecondHand",
    "has_rounded_hand_edges": "hasRoundedHandEdges",
}


def default_settings_path() -> Path:
    """Return the per-user location of the settings file."""
    return user_config_path("SamClock", "JJSoft") / "settings.json"


def _pair(value, default: tuple[int, int]) -> tuple[int, int]:
    if (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    ):
        return (value[0], value[1])
    return default


def _flag(value, default: bool) -> bool:
    return value if isinstance(value, bool) else default


@dataclass
class ClockSettings:
    """Window placement and display options remembered between runs."""

    position: tuple[int, int] = (100, 100)
    size: tuple[int, int] = (400, 400)
    has_sec_hand: bool = True
    has_circle: bool = True
    has_five_minute_marks: bool = True
    has_minute_marks: bool = True
    has_points: bool = False
    has_sweeping_second_hand: bool = False
    has_rounded_hand_edges: bool = False

    @classmethod
    def load(cls, path: Path | str | None = None) -> ClockSettings:
        """Read settings, using defaults for anything missing or unreadable."""
        path = Path(path) if path is not None else default_settings_path()
        defaults = cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return defaults
        if not isinstance(data, dict):
            return defaults
        flags = {
            attr: _flag(data.get(key), getattr(defaults, attr))
            for attr, key in _BOOL_KEYS.items()
        }
        return cls(
            position=_pair(data.get("pos"), defaults.position),
            size=_pair(data.get("size"), defaults.size),
            **flags,
        )

    def save(self, path: Path | str | None = None) -> None:
        """Write settings, creating the directory if needed."""
        path = Path(path) if path is not None else default_settings_path()
        data = {"pos": list(self.position), "size": list(self.size)}
        data.update({key: getattr(self, attr) for attr, key in _BOOL_KEYS.items()})
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")