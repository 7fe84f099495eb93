"""Canvas profiles and YAML configuration loading.

A :class:`Config` describes the fixed drawing surface: canvas size, how the
canvas height is chosen, margins, colors, bullet geometry and spacing.
Per-render font size and width overrides live in
:class:`svg_ticket.layout.RenderOptions` instead.

Example config file::

    profile: compact
    height_mode: fixed
    canvas_height: 1200
    bullet_color: "#FFC917"
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from svg_ticket.exceptions import ConfigError


class CanvasHeightMode(str, Enum):
    """How the canvas height is determined."""

    FIXED = "fixed"  # canvas_height as configured; overflow is clipped by the viewer
    DYNAMIC = "dynamic"  # final cursor position plus margin_bottom


@dataclass(frozen=True)
class Config:
    """Canvas profile used by layout and rendering."""

    canvas_width: float = 1025
    canvas_height: float = 1526
    height_mode: CanvasHeightMode = CanvasHeightMode.FIXED
    font_family: str = "Arial, Helvetica, sans-serif"
    header_font_size: float = 60
    body_font_size: float = 24
    line_height: float = 1.4
    header_spacing: float = 1.5
    margin_top: float = 50
    margin_left: float = 50
    margin_bottom: float = 50
    bullet_size: float = 26
    bullet_color: str = "#0079D3"
    text_color: str = "#000000"
    background_color: str = "white"
    bullet_text_gap: float = 50
    paragraph_gap: float = 50
    bullet_offset_ratio: float = 0.7
    char_width_ratio: float = 0.55
    role_attributes: bool = True

    @property
    def default_max_line_width(self) -> float:
        """Text block width between the left and mirrored right margin."""
        return self.canvas_width - 2 * self.margin_left

    @classmethod
    def profile(cls, name: str) -> Config:
        """Return a built-in profile by name.

        Raises:
            ConfigError: If no profile has that name.
        """
        try:
            return PROFILES[name]
        except KeyError:
            known = ", ".join(sorted(PROFILES))
            raise ConfigError(f"Unknown profile '{name}' (known: {known})") from None

    @classmethod
    def load(
        cls, path: Path | str | None = None, profile: str | None = None
    ) -> Config:
        """Load a config from a YAML file, or a built-in profile if no path.

        Args:
            path: YAML file with field overrides.
            profile: Base profile for the overrides. A ``profile:`` key in
                the file must name the same profile if both are given.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            ConfigError: If the file content is invalid.
        """
        if path is None:
            return cls.profile(profile or DEFAULT_PROFILE)

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            raise ConfigError(f"Empty YAML config file: {path}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        return cls.from_mapping(data, profile)

    @classmethod
    def from_mapping(
        cls, data: dict[str, Any], profile: str | None = None
    ) -> Config:
        """Build a config from a profile name plus field overrides."""
        data = dict(data)
        named = data.pop("profile", None)
        if named is not None and profile is not None and str(named) != profile:
            raise ConfigError(
                f"Config file selects profile '{named}' but '{profile}' was requested"
            )
        base = cls.profile(str(named or profile or DEFAULT_PROFILE))

        known = {f.name: f for f in fields(cls)}
        overrides: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ConfigError(f"Unknown config key: {key}")
            overrides[key] = _coerce(key, value, getattr(base, key))

        return replace(base, **overrides)

    def to_mapping(self) -> dict[str, Any]:
        """Return the config as plain YAML-friendly values."""
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = value.value if isinstance(value, Enum) else value
        return result


def _coerce(key: str, value: Any, default: Any) -> Any:
    if isinstance(default, CanvasHeightMode):
        try:
            return CanvasHeightMode(value)
        except ValueError:
            allowed = ", ".join(m.value for m in CanvasHeightMode)
            raise ConfigError(
                f"{key}: must be one of {allowed}, got {value!r}"
            ) from None
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"{key}: expected a boolean, got {value!r}")
        return value
    if isinstance(default, (int, float)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{key}: expected a number, got {value!r}")
        return value
    if not isinstance(value, str):
        raise ConfigError(f"{key}: expected a string, got {value!r}")
    return value


DEFAULT_PROFILE = "ticket"

PROFILES: dict[str, Config] = {
    "ticket": Config(),
    "compact": Config(
        canvas_width=800,
        height_mode=CanvasHeightMode.DYNAMIC,
        header_font_size=32,
        body_font_size=20,
        bullet_size=12,
        bullet_text_gap=30,
        paragraph_gap=24,
        bullet_offset_ratio=0.6,
    ),
}
