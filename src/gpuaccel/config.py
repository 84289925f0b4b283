"""Accelerator configuration: an immutable value built once by the caller."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

__all__ = ["AcceleratorConfig", "ConfigError", "DEFAULT_OPTIONS", "split_list"]


class ConfigError(ValueError):
    """Raised when configuration options cannot be interpreted."""


# Options in the shape the settings store keeps them: "yes" flags and
# comma-separated lists.
DEFAULT_OPTIONS: dict[str, str] = {
    "enable_transform": "yes",
    "enable_will_change": "yes",
    "enable_backface": "yes",
    "enable_perspective": "yes",
    "exclude_selectors": "",
    "target_selectors": "animation, transition, @keyframes",
}

_FLAG_FIELDS = (
    "enable_transform",
    "enable_will_change",
    "enable_backface",
    "enable_perspective",
)


def split_list(raw: str) -> tuple[str, ...]:
    """Split a comma-separated option into trimmed entries, keeping empties out."""
    entries: list[str] = []
    for part in raw.split(","):
        part = part.strip()
        if part and part not in entries:
            entries.append(part)
    return tuple(entries)


def _flag(key: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value == "yes"
    if value is None:
        return False
    raise ConfigError(f"Option {key!r} must be a boolean or 'yes', got {value!r}")


def _entries(key: str, value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        return split_list(value)
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise ConfigError(f"Option {key!r} must contain only strings")
        return split_list(",".join(value))
    raise ConfigError(
        f"Option {key!r} must be a comma-separated string or list, got {value!r}"
    )


@dataclass(frozen=True)
class AcceleratorConfig:
    """Which GPU hints to inject and which rule blocks receive them.

    ``exclude_selectors`` and ``target_properties`` are matched as raw,
    case-sensitive substrings.  Empty entries are ignored when matching.
    """

    enable_transform: bool = True
    enable_will_change: bool = True
    enable_backface: bool = True
    enable_perspective: bool = True
    exclude_selectors: tuple[str, ...] = ()
    target_properties: tuple[str, ...] = ("animation", "transition", "@keyframes")

    def __post_init__(self) -> None:
        for name in ("exclude_selectors", "target_properties"):
            if not isinstance(getattr(self, name), tuple):
                raise TypeError(f"{name} must be a tuple of strings")

    @property
    def any_enabled(self) -> bool:
        """True if at least one declaration would be injected."""
        return any(getattr(self, name) for name in _FLAG_FIELDS)

    # --- options mapping ------------------------------------------------------

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> AcceleratorConfig:
        """Build a config from a settings mapping, merging in defaults.

        Flags are enabled only by the exact string ``"yes"`` (or ``True``),
        as the settings store writes it; lists are comma-separated strings (or
        lists of strings).  The target list is read from
        ``target_selectors``, with ``target_properties`` accepted as an alias.
        Unknown keys are ignored.
        """
        merged: dict[str, Any] = dict(DEFAULT_OPTIONS)
        merged.update(options)
        if "target_properties" in options and "target_selectors" not in options:
            merged["target_selectors"] = options["target_properties"]

        flags = {name: _flag(name, merged[name]) for name in _FLAG_FIELDS}
        return cls(
            exclude_selectors=_entries("exclude_selectors", merged["exclude_selectors"]),
            target_properties=_entries("target_selectors", merged["target_selectors"]),
            **flags,
        )

    def to_options(self) -> dict[str, str]:
        """Inverse of :meth:`from_options`."""
        options = {name: "yes" if getattr(self, name) else "" for name in _FLAG_FIELDS}
        options["exclude_selectors"] = ", ".join(self.exclude_selectors)
        options["target_selectors"] = ", ".join(self.target_properties)
        return options

    # --- JSON files -----------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> AcceleratorConfig:
        """Read options from the JSON object stored at *path*."""
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Config file {path} is not UTF-8 text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        return cls.from_options(data)

    def save(self, path: Path) -> None:
        """Write this config to *path* as a JSON options object."""
        Path(path).write_text(json.dumps(self.to_options(), indent=2), encoding="utf-8")
