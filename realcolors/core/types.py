"""Shared types for realcolors: variants, snapshots and refresh results."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

CUSTOM_PROPERTY_PREFIX = "--"


class Variant(str, Enum):
    """
    Theme/state combination a community style rule applies to.

    The page emits six rule blocks (default and explicit light, browser-dark
    and explicit dark, each with a stickied counterpart); the dark pairs share
    the same values, so four variants cover them.
    """

    LIGHT = "light"
    LIGHT_STICKIED = "light-stickied"
    DARK = "dark"
    DARK_STICKIED = "dark-stickied"


def is_custom_property(name: object) -> bool:
    """True for CSS custom property names such as ``--color-tone-1``."""
    return (
        isinstance(name, str)
        and name.startswith(CUSTOM_PROPERTY_PREFIX)
        and len(name) > len(CUSTOM_PROPERTY_PREFIX)
    )


PropertyMap = Mapping[str, str]


class Snapshot(Mapping[Variant, PropertyMap]):
    """
    Read-only mapping of Variant -> {custom property name: value}.

    Variants with no matching rule are absent rather than mapped to an empty
    dict. Equality is order-independent and also holds against plain dicts
    keyed by the variant strings.
    """

    __slots__ = ("_variants",)

    def __init__(self, variants: Mapping[Any, Mapping[str, str]] | None = None) -> None:
        frozen: dict[Variant, PropertyMap] = {}
        for key, properties in (variants or {}).items():
            variant = Variant(key)
            if not isinstance(properties, Mapping):
                raise ValueError(f"properties for {variant.value!r} must be a mapping")
            checked: dict[str, str] = {}
            for name, value in properties.items():
                if not is_custom_property(name):
                    raise ValueError(f"{name!r} is not a custom property name")
                if not isinstance(value, str):
                    raise ValueError(f"value of {name!r} must be a string, got {type(value).__name__}")
                checked[name] = value
            frozen[variant] = MappingProxyType(checked)
        self._variants: Mapping[Variant, PropertyMap] = MappingProxyType(frozen)

    def __getitem__(self, variant: Variant | str) -> PropertyMap:
        try:
            key = Variant(variant)
        except ValueError:
            raise KeyError(variant) from None
        return self._variants[key]

    def __contains__(self, variant: object) -> bool:
        try:
            return Variant(variant) in self._variants
        except ValueError:
            return False

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        return f"Snapshot({self.to_dict()!r})"

    def replace(self, variant: Variant | str, properties: Mapping[str, str]) -> Snapshot:
        """Return a new Snapshot with ``variant`` set to ``properties``."""
        updated: dict[Variant, Mapping[str, str]] = dict(self._variants)
        updated[Variant(variant)] = properties
        return Snapshot(updated)

    @property
    def property_count(self) -> int:
        return sum(len(props) for props in self._variants.values())

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {variant.value: dict(props) for variant, props in self._variants.items()}

    @classmethod
    def from_dict(cls, data: Any) -> Snapshot:
        """Build a Snapshot from decoded JSON. Raises ValueError on a bad shape."""
        if not isinstance(data, Mapping):
            raise ValueError(f"snapshot must be an object, got {type(data).__name__}")
        return cls(data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> Snapshot:
        # json.JSONDecodeError is a ValueError
        return cls.from_dict(json.loads(text))


@dataclass
class PropertyChange:
    """A custom property whose value differs between two snapshots."""

    variant: Variant
    name: str
    old: str
    new: str


@dataclass
class SnapshotDelta:
    """The differences between a cached and a freshly extracted Snapshot."""

    added_variants: list[Variant] = field(default_factory=list)
    removed_variants: list[Variant] = field(default_factory=list)
    added: dict[Variant, list[str]] = field(default_factory=dict)  # variant -> new names
    removed: dict[Variant, list[str]] = field(default_factory=dict)  # variant -> dropped names
    changed: list[PropertyChange] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (
            self.added_variants
            or self.removed_variants
            or self.added
            or self.removed
            or self.changed
        )

    @property
    def total_changes(self) -> int:
        return (
            len(self.added_variants)
            + len(self.removed_variants)
            + sum(len(names) for names in self.added.values())
            + sum(len(names) for names in self.removed.values())
            + len(self.changed)
        )

    def summary(self) -> str:
        if self.is_empty:
            return "no changes"
        parts: list[str] = []
        if self.added_variants:
            parts.append("new variants: " + ", ".join(v.value for v in self.added_variants))
        if self.removed_variants:
            parts.append("dropped variants: " + ", ".join(v.value for v in self.removed_variants))
        added = sum(len(names) for names in self.added.values())
        removed = sum(len(names) for names in self.removed.values())
        if added:
            parts.append(f"{added} properties added")
        if removed:
            parts.append(f"{removed} properties removed")
        if self.changed:
            parts.append(f"{len(self.changed)} values changed")
        return "; ".join(parts)


@dataclass
class RefreshResult:
    """Outcome of one change-detection run for a subreddit."""

    subreddit: str
    changed: bool
    snapshot: Snapshot
    previous: Snapshot | None = None  # None when nothing was cached yet
    delta: SnapshotDelta | None = None  # None when there was nothing to diff against
