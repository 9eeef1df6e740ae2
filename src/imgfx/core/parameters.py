"""Current and neutral values for every filter slider."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ..errors import InvalidParameterError

# The order mirrors the slider stack of the editor and is reused wherever the
# parameters are listed, serialised, or exposed as CLI options.
FILTER_KEYS = (
    "blur",
    "brightness",
    "contrast",
    "grayscale",
    "hue",
    "invert",
    "opacity",
    "saturate",
    "sepia",
    "border",
)

FILTER_DEFAULTS: Mapping[str, float] = MappingProxyType(
    {
        "blur": 0.0,
        "brightness": 1.0,
        "contrast": 1.0,
        "grayscale": 0.0,
        "hue": 0.0,
        "invert": 0.0,
        "opacity": 1.0,
        "saturate": 1.0,
        "sepia": 0.0,
        "border": 0.0,
    }
)
"""Neutral value of each filter; a filter at its neutral value is a no-op."""


def _coerce(name: str, value: Any) -> float:
    """Return *value* as a finite float or raise :class:`InvalidParameterError`."""

    try:
        numeric = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"{name}: expected a number, got {value!r}") from exc
    if not math.isfinite(numeric):
        raise InvalidParameterError(f"{name}: value must be finite, got {value!r}")
    return numeric


def resolve_blur_radius(value: float) -> int:
    """Round *value* half up to an integer radius, floored at zero."""

    return max(0, math.floor(float(value) + 0.5))


def _normalise(mapping: Mapping[str, Any], label: str) -> dict[str, float]:
    keys = set(mapping)
    expected = set(FILTER_KEYS)
    if keys != expected:
        missing = sorted(expected - keys)
        unknown = sorted(keys - expected)
        raise InvalidParameterError(
            f"{label} must define exactly the filter keys "
            f"(missing: {missing}, unknown: {unknown})"
        )
    return {key: _coerce(key, mapping[key]) for key in FILTER_KEYS}


@dataclass(frozen=True)
class FilterParameters:
    """Immutable snapshot of the slider values together with their defaults.

    A filter is active iff its current value differs from its own default.
    The comparison is exact: a value a hair away from neutral still runs the
    filter, exactly like the slider it came from.
    """

    values: Mapping[str, float] = field(default_factory=lambda: dict(FILTER_DEFAULTS))
    defaults: Mapping[str, float] = field(default_factory=lambda: dict(FILTER_DEFAULTS))

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(_normalise(self.values, "values")))
        object.__setattr__(
            self, "defaults", MappingProxyType(_normalise(self.defaults, "defaults"))
        )

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any] | None = None) -> "FilterParameters":
        """Return parameters starting from the defaults with *overrides* applied."""

        values: dict[str, Any] = dict(FILTER_DEFAULTS)
        for key, value in (overrides or {}).items():
            if key not in FILTER_DEFAULTS:
                raise InvalidParameterError(f"Unknown filter: {key!r}")
            values[key] = value
        return cls(values=values)

    def value(self, name: str) -> float:
        """Return the current value of filter *name*."""

        self._check(name)
        return self.values[name]

    def default(self, name: str) -> float:
        """Return the neutral value of filter *name*."""

        self._check(name)
        return self.defaults[name]

    def is_active(self, name: str) -> bool:
        """Return ``True`` when filter *name* differs from its default."""

        self._check(name)
        return self.values[name] != self.defaults[name]

    def active_filters(self) -> tuple[str, ...]:
        """Return the names of all active filters in slider order."""

        return tuple(key for key in FILTER_KEYS if self.values[key] != self.defaults[key])

    def with_value(self, name: str, value: Any) -> "FilterParameters":
        """Return a copy with filter *name* set to *value*."""

        return self.with_values({name: value})

    def with_values(self, overrides: Mapping[str, Any]) -> "FilterParameters":
        """Return a copy with every entry of *overrides* applied at once."""

        values: dict[str, Any] = dict(self.values)
        for key, value in overrides.items():
            self._check(key)
            values[key] = value
        return FilterParameters(values=values, defaults=dict(self.defaults))

    def reset(self) -> "FilterParameters":
        """Return a copy with every filter back at its default."""

        return FilterParameters(values=dict(self.defaults), defaults=dict(self.defaults))

    def blur_radius(self) -> int:
        """Return the blur radius rounded half up and floored at zero."""

        return resolve_blur_radius(self.values["blur"])

    def border_width(self) -> float:
        """Return the border width, with negative values treated as no border."""

        return max(0.0, self.values["border"])

    def to_dict(self) -> dict[str, float]:
        """Return the current values as a plain dictionary."""

        return dict(self.values)

    @staticmethod
    def _check(name: str) -> None:
        if name not in FILTER_DEFAULTS:
            raise InvalidParameterError(f"Unknown filter: {name!r}")


__all__ = ["FILTER_DEFAULTS", "FILTER_KEYS", "FilterParameters", "resolve_blur_radius"]
