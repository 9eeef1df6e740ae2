"""Save and restore slider values as JSON presets."""

from __future__ import annotations

from pathlib import Path

from ..core.parameters import FilterParameters
from ..errors import InvalidParameterError, PresetInvalidError
from ..utils.jsonio import read_json, write_json

PRESET_VERSION = 1


def load_preset(path: Path | str) -> FilterParameters:
    """Return the parameters stored in *path*.

    Filters missing from the file keep their defaults; unknown filters or
    non-numeric values make the preset invalid.
    """

    source = Path(path)
    data = read_json(source)
    values = data.get("filters", {})
    if not isinstance(values, dict):
        raise PresetInvalidError(f"'filters' must be an object in {source}")
    try:
        return FilterParameters.from_mapping(values)
    except InvalidParameterError as exc:
        raise PresetInvalidError(f"Invalid preset {source}: {exc}") from exc


def save_preset(path: Path | str, params: FilterParameters) -> Path:
    """Write the current values of *params* to *path*."""

    target = Path(path)
    write_json(target, {"version": PRESET_VERSION, "filters": params.to_dict()})
    return target


__all__ = ["PRESET_VERSION", "load_preset", "save_preset"]
