from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from cairo_viewport.core.types import BoundingBox, Side, SideLength
from cairo_viewport.core.viewport import Viewport


def load_viewport_presets(path: str | Path) -> dict[str, Viewport]:
    """Load every preset under the top-level `viewports:` key of a YAML file.

    A preset either derives the viewport from a bounding box::

        viewports:
          thumbnail:
            bounds: [-1.0, 1.0, -1.0, 1.0]   # xmin, xmax, ymin, ymax
            side_length: {long: 128}

    or spells it out with `origin`, `scale`, `width` and `height`.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Viewport preset file {str(path)!r} not found")

    data = yaml.safe_load(path.read_text()) or {}
    presets = data.get("viewports") if isinstance(data, dict) else None
    if not isinstance(presets, dict):
        raise ValueError(f"{path} has no 'viewports' mapping")

    viewports: dict[str, Viewport] = {}
    for name, preset in presets.items():
        try:
            viewports[name] = build_viewport(preset)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid viewport preset {name!r} in {path}: {e}") from e
    return viewports


def load_viewport_preset(path: str | Path, name: str) -> Viewport:
    presets = load_viewport_presets(path)
    if name not in presets:
        raise KeyError(f"Viewport preset {name!r} not found. Available: {sorted(presets)}")
    return presets[name]


def build_viewport(preset: dict[str, Any]) -> Viewport:
    if not isinstance(preset, dict):
        raise TypeError(f"preset must be a mapping, got {type(preset).__name__}")

    if "bounds" in preset:
        bounds = preset["bounds"]
        if not isinstance(bounds, (list, tuple)) or len(bounds) != 4:
            raise ValueError("bounds must be [xmin, xmax, ymin, ymax]")
        bounding_box = BoundingBox(*(float(v) for v in bounds))
        return Viewport.from_bounding_box(bounding_box, _side_length(preset.get("side_length")))

    missing = [key for key in ("origin", "scale", "width", "height") if key not in preset]
    if missing:
        raise ValueError(f"expected 'bounds' or explicit fields, missing: {missing}")
    origin = preset["origin"]
    if not isinstance(origin, (list, tuple)) or len(origin) != 2:
        raise ValueError("origin must be [x, y]")
    return Viewport(
        origin=(float(origin[0]), float(origin[1])),
        scale=float(preset["scale"]),
        width=int(preset["width"]),
        height=int(preset["height"]),
    )


def _side_length(value: Any) -> SideLength:
    if not isinstance(value, dict) or len(value) != 1:
        choices = [side.value for side in Side]
        raise ValueError(f"side_length must be a single-entry mapping, one of {choices}")
    ((key, length),) = value.items()
    try:
        side = Side(str(key).lower())
    except ValueError:
        choices = [side.value for side in Side]
        raise ValueError(f"Unknown side {key!r}. Choose from: {choices}") from None
    return SideLength(side, length)
