from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from cairo_viewport.core.protocols import Bounded


@dataclass(frozen=True)
class BoundingBox:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.xmin, self.xmax, self.ymin, self.ymax))

    def union(self, other: BoundingBox) -> BoundingBox:
        return BoundingBox(
            xmin=min(self.xmin, other.xmin),
            xmax=max(self.xmax, other.xmax),
            ymin=min(self.ymin, other.ymin),
            ymax=max(self.ymax, other.ymax),
        )

    def scaled(self, factor: float) -> BoundingBox:
        """Scale the box about its centre."""
        cx = (self.xmin + self.xmax) / 2
        cy = (self.ymin + self.ymax) / 2
        half_w = self.width * factor / 2
        half_h = self.height * factor / 2
        return BoundingBox(cx - half_w, cx + half_w, cy - half_h, cy + half_h)

    @classmethod
    def from_bounded_entities(
        cls, entities: Iterable[BoundingBox | Bounded]
    ) -> BoundingBox | None:
        """Union of all entity boxes, or None if `entities` is empty."""
        result: BoundingBox | None = None
        for entity in entities:
            bb = as_bounding_box(entity)
            result = bb if result is None else result.union(bb)
        return result


def as_bounding_box(entity: BoundingBox | Bounded) -> BoundingBox:
    if isinstance(entity, BoundingBox):
        return entity
    getter = getattr(entity, "bounding_box", None)
    if callable(getter):
        return getter()
    raise TypeError(
        f"Expected a BoundingBox or an object with bounding_box(), got {type(entity).__name__}"
    )


class Side(str, Enum):
    LONG = "long"
    SHORT = "short"
    WIDTH = "width"
    HEIGHT = "height"


@dataclass(frozen=True)
class SideLength:
    """Fixed length of one image side in device units.

    The other side is derived from the aspect ratio of a bounding box, see
    `to_width_and_height`. Device units are pixels for png, points for pdf
    and ps, and CSS pixels for svg.
    """

    side: Side
    length: int

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"Side length must be an int, got {self.length!r}")
        if self.length < 1:
            raise ValueError(f"Side length must be at least 1, got {self.length}")

    @classmethod
    def long(cls, length: int) -> SideLength:
        return cls(Side.LONG, length)

    @classmethod
    def short(cls, length: int) -> SideLength:
        return cls(Side.SHORT, length)

    @classmethod
    def width(cls, length: int) -> SideLength:
        return cls(Side.WIDTH, length)

    @classmethod
    def height(cls, length: int) -> SideLength:
        return cls(Side.HEIGHT, length)

    def __int__(self) -> int:
        return self.length

    def to_width_and_height(self, bounding_box: BoundingBox) -> tuple[int, int]:
        """Image width and height for `bounding_box`.

        Derived sides are rounded up so the scaled box always fits, and a
        side that rounds to zero is set to 1.

        >>> bb = BoundingBox(0.0, 1.0, 0.0, 2.0)
        >>> SideLength.long(500).to_width_and_height(bb)
        (250, 500)
        >>> SideLength.width(500).to_width_and_height(bb)
        (500, 1000)
        """
        ratio = aspect_ratio(bounding_box)
        n = self.length

        if self.side is Side.LONG:
            if ratio > 1.0:
                width, height = n, _ceil_length(_divide(n, ratio))
            else:
                width, height = _ceil_length(n * ratio), n
        elif self.side is Side.SHORT:
            if ratio > 1.0:
                width, height = _ceil_length(n * ratio), n
            else:
                width, height = n, _ceil_length(_divide(n, ratio))
        elif self.side is Side.WIDTH:
            width, height = n, _ceil_length(_divide(n, ratio))
        else:
            width, height = _ceil_length(n * ratio), n

        # A box with zero width or height would otherwise give a zero-sized image
        return max(width, 1), max(height, 1)


def aspect_ratio(bounding_box: BoundingBox) -> float:
    """Width over height; infinite for a flat box with nonzero width."""
    width = bounding_box.width
    height = bounding_box.height
    if height == 0:
        if width == 0:
            raise ValueError(f"Bounding box {bounding_box} has neither width nor height")
        return math.inf
    return width / height


def _divide(length: int, ratio: float) -> float:
    if ratio == 0:
        return math.inf
    return length / ratio


def _ceil_length(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError(
            "Image side would be infinite; choose a side length along the "
            "nonzero extent of the bounding box"
        )
    return math.ceil(value)
