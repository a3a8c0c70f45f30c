from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from cairo_viewport.compare.images import compare_or_create, compare_to_image
from cairo_viewport.core.errors import EmptyInputError
from cairo_viewport.core.protocols import Bounded, DrawCallback, PathLike
from cairo_viewport.core.types import BoundingBox, SideLength, as_bounding_box
from cairo_viewport.render.writer import write_to_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Scale and translation for a cairo context, plus the surface size.

    The context is scaled by `scale` in both directions and then translated
    by `origin`, so `origin` is expressed in drawing units. `width` and
    `height` are the surface size in device units: points for pdf and ps,
    pixels for png, CSS pixels for svg.

    >>> vp = Viewport.from_bounding_box(BoundingBox(6.0, 8.0, 12.0, 20.0), SideLength.long(500))
    >>> vp.origin, vp.scale, vp.width, vp.height
    ((-6.0, -12.0), 62.5, 125, 500)
    """

    origin: tuple[float, float]
    scale: float
    width: int
    height: int

    @classmethod
    def from_bounding_box(cls, bounding_box: BoundingBox, side_length: SideLength) -> Viewport:
        return derive_from_bounding_box(bounding_box, side_length)

    @classmethod
    def from_bounded_entity(
        cls, entity: BoundingBox | Bounded, side_length: SideLength
    ) -> Viewport:
        return derive_from_bounding_box(as_bounding_box(entity), side_length)

    @classmethod
    def from_bounded_entities(
        cls, entities: Iterable[BoundingBox | Bounded], side_length: SideLength
    ) -> Viewport:
        return derive_from_bounded_collection(entities, side_length)

    def write_to_file(self, path: PathLike, draw_callback: DrawCallback) -> None:
        """Draw with `draw_callback` and save to `path`.

        The file type (pdf, png, ps or svg) is taken from the extension of
        `path`.
        """
        write_to_file(self, path, draw_callback)

    def compare_to_image(self, image: PathLike, draw_callback: DrawCallback) -> float:
        return compare_to_image(image, lambda p: self.write_to_file(p, draw_callback))

    def compare_or_create(self, image: PathLike, draw_callback: DrawCallback) -> float | None:
        return compare_or_create(image, lambda p: self.write_to_file(p, draw_callback))


def derive_from_bounding_box(bounding_box: BoundingBox, side_length: SideLength) -> Viewport:
    """Build a Viewport whose image exactly fits `bounding_box`.

    The side that limits the drawing picks the scale, so the aspect ratio
    is kept. Raises ValueError for a box with an infinite or NaN bound.
    """
    if not bounding_box.is_finite():
        raise ValueError("infinite bounding box!")

    origin = (-bounding_box.xmin, -bounding_box.ymin)
    width, height = side_length.to_width_and_height(bounding_box)

    bb_width = bounding_box.width
    bb_height = bounding_box.height
    if bb_height == 0 or bb_width / bb_height > 1.0:
        scale = width / bb_width
    else:
        scale = height / bb_height

    logger.debug(
        "Viewport for %s with %s: origin=%s scale=%g size=%dx%d",
        bounding_box, side_length, origin, scale, width, height,
    )
    return Viewport(origin=origin, scale=scale, width=width, height=height)


def derive_from_bounded_collection(
    entities: Iterable[BoundingBox | Bounded], side_length: SideLength
) -> Viewport:
    bounding_box = BoundingBox.from_bounded_entities(entities)
    if bounding_box is None:
        raise EmptyInputError("entities iterable must yield at least one item")
    return derive_from_bounding_box(bounding_box, side_length)
