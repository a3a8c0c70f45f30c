from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Callable, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    import os

    import cairo

    from cairo_viewport.core.types import BoundingBox


@runtime_checkable
class Bounded(Protocol):
    def bounding_box(self) -> BoundingBox: ...


# Draws onto a context that already carries the viewport transform.
DrawCallback = Callable[["cairo.Context"], None]

# Renders a complete image into the given path.
PathDrawCallback = Callable[[Path], None]

PathLike = Union[str, "os.PathLike[str]"]
