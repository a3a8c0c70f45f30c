from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

import cairo


class SurfaceKind(ABC):
    """How to build and finish a cairo surface for one file extension."""

    extension: str
    description: str

    @abstractmethod
    def create(self, path: Path, width: int, height: int) -> cairo.Surface:
        """Create a surface of `width` x `height` device units for `path`."""
        ...

    def finalize(self, surface: cairo.Surface, target: BinaryIO) -> None:
        """Write pending output once drawing is done.

        Vector surfaces stream to their path on their own and only need
        `surface.finish()`, which the caller always does.
        """
