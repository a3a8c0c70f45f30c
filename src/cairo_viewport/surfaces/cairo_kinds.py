from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import cairo

from cairo_viewport.surfaces.base import SurfaceKind

logger = logging.getLogger(__name__)


class PdfSurfaceKind(SurfaceKind):
    extension = "pdf"
    description = "PDF document, sized in points (1/72 inch)"

    def create(self, path: Path, width: int, height: int) -> cairo.Surface:
        return cairo.PDFSurface(str(path), width, height)


class PsSurfaceKind(SurfaceKind):
    extension = "ps"
    description = "PostScript document, sized in points (1/72 inch)"

    def create(self, path: Path, width: int, height: int) -> cairo.Surface:
        return cairo.PSSurface(str(path), width, height)


class SvgSurfaceKind(SurfaceKind):
    extension = "svg"
    description = "SVG document, sized in CSS pixels (about 1/96 inch)"

    def create(self, path: Path, width: int, height: int) -> cairo.Surface:
        return cairo.SVGSurface(str(path), width, height)


class PngSurfaceKind(SurfaceKind):
    extension = "png"
    description = "PNG raster image, sized in pixels"

    def create(self, path: Path, width: int, height: int) -> cairo.Surface:
        # Rasterized in memory; the file is written in finalize()
        return cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)

    def finalize(self, surface: cairo.Surface, target: BinaryIO) -> None:
        surface.flush()
        target.seek(0)
        surface.write_to_png(target)
        # The target may be an older, longer file opened without truncation
        target.truncate()
        logger.debug("Encoded %dx%d PNG", surface.get_width(), surface.get_height())
