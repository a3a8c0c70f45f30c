"""Fit a drawing into a cairo surface and write it to pdf, png, ps or svg."""

from __future__ import annotations

from cairo_viewport.compare.images import (
    SIMILARITY_THRESHOLD,
    compare_or_create,
    compare_to_image,
)
from cairo_viewport.core.errors import (
    EmptyInputError,
    ImageComparisonFailed,
    ImageDecodeError,
    InvalidFilenameError,
    RenderError,
    RenderIOError,
    SimilarityError,
    UnknownFileExtensionError,
    ViewportError,
)
from cairo_viewport.core.protocols import Bounded
from cairo_viewport.core.types import BoundingBox, Side, SideLength
from cairo_viewport.core.viewport import Viewport
from cairo_viewport.logging.setup import configure_logging
from cairo_viewport.surfaces import CAIRO_FILE_EXTENSIONS

__all__ = [
    "CAIRO_FILE_EXTENSIONS",
    "SIMILARITY_THRESHOLD",
    "Bounded",
    "BoundingBox",
    "EmptyInputError",
    "ImageComparisonFailed",
    "ImageDecodeError",
    "InvalidFilenameError",
    "RenderError",
    "RenderIOError",
    "Side",
    "SideLength",
    "SimilarityError",
    "UnknownFileExtensionError",
    "Viewport",
    "ViewportError",
    "compare_or_create",
    "compare_to_image",
    "configure_logging",
]
