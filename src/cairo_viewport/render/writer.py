from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import cairo

from cairo_viewport.core.errors import InvalidFilenameError, RenderError, RenderIOError
from cairo_viewport.surfaces import file_extension_for, get_surface_kind

if TYPE_CHECKING:
    from cairo_viewport.core.protocols import DrawCallback, PathLike
    from cairo_viewport.core.viewport import Viewport

logger = logging.getLogger(__name__)


def write_to_file(viewport: Viewport, path: PathLike, draw_callback: DrawCallback) -> None:
    """Draw through `viewport` into the file at `path`.

    The context handed to `draw_callback` is already scaled by
    `viewport.scale` and then translated by `viewport.origin`. If drawing
    fails, whatever was written to `path` so far is left in place.
    """
    path = Path(path)
    extension = file_extension_for(path)
    _check_filename(path)
    kind = get_surface_kind(extension)

    with _open_target(path) as target:
        try:
            surface = kind.create(path, viewport.width, viewport.height)
        except cairo.Error as e:
            raise RenderError(f"Could not create {extension} surface for {path}: {e}") from e

        logger.debug(
            "Drawing %dx%d %s surface to %s", viewport.width, viewport.height, extension, path
        )
        try:
            context = cairo.Context(surface)
            context.scale(viewport.scale, viewport.scale)
            context.translate(viewport.origin[0], viewport.origin[1])

            draw_callback(context)

            kind.finalize(surface, target)
        except cairo.Error as e:
            raise RenderError(f"Drawing {path} failed: {e}") from e
        except OSError as e:
            raise RenderIOError(f"Could not write {path}: {e}") from e
        finally:
            surface.finish()


def _check_filename(path: Path) -> None:
    try:
        str(path).encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidFilenameError(path) from e


def _open_target(path: Path) -> BinaryIO:
    # Opening an existing file without truncating it keeps it intact until
    # the backend writes the new content.
    try:
        if path.exists():
            return open(path, "r+b")
        return open(path, "wb")
    except OSError as e:
        raise RenderIOError(f"Could not open {path} for writing: {e}") from e
