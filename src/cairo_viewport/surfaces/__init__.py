from __future__ import annotations

from pathlib import Path

from cairo_viewport.core.errors import UnknownFileExtensionError
from cairo_viewport.surfaces.base import SurfaceKind

# File extensions cairo can write through a Viewport.
CAIRO_FILE_EXTENSIONS: tuple[str, ...] = ("pdf", "png", "ps", "svg")

_registry: dict[str, SurfaceKind] = {}


def register_surface_kind(kind: SurfaceKind) -> None:
    _registry[kind.extension] = kind


def get_surface_kind(extension: str) -> SurfaceKind:
    if extension not in _registry:
        available = ", ".join(list_surface_kinds())
        raise UnknownFileExtensionError(
            f'The given file extension "{extension}" is not recognized. '
            f"Available file extensions are: {available}"
        )
    return _registry[extension]


def list_surface_kinds() -> list[str]:
    return list(_registry.keys())


def file_extension_for(path: str | Path) -> str:
    """Return the extension of `path` if cairo can write it.

    Matching is case-sensitive: "image.PNG" is rejected.
    """
    suffix = Path(path).suffix
    if not suffix:
        available = ", ".join(list_surface_kinds())
        raise UnknownFileExtensionError(
            "No file extension has been recognized. "
            f"Add one of the following file extensions: {available}"
        )
    extension = suffix[1:]
    get_surface_kind(extension)
    return extension


def _register_builtins() -> None:
    from cairo_viewport.surfaces.cairo_kinds import (
        PdfSurfaceKind,
        PngSurfaceKind,
        PsSurfaceKind,
        SvgSurfaceKind,
    )

    for kind in (PdfSurfaceKind(), PngSurfaceKind(), PsSurfaceKind(), SvgSurfaceKind()):
        register_surface_kind(kind)


_register_builtins()
