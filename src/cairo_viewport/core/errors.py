from __future__ import annotations

from pathlib import Path


class ViewportError(Exception):
    """Base error for rendering and comparing through a viewport."""


class RenderError(ViewportError):
    """cairo failed while creating a surface or while drawing."""


class UnknownFileExtensionError(ViewportError, ValueError):
    """The target path has no extension cairo can write."""


class RenderIOError(ViewportError, OSError):
    """The file system refused to open or remove a file."""


class InvalidFilenameError(ViewportError, ValueError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Filename {str(path)!r} is not valid UTF-8")
        self.path = path


class EmptyInputError(ViewportError, ValueError):
    """An iterable of bounded entities yielded nothing."""


class ImageDecodeError(ViewportError):
    """An image could not be opened or decoded."""


class SimilarityError(ViewportError):
    """Structural similarity could not be computed for two images."""


class ImageComparisonFailed(ViewportError):
    """The freshly drawn image does not match the reference image.

    The fresh image is kept on disk so it can be inspected next to the
    reference.
    """

    def __init__(
        self, reference_image: Path, image_created_from_fn: Path, score: float
    ) -> None:
        super().__init__(
            f"Image {image_created_from_fn} does not match reference {reference_image} "
            f"(similarity {score:.4f})"
        )
        self.reference_image = reference_image
        self.image_created_from_fn = image_created_from_fn
        self.score = score
