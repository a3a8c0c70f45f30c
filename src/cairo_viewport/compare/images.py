from __future__ import annotations

import logging
import random
import string
from pathlib import Path
from typing import TYPE_CHECKING

from cairo_viewport.compare.similarity import load_luma, similarity_score
from cairo_viewport.core.errors import (
    ImageComparisonFailed,
    InvalidFilenameError,
    RenderIOError,
    UnknownFileExtensionError,
)
from cairo_viewport.surfaces import file_extension_for

if TYPE_CHECKING:
    from cairo_viewport.core.protocols import PathDrawCallback, PathLike

logger = logging.getLogger(__name__)

# Images scoring at or below this are reported as different.
SIMILARITY_THRESHOLD = 0.95
SCRATCH_MARKER = "_TEST_"
SCRATCH_SUFFIX_LENGTH = 30

_SCRATCH_CHARSET = string.ascii_letters + string.digits


def compare_to_image(reference_image: PathLike, draw_callback: PathDrawCallback) -> float:
    """Compare the image drawn by `draw_callback` with `reference_image`.

    `draw_callback` receives a scratch path next to the reference and must
    write a PNG there. If the images match, the scratch file is removed and
    the similarity score is returned. Otherwise ImageComparisonFailed is
    raised and the scratch file is kept for inspection. Only .png files can
    be compared.
    """
    reference = Path(reference_image)

    extension = file_extension_for(reference)
    if extension != "png":
        raise UnknownFileExtensionError("when comparing images, only .png images are allowed.")

    scratch = scratch_path_for(reference)
    try:
        scratch.touch()
    except UnicodeEncodeError as e:
        raise InvalidFilenameError(scratch) from e
    except OSError as e:
        raise RenderIOError(f"Could not create {scratch}: {e}") from e

    draw_callback(scratch)

    score = similarity_score(load_luma(reference), load_luma(scratch))
    logger.debug("Similarity of %s to %s: %.4f", scratch.name, reference.name, score)

    if score <= SIMILARITY_THRESHOLD:
        logger.warning(
            "Image mismatch (similarity %.4f): reference %s, fresh render kept at %s",
            score, reference, scratch,
        )
        raise ImageComparisonFailed(
            reference_image=reference, image_created_from_fn=scratch, score=score
        )

    try:
        scratch.unlink()
    except OSError as e:
        raise RenderIOError(f"Could not remove {scratch}: {e}") from e
    return score


def compare_or_create(
    reference_image: PathLike, draw_callback: PathDrawCallback
) -> float | None:
    """Like compare_to_image, but creates a missing reference image instead.

    Returns None when the reference was created.
    """
    reference = Path(reference_image)
    if reference.exists():
        return compare_to_image(reference, draw_callback)

    try:
        reference.touch()
    except OSError as e:
        raise RenderIOError(f"Could not create {reference}: {e}") from e
    draw_callback(reference)
    logger.info("Created reference image %s", reference)
    return None


def scratch_path_for(reference: Path) -> Path:
    suffix = "".join(random.choices(_SCRATCH_CHARSET, k=SCRATCH_SUFFIX_LENGTH))
    return reference.with_name(f"{reference.stem}{SCRATCH_MARKER}{suffix}.png")
