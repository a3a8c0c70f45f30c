from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError
from skimage.metrics import structural_similarity

from cairo_viewport.core.errors import ImageDecodeError, SimilarityError


def load_luma(path: Path) -> np.ndarray:
    """Decode an image file to an 8-bit single channel luminance array."""
    try:
        with Image.open(path) as img:
            return np.asarray(img.convert("L"), dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Could not decode image {path}: {e}") from e


def similarity_score(reference: np.ndarray, candidate: np.ndarray) -> float:
    """Mean structural similarity of two luminance images, 1.0 meaning identical."""
    if reference.shape != candidate.shape:
        raise SimilarityError(
            f"Image dimensions differ: {reference.shape[1]}x{reference.shape[0]} "
            f"vs {candidate.shape[1]}x{candidate.shape[0]}"
        )
    try:
        score = structural_similarity(reference, candidate, data_range=255)
    except ValueError as e:
        # e.g. images smaller than the 7x7 comparison window
        raise SimilarityError(str(e)) from e
    return float(score)
