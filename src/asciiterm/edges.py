import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)

CANNY_LOW = 50.0
CANNY_HIGH = 100.0

# Pre-blur applied before gradient computation
BLUR_SIGMA = 1.4
_PAD = 2


def canny_edges(gray: np.ndarray, low: float = CANNY_LOW, high: float = CANNY_HIGH) -> np.ndarray:
    """Run Canny on a uint8 luminance grid and return a boolean mask of the same shape.

    Thresholds apply to the L2 Sobel gradient magnitude of the blurred grid.
    """
    # Replicate the border so grids of one or two cells still get a full kernel
    arr = np.pad(np.asarray(gray, dtype=np.uint8), _PAD, mode="edge")
    blurred = cv2.GaussianBlur(arr, (5, 5), BLUR_SIGMA)
    edges = cv2.Canny(blurred, low, high, L2gradient=True)
    mask = edges[_PAD:-_PAD, _PAD:-_PAD] > 0
    logger.debug("Canny(%s, %s) marked %d of %d cells", low, high, int(mask.sum()), mask.size)
    return mask
