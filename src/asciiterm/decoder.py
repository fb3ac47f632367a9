import io
import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from asciiterm.errors import DecodeError, ImageNotFound, InvalidDimension, UnsupportedFormat

logger = logging.getLogger(__name__)


def to_pixel_grid(image: Image.Image) -> np.ndarray:
    """Convert a PIL image to a read-only (height, width, 3) uint8 array."""
    grid = np.array(image.convert("RGB"), dtype=np.uint8)
    grid.setflags(write=False)
    return grid


def decode(data: bytes) -> np.ndarray:
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            logger.debug("Decoded %s image of %dx%d", image.format, image.width, image.height)
            return to_pixel_grid(image)
    except UnidentifiedImageError as e:
        raise UnsupportedFormat("Unsupported image format.") from e
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Image limits exceeded: {e}") from e
    except (OSError, SyntaxError, ValueError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e


def load_image(path: str | Path) -> np.ndarray:
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError as e:
        raise ImageNotFound(path) from e
    except OSError as e:
        raise DecodeError(f'I/O error while accessing "{path}": {e}') from e
    try:
        return decode(data)
    except UnsupportedFormat as e:
        raise UnsupportedFormat(f'Unsupported image format for file "{path}".') from e
    except DecodeError as e:
        raise DecodeError(f'Failed to decode image "{path}": {e}') from e


def array_to_pixel_grid(arr: np.ndarray) -> np.ndarray:
    """Normalise an RGB, RGBA or single-channel uint8 array to a PixelGrid."""
    arr = np.asarray(arr)
    if arr.ndim == 3 and arr.shape[2] == 1:
        arr = arr[:, :, 0]
    if arr.ndim == 3 and arr.shape[2] == 3:
        return arr
    if arr.ndim not in (2, 3) or (arr.ndim == 3 and arr.shape[2] != 4):
        raise InvalidDimension(f"Unsupported pixel array shape {arr.shape}")
    if arr.size == 0:
        raise InvalidDimension("Input image has invalid dimensions.")
    return to_pixel_grid(Image.fromarray(np.ascontiguousarray(arr, dtype=np.uint8)))
