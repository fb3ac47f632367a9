import logging
import os
import sys
from enum import Enum
from typing import NamedTuple

logger = logging.getLogger(__name__)

FALLBACK_WIDTH = 80
MIN_DETECTED_WIDTH = 40
MARGIN = 2


class WidthSource(Enum):
    USER = "user"
    DETECTED = "detected"
    FALLBACK = "fallback"


class WidthResolution(NamedTuple):
    width: int
    source: WidthSource


def detect_terminal_size() -> tuple[int, int] | None:
    """Return (columns, rows) of the terminal, or None if stdout is not a tty."""
    if not sys.stdout.isatty():
        return None
    try:
        size = os.get_terminal_size()
    except OSError:
        return None
    return (size.columns, size.lines)


def compute_output_width(user_width: int | None, detected_width: int | None) -> WidthResolution:
    if user_width is not None:
        return WidthResolution(user_width, WidthSource.USER)
    if detected_width is not None:
        return WidthResolution(max(detected_width - MARGIN, MIN_DETECTED_WIDTH), WidthSource.DETECTED)
    return WidthResolution(FALLBACK_WIDTH, WidthSource.FALLBACK)


def resolve_output_width(user_width: int | None = None) -> WidthResolution:
    size = detect_terminal_size()
    resolution = compute_output_width(user_width, size[0] if size else None)
    if resolution.source is WidthSource.DETECTED:
        logger.info("Using auto-detected width: %d characters", resolution.width)
    elif resolution.source is WidthSource.FALLBACK:
        logger.warning("Unable to detect terminal size; defaulting to %d characters.", resolution.width)
    return resolution
