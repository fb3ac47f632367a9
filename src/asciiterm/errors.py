class AsciiArtError(Exception):
    """Base class for errors reported to the user."""


class InvalidDimension(AsciiArtError, ValueError):
    pass


class DecodeError(AsciiArtError):
    pass


class ImageNotFound(AsciiArtError, FileNotFoundError):
    def __init__(self, path):
        super().__init__(f'Could not find image file "{path}".')
        self.path = path


class UnsupportedMode(AsciiArtError, ValueError):
    def __init__(self, mode: str):
        super().__init__(f"Unknown mode '{mode}'. Use 'standard' or 'edge'.")
        self.mode = mode


class InvariantViolation(AssertionError):
    """Pipeline wiring defect: grids that should line up do not."""


class UnsupportedFormat(DecodeError):
    pass
