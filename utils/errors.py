"""Exceptions raised on invalid arguments."""


class BlockShapeError(ValueError):
    """Block does not match its declared length/depth or cannot be transformed in place."""


class ImageShapeError(ValueError):
    """Image is not an (H, W, 3) array, or two images differ in shape."""


class FilenameError(ValueError):
    """Base class for filename helper failures."""


class MissingDelimiterError(FilenameError):
    """Neither '_' nor '/' found in the input path."""


class EmptyNameError(FilenameError):
    """Nothing left after stripping the prefix and extension."""
