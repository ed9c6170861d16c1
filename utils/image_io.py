"""Image I/O using OpenCV."""

import cv2
import numpy as np

from utils.errors import ImageShapeError


def check_image(image: np.ndarray, name: str = 'image') -> None:
    """Require an (H, W, 3) uint8 array with non-zero size."""
    if not isinstance(image, np.ndarray):
        raise ImageShapeError(f"{name} must be a numpy array, got {type(image).__name__}")
    if image.ndim != 3 or image.shape[2] != 3:
        raise ImageShapeError(f"{name} must have shape (H, W, 3), got {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise ImageShapeError(f"{name} is empty: {image.shape}")
    if image.dtype != np.uint8:
        raise ImageShapeError(f"{name} must be uint8, got {image.dtype}")


def load_image(path: str) -> np.ndarray:
    """Load image as RGB uint8."""
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB image; raises if OpenCV cannot encode it."""
    check_image(image)
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGB2BGR)):
        raise ValueError(f"Could not write image to {path}")
