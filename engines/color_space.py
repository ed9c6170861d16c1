"""RGB <-> YUV conversion (full-range BT.601), in place."""

import numpy as np

from engines.clamp import to_samples
from utils.constants import CHROMA_OFFSET
from utils.image_io import check_image


def rgb_to_yuv(image: np.ndarray) -> np.ndarray:
    """Convert an RGB uint8 image to YUV in place and return it."""
    check_image(image)
    rgb = image.astype(np.float64)
    R, G, B = rgb[:, :, 0], rgb[:, :, 1], rgb[:, :, 2]
    Y = 0.299 * R + 0.587 * G + 0.114 * B
    U = CHROMA_OFFSET - 0.168736 * R - 0.331264 * G + 0.5 * B
    V = CHROMA_OFFSET + 0.5 * R - 0.418688 * G - 0.081312 * B
    image[...] = to_samples(np.stack([Y, U, V], axis=-1))
    return image


def yuv_to_rgb(image: np.ndarray) -> np.ndarray:
    """Convert a YUV uint8 image back to RGB in place and return it.

    Not an exact inverse of rgb_to_yuv: both directions round to integer
    samples, so a round trip may be off by one step per channel.
    """
    check_image(image)
    yuv = image.astype(np.float64)
    Y = yuv[:, :, 0]
    U = yuv[:, :, 1] - CHROMA_OFFSET
    V = yuv[:, :, 2] - CHROMA_OFFSET
    R = Y + 1.402 * V
    G = Y - 0.3441 * U - 0.7141 * V
    B = Y + 1.772 * U
    image[...] = to_samples(np.stack([R, G, B], axis=-1))
    return image
