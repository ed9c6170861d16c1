"""Saturation into the 8-bit sample range."""

import numpy as np

from utils.constants import SAMPLE_MIN, SAMPLE_MAX


def clamp(x):
    """Clip scalar or array into [0, 255]."""
    if np.isscalar(x):
        return SAMPLE_MIN if x < SAMPLE_MIN else SAMPLE_MAX if x > SAMPLE_MAX else x
    return np.clip(x, SAMPLE_MIN, SAMPLE_MAX)


def to_samples(x: np.ndarray) -> np.ndarray:
    """Round to nearest, clamp, cast to uint8."""
    return clamp(np.rint(x)).astype(np.uint8)
