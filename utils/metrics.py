"""Metrics: MSE, SNR, SSIM and stage timing."""

import time
import numpy as np
from skimage.metrics import mean_squared_error, peak_signal_noise_ratio, structural_similarity

from utils.constants import SAMPLE_MAX, SNR_IDENTICAL_DB, SSIM_MIN_SIDE
from utils.errors import ImageShapeError
from utils.image_io import check_image


def _check_pair(image: np.ndarray, reference: np.ndarray) -> None:
    check_image(image, 'image')
    check_image(reference, 'reference')
    if image.shape != reference.shape:
        raise ImageShapeError(
            f"Image shape {image.shape} does not match reference shape {reference.shape}"
        )


def mse(image: np.ndarray, reference: np.ndarray) -> float:
    """Mean squared error over every pixel and channel."""
    _check_pair(image, reference)
    return float(mean_squared_error(image, reference))


def snr(image: np.ndarray, reference: np.ndarray) -> float:
    """Signal-to-noise ratio in dB: 20 log10(255 / sqrt(mse)).

    Identical images have no noise to measure; SNR_IDENTICAL_DB is returned
    instead of infinity. Images must have the same shape, they are never
    resized to match.
    """
    if mse(image, reference) == 0.0:
        return SNR_IDENTICAL_DB
    return float(peak_signal_noise_ratio(reference, image, data_range=SAMPLE_MAX))


def ssim(image: np.ndarray, reference: np.ndarray) -> float:
    """Structural similarity over RGB channels (7x7 window)."""
    _check_pair(image, reference)
    if min(image.shape[:2]) < SSIM_MIN_SIDE:
        raise ImageShapeError(
            f"SSIM needs images of at least {SSIM_MIN_SIDE}x{SSIM_MIN_SIDE}, got {image.shape[:2]}"
        )
    return float(structural_similarity(
        image, reference, channel_axis=2, data_range=SAMPLE_MAX
    ))


class Timer:
    """Simple timer for forward/inverse runtime."""

    def __init__(self):
        self.forward_time_ms = 0.0
        self.inverse_time_ms = 0.0

    def measure_forward(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.forward_time_ms += (time.perf_counter() - start) * 1000.0
        return result

    def measure_inverse(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.inverse_time_ms += (time.perf_counter() - start) * 1000.0
        return result
