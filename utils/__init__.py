"""Shared utilities."""

from .constants import SNR_IDENTICAL_DB
from .errors import (
    BlockShapeError,
    ImageShapeError,
    FilenameError,
    MissingDelimiterError,
    EmptyNameError,
)
from .metrics import mse, snr, ssim, Timer
from .filenames import strip_extension, output_filename
from .test_images import generate_checkerboard, generate_gradient, add_gaussian_noise
from .image_io import load_image, save_image

__all__ = [
    'SNR_IDENTICAL_DB',
    'BlockShapeError',
    'ImageShapeError',
    'FilenameError',
    'MissingDelimiterError',
    'EmptyNameError',
    'mse',
    'snr',
    'ssim',
    'Timer',
    'strip_extension',
    'output_filename',
    'generate_checkerboard',
    'generate_gradient',
    'add_gaussian_noise',
    'load_image',
    'save_image',
]
