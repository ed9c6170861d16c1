"""Shared constants for transforms, colorspace and metrics."""

import math

PI = math.pi

SAMPLE_MIN = 0
SAMPLE_MAX = 255

CHROMA_OFFSET = 128.0

# Returned by snr() when the two images are identical (mse == 0).
# No pair of 8-bit images of practical size gets anywhere near it.
SNR_IDENTICAL_DB = 1000.0

BLOCK_SIZES = (4, 8, 16, 32)
BLOCK_MODES = ('1d', '2d', '3d')

# Default structural_similarity window
SSIM_MIN_SIDE = 7
