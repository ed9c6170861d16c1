"""Tests for the transform/reconstruct pipeline."""

import numpy as np
import pytest

from models.transform_params import TransformParams
from engines.pipeline import transform_reconstruct
from utils.test_images import generate_checkerboard, generate_gradient


@pytest.mark.parametrize("mode", ['1d', '2d', '3d'])
def test_lossless_path_high_snr(mode):
    """Without quantization only colorspace rounding is lost."""
    image = generate_gradient(64)
    result = transform_reconstruct(image, TransformParams(block_size=8, mode=mode))
    assert result.reconstructed_image.shape == image.shape
    assert result.reconstructed_image.dtype == np.uint8
    assert result.snr_db > 45.0
    assert np.abs(result.reconstructed_image.astype(int) - image.astype(int)).max() <= 2


def test_input_not_modified():
    """The caller's image is left untouched."""
    image = generate_checkerboard(32, tile=8)
    before = image.copy()
    result = transform_reconstruct(image, TransformParams())
    assert np.array_equal(image, before)
    assert result.original_image is image


def test_snr_decreases_with_quant_step():
    """Coarser quantization lowers SNR and drops coefficients."""
    image = generate_checkerboard(64, tile=8)
    image[::3, ::5] = [200, 40, 90]
    results = [
        transform_reconstruct(image, TransformParams(block_size=8, quant_step=step))
        for step in (2.0, 16.0, 128.0)
    ]
    snrs = [r.snr_db for r in results]
    nonzero = [r.nonzero_coeffs for r in results]
    assert snrs[0] > snrs[1] > snrs[2]
    assert nonzero[0] >= nonzero[1] >= nonzero[2]


def test_non_multiple_size_is_padded_and_cropped():
    """Images not divisible by the block size come back at their own size."""
    rng = np.random.default_rng(3)
    image = rng.integers(0, 256, (21, 13, 3), dtype=np.uint8)
    result = transform_reconstruct(image, TransformParams(block_size=8, mode='2d'))
    assert result.reconstructed_image.shape == (21, 13, 3)
    assert result.total_coeffs == 24 * 16 * 3


def test_tiny_image_has_no_ssim():
    """SSIM is skipped below its window size."""
    image = np.full((2, 2, 3), 128, dtype=np.uint8)
    result = transform_reconstruct(image, TransformParams(block_size=4))
    assert result.ssim is None
    assert np.array_equal(result.reconstructed_image, image)


def test_coefficient_counts():
    """Mid-gray is flat in YUV too, leaving one DC coefficient per 3D block."""
    image = np.full((16, 16, 3), 128, dtype=np.uint8)
    result = transform_reconstruct(image, TransformParams(block_size=8, mode='3d', quant_step=1.0))
    assert result.total_coeffs == 16 * 16 * 3
    assert result.nonzero_coeffs == 4


@pytest.mark.parametrize("kwargs", [
    {'block_size': 7},
    {'mode': '4d'},
    {'quant_step': 0},
    {'quant_step': -1.5},
    {'quant_step': float('inf')},
    {'quant_step': float('nan')},
])
def test_invalid_params(kwargs):
    """Parameter validation happens at construction."""
    with pytest.raises(ValueError):
        TransformParams(**kwargs)
