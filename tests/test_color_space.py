"""Tests for RGB <-> YUV conversion and clamping."""

import numpy as np
import pytest

from engines.clamp import clamp, to_samples
from engines.color_space import rgb_to_yuv, yuv_to_rgb
from utils.errors import ImageShapeError
from utils.test_images import generate_color_bars


def test_clamp_scalar():
    """Values saturate at both ends of [0, 255]."""
    assert clamp(-3) == 0
    assert clamp(300) == 255
    assert clamp(17.5) == 17.5
    assert clamp(0) == 0
    assert clamp(255) == 255


def test_clamp_array():
    """Arrays are clipped element-wise."""
    out = clamp(np.array([-1.0, 0.0, 128.4, 255.0, 256.0]))
    assert np.array_equal(out, [0.0, 0.0, 128.4, 255.0, 255.0])


def test_to_samples_rounds_and_clamps():
    """Overshoot is absorbed, the rest rounds to nearest."""
    out = to_samples(np.array([-0.7, 0.4, 127.6, 254.5, 255.9, 400.0]))
    assert out.dtype == np.uint8
    assert np.array_equal(out, [0, 0, 128, 254, 255, 255])


def test_mid_gray_round_trip_exact():
    """2x2 mid-gray converts to (128,128,128) YUV and back unchanged."""
    image = np.full((2, 2, 3), 128, dtype=np.uint8)
    rgb_to_yuv(image)
    assert np.array_equal(image, np.full((2, 2, 3), 128))
    yuv_to_rgb(image)
    assert np.array_equal(image, np.full((2, 2, 3), 128))


def test_conversion_is_in_place():
    """Both directions overwrite and return the caller's array."""
    image = np.array([[[255, 0, 0]]], dtype=np.uint8)
    assert rgb_to_yuv(image) is image
    assert image[0, 0, 0] == 76  # 0.299 * 255
    assert yuv_to_rgb(image) is image


def test_primary_colors_to_yuv():
    """Full-range BT.601 values for pure colours."""
    image = np.array([[[255, 0, 0], [0, 255, 0], [0, 0, 255], [255, 255, 255]]], dtype=np.uint8)
    rgb_to_yuv(image)
    assert image[0, 0].tolist() == [76, 85, 255]
    assert image[0, 1].tolist() == [150, 44, 21]
    assert image[0, 2].tolist() == [29, 255, 107]
    assert image[0, 3].tolist() == [255, 128, 128]


def test_round_trip_error_bounded():
    """yuv_to_rgb(rgb_to_yuv(p)) stays within 2 of p across the RGB cube."""
    levels = np.arange(0, 256, 5, dtype=np.uint8)
    r, g, b = np.meshgrid(levels, levels, levels, indexing='ij')
    image = np.stack([r.ravel(), g.ravel(), b.ravel()], axis=-1)[None, :, :].copy()
    original = image.copy()
    yuv_to_rgb(rgb_to_yuv(image))
    err = np.abs(image.astype(np.int16) - original.astype(np.int16))
    assert err.max() <= 2


def test_saturated_bars_round_trip():
    """Chroma clamping on saturated colours keeps the error bounded."""
    image = generate_color_bars(64)
    original = image.copy()
    yuv_to_rgb(rgb_to_yuv(image))
    assert np.abs(image.astype(np.int16) - original.astype(np.int16)).max() <= 2


@pytest.mark.parametrize("bad", [
    np.zeros((4, 4), dtype=np.uint8),
    np.zeros((4, 4, 4), dtype=np.uint8),
    np.zeros((0, 4, 3), dtype=np.uint8),
    np.zeros((4, 4, 3), dtype=np.float64),
])
def test_invalid_image_rejected(bad):
    """Wrong shape, empty or non-uint8 images raise ImageShapeError."""
    with pytest.raises(ImageShapeError):
        rgb_to_yuv(bad)
    with pytest.raises(ImageShapeError):
        yuv_to_rgb(bad)
