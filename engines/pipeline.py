"""Transform/reconstruct pipeline: RGB -> YUV -> block DCT -> IDCT -> RGB."""

import numpy as np
from typing import Callable, Dict, Tuple

from models.transform_params import TransformParams
from models.transform_result import TransformResult
from engines.color_space import rgb_to_yuv, yuv_to_rgb
from engines.block_processor import pad_to_multiple, split_into_blocks, merge_blocks
from engines.dct_engine import (
    dct_forward_1d, dct_forward_2d, dct_forward_3d,
    idct_1d, idct_2d, idct_3d,
)
from engines.clamp import to_samples
from engines.quantizer import quantize, dequantize
from utils.constants import SSIM_MIN_SIDE
from utils.image_io import check_image
from utils.metrics import mse, snr, ssim, Timer


def _transforms(params: TransformParams, channels: int) -> Tuple[Callable, Callable]:
    """Forward/inverse callables taking a single block for the configured mode."""
    b = params.block_size
    table: Dict[str, Tuple[Callable, Callable]] = {
        '1d': (lambda blk: dct_forward_1d(blk, b), lambda blk: idct_1d(blk, b)),
        '2d': (lambda blk: dct_forward_2d(blk, b), lambda blk: idct_2d(blk, b)),
        '3d': (lambda blk: dct_forward_3d(blk, b, channels), lambda blk: idct_3d(blk, b, channels)),
    }
    return table[params.mode]


def _forward_all(blocks, forward, quant_step):
    nonzero = 0
    total = 0
    for (_, _, _, block) in blocks:
        forward(block)
        if quant_step is not None:
            block[...] = dequantize(quantize(block, quant_step), quant_step)
        nonzero += int(np.count_nonzero(block))
        total += block.size
    return nonzero, total


def _inverse_all(blocks, inverse):
    for (_, _, _, block) in blocks:
        inverse(block)


def transform_reconstruct(image_rgb: np.ndarray, params: TransformParams) -> TransformResult:
    """Run the block transform round trip and measure reconstruction quality.

    The input image is left untouched.
    """
    check_image(image_rgb)
    timer = Timer()
    h, w, channels = image_rgb.shape
    forward, inverse = _transforms(params, channels)

    # === FORWARD ===
    yuv = timer.measure_forward(rgb_to_yuv, image_rgb.copy())
    padded, _ = pad_to_multiple(yuv, params.block_size)
    blocks = split_into_blocks(padded, params.block_size, params.mode)
    nonzero, total = timer.measure_forward(_forward_all, blocks, forward, params.quant_step)

    # === INVERSE ===
    timer.measure_inverse(_inverse_all, blocks, inverse)
    merged = merge_blocks(blocks, padded.shape, params.block_size, params.mode)
    yuv_recon = to_samples(merged[:h, :w, :])
    rgb_recon = timer.measure_inverse(yuv_to_rgb, yuv_recon)

    # === METRICS ===
    return TransformResult(
        original_image=image_rgb,
        reconstructed_image=rgb_recon,
        snr_db=snr(rgb_recon, image_rgb),
        mse=mse(rgb_recon, image_rgb),
        ssim=ssim(rgb_recon, image_rgb) if min(h, w) >= SSIM_MIN_SIDE else None,
        nonzero_coeffs=nonzero,
        total_coeffs=total,
        forward_time_ms=timer.forward_time_ms,
        inverse_time_ms=timer.inverse_time_ms,
    )
