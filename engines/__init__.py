"""DSP engines - pure computation, no I/O."""

from .clamp import clamp, to_samples
from .color_space import rgb_to_yuv, yuv_to_rgb
from .block_processor import pad_to_multiple, split_into_blocks, merge_blocks
from .dct_engine import (
    dct_forward_1d,
    dct_forward_2d,
    dct_forward_3d,
    idct_1d,
    idct_2d,
    idct_3d,
)
from .quantizer import quantize, dequantize
from .pipeline import transform_reconstruct

__all__ = [
    'clamp',
    'to_samples',
    'rgb_to_yuv',
    'yuv_to_rgb',
    'pad_to_multiple',
    'split_into_blocks',
    'merge_blocks',
    'dct_forward_1d',
    'dct_forward_2d',
    'dct_forward_3d',
    'idct_1d',
    'idct_2d',
    'idct_3d',
    'quantize',
    'dequantize',
    'transform_reconstruct',
]
