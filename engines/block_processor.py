"""Block processing: padding, splitting, merging.

Blocks are taken from an (H, W, C) image. Layout per mode:
    '3d'  (C, B, B)  one block spans all channels
    '2d'  (B, B)     one block per channel
    '1d'  (B,)       one row segment per channel and image row
Each block comes with its (row, col, channel) origin; channel is None in '3d'.
"""

import numpy as np
from typing import List, Optional, Tuple

from utils.constants import BLOCK_MODES

Block = Tuple[int, int, Optional[int], np.ndarray]


def pad_to_multiple(image: np.ndarray, block_size: int) -> Tuple[np.ndarray, Tuple[int, int]]:
    """Pad rows/cols to a multiple of block_size using reflect mode."""
    h, w = image.shape[:2]
    pad_h = (block_size - h % block_size) % block_size
    pad_w = (block_size - w % block_size) % block_size
    if pad_h == 0 and pad_w == 0:
        return image.copy(), (h, w)
    # reflect needs at least 2 samples along the axis
    mode = 'reflect' if min(h, w) > 1 else 'edge'
    pad_width = [(0, pad_h), (0, pad_w)] + [(0, 0)] * (image.ndim - 2)
    return np.pad(image, pad_width, mode=mode), (h, w)


def split_into_blocks(image: np.ndarray, block_size: int, mode: str = '3d') -> List[Block]:
    """Split a padded (H, W, C) image into float64 blocks."""
    if mode not in BLOCK_MODES:
        raise ValueError(f"Unknown block mode: {mode}")
    h, w, channels = image.shape
    if h % block_size or w % block_size:
        raise ValueError(f"Image {h}x{w} is not padded to a multiple of {block_size}")

    data = image.astype(np.float64)
    blocks = []
    if mode == '1d':
        for c in range(channels):
            for i in range(h):
                for j in range(0, w, block_size):
                    blocks.append((i, j, c, data[i, j:j+block_size, c].copy()))
        return blocks

    for i in range(0, h, block_size):
        for j in range(0, w, block_size):
            tile = data[i:i+block_size, j:j+block_size, :]
            if mode == '3d':
                blocks.append((i, j, None, np.ascontiguousarray(tile.transpose(2, 0, 1))))
            else:
                for c in range(channels):
                    blocks.append((i, j, c, tile[:, :, c].copy()))
    return blocks


def merge_blocks(
    blocks: List[Block],
    shape: Tuple[int, int, int],
    block_size: int,
    mode: str = '3d'
) -> np.ndarray:
    """Merge blocks back into an (H, W, C) float64 array."""
    if mode not in BLOCK_MODES:
        raise ValueError(f"Unknown block mode: {mode}")
    result = np.zeros(shape, dtype=np.float64)
    for (i, j, c, block) in blocks:
        if mode == '1d':
            result[i, j:j+block_size, c] = block
        elif mode == '2d':
            result[i:i+block_size, j:j+block_size, c] = block
        else:
            result[i:i+block_size, j:j+block_size, :] = block.transpose(1, 2, 0)
    return result
