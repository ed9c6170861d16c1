"""Transform pipeline parameters."""

from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np

from utils.constants import BLOCK_MODES, BLOCK_SIZES


@dataclass
class TransformParams:
    """Block DCT experiment parameters."""
    
    block_size: int = 8
    mode: Literal['1d', '2d', '3d'] = '3d'
    quant_step: Optional[float] = None
    
    def __post_init__(self):
        if self.block_size not in BLOCK_SIZES:
            raise ValueError(f"Block size must be 4, 8, 16, or 32, got {self.block_size}")
        if self.mode not in BLOCK_MODES:
            raise ValueError(f"Mode must be '1d', '2d' or '3d', got {self.mode!r}")
        if self.quant_step is not None and not (np.isfinite(self.quant_step) and self.quant_step > 0):
            raise ValueError(f"Quantization step must be a positive number, got {self.quant_step}")
