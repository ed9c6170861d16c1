"""Transform result with metrics."""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass
class TransformResult:
    """Results from the transform/reconstruct pipeline."""
    
    original_image: np.ndarray
    reconstructed_image: np.ndarray
    
    # Quality metrics
    snr_db: float
    mse: float
    ssim: Optional[float]  # None when the image is smaller than the SSIM window
    
    # Coefficient stats
    nonzero_coeffs: int
    total_coeffs: int
    
    # Runtime
    forward_time_ms: float
    inverse_time_ms: float
