"""Uniform scalar quantization of transform coefficients."""

import numpy as np


def _check_step(step: float) -> float:
    step = float(step)
    if not np.isfinite(step) or step <= 0:
        raise ValueError(f"Quantization step must be a positive number, got {step}")
    return step


def quantize(coeffs: np.ndarray, step: float) -> np.ndarray:
    """Map coefficients to integer levels round(c / step)."""
    step = _check_step(step)
    return np.rint(coeffs / step).astype(np.int32)


def dequantize(levels: np.ndarray, step: float) -> np.ndarray:
    """Scale integer levels back to coefficient values."""
    step = _check_step(step)
    return levels.astype(np.float64) * step
