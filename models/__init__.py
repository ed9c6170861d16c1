"""Data models for transform parameters and results."""

from .transform_params import TransformParams
from .transform_result import TransformResult

__all__ = ['TransformParams', 'TransformResult']
