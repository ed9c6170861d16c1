"""Forward/inverse DCT over 1D, 2D and 3D blocks.

Every transform works in place: the caller's block is overwritten with the
result and returned. Multi-dimensional transforms are computed as one
separable 1D pass per axis against a cached cosine basis, so an N-cube costs
O(N^4) instead of the O(N^6) of the direct triple sum.

Block layouts:
    1D  (length,)
    2D  (length, length)
    3D  (depth, length, length)

``norm='ortho'`` (default) gives the orthonormal DCT-II / DCT-III pair with
alpha = 1/sqrt(N) for frequency 0 and sqrt(2/N) otherwise. ``norm=None``
gives the raw cosine sum X[j] = sum_i x[i] cos(pi/N (i + 0.5) j) and its
matching inverse.
"""

from functools import lru_cache
from typing import Optional, Sequence

import numpy as np

from utils.constants import PI
from utils.errors import BlockShapeError

NORMS = ('ortho', None)


@lru_cache(maxsize=None)
def cosine_basis(size: int) -> np.ndarray:
    """C[k, n] = cos(pi/size * (n + 0.5) * k), read-only."""
    k = np.arange(size, dtype=np.float64)[:, None]
    n = np.arange(size, dtype=np.float64)[None, :]
    basis = np.cos((PI / size) * (n + 0.5) * k)
    basis.flags.writeable = False
    return basis


def alpha(size: int) -> np.ndarray:
    """Per-frequency orthonormal scale factors for an axis of ``size``."""
    a = np.full(size, np.sqrt(2.0 / size))
    a[0] = 1.0 / np.sqrt(size)
    return a


@lru_cache(maxsize=None)
def _forward_matrix(size: int, norm: Optional[str]) -> np.ndarray:
    basis = cosine_basis(size)
    if norm == 'ortho':
        matrix = alpha(size)[:, None] * basis
    else:
        matrix = basis.copy()
    matrix.flags.writeable = False
    return matrix


@lru_cache(maxsize=None)
def _inverse_matrix(size: int, norm: Optional[str]) -> np.ndarray:
    if norm == 'ortho':
        # Orthonormal basis: inverse is the transpose
        matrix = _forward_matrix(size, norm).T.copy()
    else:
        weights = np.full(size, 2.0 / size)
        weights[0] = 1.0 / size
        matrix = cosine_basis(size).T * weights[None, :]
    matrix.flags.writeable = False
    return matrix


def _check_length(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise BlockShapeError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise BlockShapeError(f"{name} must be positive, got {value}")
    return int(value)


def _check_block(block: np.ndarray, expected: Sequence[int], norm: Optional[str]) -> None:
    if norm not in NORMS:
        raise BlockShapeError(f"Unknown norm: {norm!r}")
    if not isinstance(block, np.ndarray):
        raise BlockShapeError(f"Block must be a numpy array, got {type(block).__name__}")
    if block.shape != tuple(expected):
        raise BlockShapeError(
            f"Block shape {block.shape} does not match declared shape {tuple(expected)}"
        )
    if not np.issubdtype(block.dtype, np.floating):
        raise BlockShapeError(f"Block must have a floating dtype, got {block.dtype}")


def _pass(data: np.ndarray, matrix: np.ndarray, axis: int) -> np.ndarray:
    """Apply ``matrix`` along one axis of ``data``."""
    out = np.tensordot(matrix, data, axes=([1], [axis]))
    return np.moveaxis(out, 0, axis)


def _transform(block: np.ndarray, sizes: Sequence[int], norm: Optional[str], inverse: bool) -> np.ndarray:
    build = _inverse_matrix if inverse else _forward_matrix
    result = block.astype(np.float64)
    for axis, size in enumerate(sizes):
        result = _pass(result, build(size, norm), axis)
    block[...] = result
    return block


# === Forward ===

def dct_forward_1d(block: np.ndarray, length: int, norm: Optional[str] = 'ortho') -> np.ndarray:
    """1D DCT-II of a (length,) block, in place.

    norm=None is the plain sum X[j] = sum_i x[i] cos(pi/length (i + 0.5) j)
    with no alpha scaling; the default orthonormal form keeps energy.
    """
    length = _check_length(length, 'length')
    _check_block(block, (length,), norm)
    return _transform(block, (length,), norm, inverse=False)


def dct_forward_2d(block: np.ndarray, length: int, norm: Optional[str] = 'ortho') -> np.ndarray:
    """2D DCT-II of a (length, length) block, in place."""
    length = _check_length(length, 'length')
    _check_block(block, (length, length), norm)
    return _transform(block, (length, length), norm, inverse=False)


def dct_forward_3d(block: np.ndarray, length: int, depth: int, norm: Optional[str] = 'ortho') -> np.ndarray:
    """3D DCT-II of a (depth, length, length) block, in place."""
    length = _check_length(length, 'length')
    depth = _check_length(depth, 'depth')
    _check_block(block, (depth, length, length), norm)
    return _transform(block, (depth, length, length), norm, inverse=False)


# === Inverse ===

def idct_1d(block: np.ndarray, length: int, norm: Optional[str] = 'ortho') -> np.ndarray:
    """Inverse of dct_forward_1d, in place."""
    length = _check_length(length, 'length')
    _check_block(block, (length,), norm)
    return _transform(block, (length,), norm, inverse=True)


def idct_2d(block: np.ndarray, length: int, norm: Optional[str] = 'ortho') -> np.ndarray:
    """Inverse of dct_forward_2d, in place."""
    length = _check_length(length, 'length')
    _check_block(block, (length, length), norm)
    return _transform(block, (length, length), norm, inverse=True)


def idct_3d(block: np.ndarray, length: int, depth: int, norm: Optional[str] = 'ortho') -> np.ndarray:
    """Inverse of dct_forward_3d, in place.

    x[k][j][i] = sum_n sum_m sum_l X[n][m][l] a_l a_m a_n
                 cos(pi/length (j+0.5) m) cos(pi/length (i+0.5) l) cos(pi/depth (k+0.5) n)
    with the alphas taken at the frequency indices l, m, n.
    """
    length = _check_length(length, 'length')
    depth = _check_length(depth, 'depth')
    _check_block(block, (depth, length, length), norm)
    return _transform(block, (depth, length, length), norm, inverse=True)
