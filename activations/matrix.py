import numpy as np

from .config import DEFAULT_CONFIG
from .errors import MatrixShapeError, ShapeMismatchError


def as_matrix(data, name="matrix"):
    """
    转换为二维float64矩阵
    data: 嵌套列表或ndarray，必须是 (rows, cols) 形状
    """
    matrix = np.asarray(data, dtype=DEFAULT_CONFIG.dtype)
    if matrix.ndim != 2:
        raise MatrixShapeError(
            f"{name} must be a 2D matrix, got shape {matrix.shape}"
        )
    return matrix


def assert_same_size(a, b):
    # 不做广播，形状必须完全一致
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"shape mismatch: {a.shape[0]}x{a.shape[1]} vs {b.shape[0]}x{b.shape[1]}"
        )


def get_row(matrix, i):
    """取出第i行，返回 (1, C) 的新矩阵"""
    return matrix[i:i + 1, :].copy()
