import logging

import numpy as np

from .config import DEFAULT_CONFIG
from .errors import JacobianInputError
from .matrix import as_matrix, assert_same_size, get_row

logger = logging.getLogger(__name__)


def forward_softmax(matrix):
    """
    前向传播
    matrix: (N, C) 形状的输入，每一行独立计算softmax

    不做减最大值的数值稳定处理，过大的输入会溢出为inf/nan
    """
    matrix = as_matrix(matrix)
    exp_x = np.exp(matrix)
    sums = np.sum(exp_x, axis=1, keepdims=True)

    # 指数和为0的行整行输出0
    out = np.zeros_like(exp_x)
    np.divide(exp_x, sums, out=out, where=sums != 0)

    zero_rows = int(np.count_nonzero(sums == 0))
    if zero_rows:
        logger.warning("softmax: %d row(s) with zero exponential sum mapped to 0", zero_rows)
    if not np.all(np.isfinite(out)):
        logger.warning("softmax: non-finite values in output, input magnitude too large")

    return out


def softmax_jacobian(out_row):
    """
    计算单行softmax输出的雅可比矩阵

    参数：
    out_row: (1, C) 形状的softmax激活输出

    返回：
    jacobian: (C, C)，J[i][j] = out[j] * (delta_ij - out[i])
    """
    out_row = np.asarray(out_row, dtype=DEFAULT_CONFIG.dtype)
    if out_row.ndim != 2 or out_row.shape[0] != 1:
        raise JacobianInputError(
            f"softmax jacobian expects a single-row matrix, got shape {out_row.shape}"
        )

    # diag(out) - out^T * out
    jacobian = np.diag(out_row[0]) - np.dot(out_row.T, out_row)
    return jacobian


def backward_softmax(out, prev_grad):
    """
    反向传播
    out: softmax激活输出
    prev_grad: 上游梯度

    每一行的输出依赖该行全部输入，所以逐行用 (1, C) 梯度乘 (C, C) 雅可比矩阵
    """
    out = as_matrix(out, "out")
    prev_grad = as_matrix(prev_grad, "prev_grad")
    assert_same_size(prev_grad, out)

    grad = np.empty_like(prev_grad)
    for i in range(out.shape[0]):
        jacobian = softmax_jacobian(get_row(out, i))
        row_grad = get_row(prev_grad, i)
        grad[i, :] = np.dot(row_grad, jacobian)[0]

    return grad
