import numpy as np
from scipy.special import expit

from .matrix import as_matrix, assert_same_size

LEAKY_SLOPE = 0.01


def _prepare_backward(out, prev_grad):
    out = as_matrix(out, "out")
    prev_grad = as_matrix(prev_grad, "prev_grad")
    assert_same_size(prev_grad, out)
    return out, prev_grad


def forward_linear(matrix):
    """恒等激活 f(x) = x"""
    return as_matrix(matrix).copy()


def backward_linear(out, prev_grad):
    """梯度直接透传"""
    out, prev_grad = _prepare_backward(out, prev_grad)
    return prev_grad.copy()


def forward_logistic(matrix):
    """
    前向传播
    matrix: (N, C) 形状的未激活输出
    """
    # expit(x) == 1 / (1 + exp(-x))
    return expit(as_matrix(matrix))


def backward_logistic(out, prev_grad):
    """
    反向传播
    out: 当前层的激活输出
    prev_grad: 上游梯度
    """
    out, prev_grad = _prepare_backward(out, prev_grad)
    return prev_grad * (out * (1.0 - out))


def forward_tanh(matrix):
    return np.tanh(as_matrix(matrix))


def backward_tanh(out, prev_grad):
    out, prev_grad = _prepare_backward(out, prev_grad)
    return prev_grad * (1.0 - out ** 2)


def forward_relu(matrix):
    matrix = as_matrix(matrix)
    return np.where(matrix > 0.0, matrix, 0.0)


def backward_relu(out, prev_grad):
    """
    反向传播
    导数由激活输出判断：out < 0 时为0，否则为1（out == 0 也按1处理）
    """
    out, prev_grad = _prepare_backward(out, prev_grad)
    return prev_grad * np.where(out < 0.0, 0.0, 1.0)


def forward_lrelu(matrix):
    """Leaky ReLU，负半轴斜率为0.01"""
    matrix = as_matrix(matrix)
    return np.where(matrix > 0.0, matrix, LEAKY_SLOPE * matrix)


def backward_lrelu(out, prev_grad):
    out, prev_grad = _prepare_backward(out, prev_grad)
    return prev_grad * np.where(out < 0.0, LEAKY_SLOPE, 1.0)
