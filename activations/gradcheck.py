import numpy as np

from .config import DEFAULT_CONFIG
from .dispatch import forward_activate, backward_activate
from .kinds import ActivationKind
from .matrix import as_matrix


def numerical_gradient(kind, x, grad=None, eps=None):
    """
    用中心差分计算 sum(grad * f(x)) 对x每个元素的导数

    参数：
    kind: 激活函数类型
    x: (N, C) 未激活输入
    grad: 上游梯度，默认全1
    eps: 差分步长

    返回：
    与x同形状的数值梯度
    """
    kind = ActivationKind.parse(kind)
    x = as_matrix(x, "x")
    grad = np.ones_like(x) if grad is None else as_matrix(grad, "grad")
    eps = DEFAULT_CONFIG.grad_check_eps if eps is None else eps

    numerical = np.zeros_like(x)
    for idx in np.ndindex(*x.shape):
        x_plus = x.copy()
        x_minus = x.copy()
        x_plus[idx] += eps
        x_minus[idx] -= eps

        # softmax同一行的输出都依赖x[idx]，所以对整个输出加权求和
        f_plus = np.sum(grad * forward_activate(x_plus, kind))
        f_minus = np.sum(grad * forward_activate(x_minus, kind))
        numerical[idx] = (f_plus - f_minus) / (2.0 * eps)

    return numerical


def gradient_check(kind, x, grad=None, eps=None, tol=None):
    """对比解析梯度和数值梯度"""
    kind = ActivationKind.parse(kind)
    x = as_matrix(x, "x")
    grad = np.ones_like(x) if grad is None else as_matrix(grad, "grad")
    tol = DEFAULT_CONFIG.grad_check_tol if tol is None else tol

    analytical = backward_activate(forward_activate(x, kind), grad, kind)
    numerical = numerical_gradient(kind, x, grad, eps)

    abs_error = np.abs(analytical - numerical)
    max_abs_error = float(np.max(abs_error)) if abs_error.size > 0 else 0.0

    denom = np.maximum(np.abs(analytical) + np.abs(numerical), 1e-8)
    max_rel_error = float(np.max(abs_error / denom)) if abs_error.size > 0 else 0.0

    return {
        "analytical": analytical,
        "numerical": numerical,
        "max_abs_error": max_abs_error,
        "max_rel_error": max_rel_error,
        "passed": max_abs_error < tol,
    }
