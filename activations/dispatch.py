import logging

from .elementwise import (
    forward_linear, backward_linear,
    forward_logistic, backward_logistic,
    forward_tanh, backward_tanh,
    forward_relu, backward_relu,
    forward_lrelu, backward_lrelu,
)
from .kinds import ActivationKind
from .matrix import as_matrix
from .softmax import forward_softmax, backward_softmax

logger = logging.getLogger(__name__)

ACTIVATION_FUNCTIONS = {
    ActivationKind.LINEAR: (forward_linear, backward_linear),
    ActivationKind.LOGISTIC: (forward_logistic, backward_logistic),
    ActivationKind.TANH: (forward_tanh, backward_tanh),
    ActivationKind.RELU: (forward_relu, backward_relu),
    ActivationKind.LEAKY_RELU: (forward_lrelu, backward_lrelu),
    ActivationKind.SOFTMAX: (forward_softmax, backward_softmax),
}


def forward_activate(matrix, kind):
    """
    对矩阵执行激活函数
    matrix: (N, C) 未激活输出
    kind: 激活函数类型
    返回同形状的激活输出
    """
    kind = ActivationKind.parse(kind)
    matrix = as_matrix(matrix)
    logger.debug("forward %s on %dx%d", kind.value, *matrix.shape)
    forward, _ = ACTIVATION_FUNCTIONS[kind]
    return forward(matrix)


def backward_activate(out, grad, kind):
    """
    计算激活函数的梯度并乘到上游梯度上
    out: 该层缓存的激活输出
    grad: 对激活输出的梯度
    kind: 激活函数类型
    返回对未激活输出的梯度
    """
    kind = ActivationKind.parse(kind)
    out = as_matrix(out, "out")
    grad = as_matrix(grad, "grad")
    logger.debug("backward %s on %dx%d", kind.value, *out.shape)
    _, backward = ACTIVATION_FUNCTIONS[kind]
    return backward(out, grad)
