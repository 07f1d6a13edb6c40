class ActivationError(ValueError):
    """激活层所有契约错误的基类"""


class MatrixShapeError(ActivationError):
    """输入不是二维矩阵"""


class ShapeMismatchError(ActivationError):
    """激活输出与上游梯度形状不一致"""


class JacobianInputError(ActivationError):
    """softmax雅可比矩阵的输入不是单行矩阵"""


class UnknownActivationError(ActivationError):
    """无法识别的激活函数类型"""


class ActivationStateError(ActivationError, RuntimeError):
    """在forward之前调用了backward"""
