from enum import Enum

from .errors import UnknownActivationError


class ActivationKind(str, Enum):
    LINEAR = "linear"
    LOGISTIC = "logistic"
    TANH = "tanh"
    RELU = "relu"
    LEAKY_RELU = "lrelu"
    SOFTMAX = "softmax"

    # 别名
    SIGMOID = "logistic"
    LRELU = "lrelu"

    @classmethod
    def parse(cls, value):
        """
        把枚举成员或名称字符串解析为ActivationKind
        value: ActivationKind 或 "relu" / "Sigmoid" / "leaky_relu" 等名称
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "").replace("-", "").replace(" ", "")
            if key in _NAMES:
                return _NAMES[key]
        raise UnknownActivationError(f"unknown activation kind: {value!r}")


_NAMES = {
    "linear": ActivationKind.LINEAR,
    "identity": ActivationKind.LINEAR,
    "logistic": ActivationKind.LOGISTIC,
    "sigmoid": ActivationKind.LOGISTIC,
    "tanh": ActivationKind.TANH,
    "relu": ActivationKind.RELU,
    "lrelu": ActivationKind.LEAKY_RELU,
    "leakyrelu": ActivationKind.LEAKY_RELU,
    "softmax": ActivationKind.SOFTMAX,
}
