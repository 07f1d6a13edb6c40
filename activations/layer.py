from .dispatch import forward_activate, backward_activate
from .errors import ActivationStateError
from .kinds import ActivationKind


class Activation:
    def __init__(self, kind):
        self.kind = ActivationKind.parse(kind)
        self.cache = None

    def forward(self, x):
        """
        前向传播
        x: (N, C) 形状的未激活输出
        """
        out = forward_activate(x, self.kind)

        # 保存激活输出用于反向传播
        self.cache = out

        return out

    def backward(self, grad):
        """
        反向传播
        grad: 上游梯度，与激活输出同形状
        """
        if self.cache is None:
            raise ActivationStateError("backward() called before forward()")

        return backward_activate(self.cache, grad, self.kind)

    def __repr__(self):
        return f"Activation({self.kind.value!r})"
