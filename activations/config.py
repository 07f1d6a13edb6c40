import os

import numpy as np


class ActivationConfig:
    def __init__(self):
        # 矩阵数据类型
        self.dtype = np.float64

        # 数值梯度检查参数
        self.grad_check_eps = 1e-6
        self.grad_check_tol = 1e-5

        # 日志级别
        self.log_level = os.environ.get("ACTIVATIONS_LOG_LEVEL", "WARNING")


DEFAULT_CONFIG = ActivationConfig()
