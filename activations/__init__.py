from .kinds import ActivationKind
from .dispatch import forward_activate, backward_activate, ACTIVATION_FUNCTIONS
from .elementwise import (
    forward_linear, backward_linear,
    forward_logistic, backward_logistic,
    forward_tanh, backward_tanh,
    forward_relu, backward_relu,
    forward_lrelu, backward_lrelu,
    LEAKY_SLOPE,
)
from .softmax import forward_softmax, softmax_jacobian, backward_softmax
from .layer import Activation
from .gradcheck import numerical_gradient, gradient_check
from .config import ActivationConfig, DEFAULT_CONFIG
from .logger import setup_logger
from .errors import (
    ActivationError, MatrixShapeError, ShapeMismatchError,
    JacobianInputError, UnknownActivationError, ActivationStateError,
)

__all__ = [
    'ActivationKind', 'forward_activate', 'backward_activate', 'ACTIVATION_FUNCTIONS',
    'forward_linear', 'backward_linear', 'forward_logistic', 'backward_logistic',
    'forward_tanh', 'backward_tanh', 'forward_relu', 'backward_relu',
    'forward_lrelu', 'backward_lrelu', 'LEAKY_SLOPE',
    'forward_softmax', 'softmax_jacobian', 'backward_softmax',
    'Activation', 'numerical_gradient', 'gradient_check',
    'ActivationConfig', 'DEFAULT_CONFIG', 'setup_logger',
    'ActivationError', 'MatrixShapeError', 'ShapeMismatchError',
    'JacobianInputError', 'UnknownActivationError', 'ActivationStateError',
]
