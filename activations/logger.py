import logging

from .config import DEFAULT_CONFIG

PACKAGE_LOGGER = "activations"


def setup_logger(level=None):
    """配置包级logger，重复调用不会添加重复的handler"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level or DEFAULT_CONFIG.log_level)
    if not logger.handlers:
        sh = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
        )
        sh.setFormatter(formatter)
        logger.addHandler(sh)
    return logger
