import sys
from loguru import logger


def configure_logging(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, level=level, backtrace=True, diagnose=False, serialize=True)
    logger.enable("paytrack")
    return logger
