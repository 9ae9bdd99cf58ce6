# loguru setup
import sys

from loguru import logger


def setup_logging(level="INFO"):
    logger.remove()
    logger.add(sys.stdout, level=level, backtrace=False, diagnose=False)
    return logger
