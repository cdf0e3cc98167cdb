"""loguru sinks for the service; modules log through ``get_logger(__name__)``."""
import sys

from loguru import logger

from config.settings import LOG_LEVEL, LOG_TO_CONSOLE, LOG_TO_FILE, LOG_FILE_PATH

LOG_FORMAT = "{time:HH:mm:ss.SSS} {level: <7} [{extra[name]}] {message}"

logger.remove()
logger.configure(extra={'name': 'bloglist'})

if LOG_TO_CONSOLE:
    logger.add(sys.stderr, format=LOG_FORMAT, level=LOG_LEVEL)

if LOG_TO_FILE:
    # diagnose stays off so tracebacks never dump local variables such as passwords
    logger.add(LOG_FILE_PATH, format=LOG_FORMAT, level=LOG_LEVEL, rotation="20 MB", diagnose=False)


def get_logger(name: str = None):
    if name:
        return logger.bind(name=name)
    return logger
