# stayintouch/logger.py
import logging
from logging.handlers import RotatingFileHandler
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name, log_dir=None, max_bytes=1024 * 1024, backup_count=5):
    """
    Returns the named logger with a console handler and, when log_dir is
    given, a rotating file handler writing to <log_dir>/<name>.log.
    Handlers are only attached the first time a logger is set up.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_dir:
            if not os.path.exists(log_dir):
                os.makedirs(log_dir)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, f'{name}.log'),
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
