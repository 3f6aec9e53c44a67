# SPDX-License-Identifier: GPL-3.0-or-later

import logging
import os
from logging.handlers import RotatingFileHandler

from gi.repository import GLib

from simplenotes.constants import DATA_DIR_NAME, LOG_FILE_NAME


def log_dir() -> str:
    path = os.path.join(GLib.get_user_data_dir(), DATA_DIR_NAME)
    os.makedirs(path, exist_ok=True)
    return path


def configure_logging(level=logging.INFO) -> logging.Logger:
    """Attach a rotating log file and stderr output to the package logger."""
    logger = logging.getLogger('simplenotes')
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    try:
        handler = RotatingFileHandler(
            os.path.join(log_dir(), LOG_FILE_NAME),
            maxBytes=1_048_576,
            backupCount=3,
            encoding='utf-8',
        )
    except OSError:
        handler = None
    else:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if handler is not None:
        logger.debug('Logging to %s', handler.baseFilename)
    return logger
