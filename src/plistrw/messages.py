import logging
import logging.handlers

from pathlib import Path
from sys import stdout, stderr

from . import osinfo
from . import LOG_FILE
from . import SYSTEM_LOG_DIR
from . import USER_LOG_DIR


def add_stream(stream, filters, log):
    """Add a stream handler."""
    handler = logging.StreamHandler(stream)
    handler.addFilter(lambda record: record.levelno in filters)

    if stream == stdout:
        handler.setLevel(logging.INFO)

    if stream == stderr:
        handler.setLevel(logging.ERROR)

    log.addHandler(handler)

    return handler


def log_path(log_file=LOG_FILE):
    """Log file location, system wide for root."""
    base_path = SYSTEM_LOG_DIR if osinfo.isroot() else USER_LOG_DIR
    result = base_path / log_file

    return result


def logging_conf(log_name='plistrw', silent=False, level='INFO', log_file=None):
    """Configures overall logging. Applications opt in to this, importing the module does not."""
    stdout_filters = [logging.INFO]
    stderr_filters = [logging.ERROR, logging.CRITICAL]

    _log_path = Path(log_file) if log_file is not None else log_path()
    _log_path.parent.mkdir(parents=True, exist_ok=True)

    log = logging.getLogger(log_name)
    log.setLevel(level.upper())
    formatter = logging.Formatter(fmt='%(asctime)s - %(name)s.%(funcName)s - %(levelname)s - %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')

    # Each run starts a fresh log file
    rollover = _log_path.exists()
    file_handler = logging.handlers.RotatingFileHandler(_log_path, backupCount=7)

    if rollover:
        file_handler.doRollover()

    file_handler.setFormatter(formatter)
    log.addHandler(file_handler)

    # INFO goes to stdout, ERROR/CRITICAL to stderr, everything at or above 'level' to the log file
    add_stream(stderr, stderr_filters, log)

    if not silent:
        add_stream(stdout, stdout_filters, log)

    return log
