import logging
import os

_levels = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARN,
    'warning': logging.WARN,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


def formatted_logger(label, level=None, format=None, date_format=None, file_path=None):
    """ Build a logger writing `asctime level:name:message` lines

    Parameters
    ----------
    label: str
        logger name
    level: str or int
        one of 'debug', 'info', 'warn', 'error', 'critical' or a logging level, default info
    format: str
        logging format string
    date_format: str
        strftime format of asctime
    file_path: str
        if given, log lines are also appended to this file

    Returns
    -------
    log: logging.Logger
    """
    log = logging.getLogger(label)
    if level is None:
        level = logging.INFO
    elif not isinstance(level, int):
        level = _levels[level.lower()]
    log.setLevel(level)

    if format is None:
        format = '%(asctime)s %(levelname)s:%(name)s:%(message)s'
    if date_format is None:
        date_format = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(format, date_format)

    # repeated calls with the same label reuse the handlers already attached
    if not any(type(h) is logging.StreamHandler for h in log.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        log.addHandler(stream_handler)

    if file_path is not None:
        file_path = os.path.abspath(file_path)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == file_path for h in log.handlers):
            dir_name = os.path.dirname(file_path)
            if not os.path.exists(dir_name):
                os.makedirs(dir_name)
            file_handler = logging.FileHandler(file_path)
            file_handler.setFormatter(formatter)
            log.addHandler(file_handler)
    return log
