import logging

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.DEBUG):
    logger = logging.getLogger()
    if logger.handlers:
        return
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT)
    stream = logging.StreamHandler()
    stream.setFormatter(fmt)
    logger.addHandler(stream)
