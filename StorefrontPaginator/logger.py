import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - [%(funcName)s]: %(message)s"
DATE_FORMAT = "%d/%m/%y %H:%M:%S"


def configure_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Attaches a console handler to the package logger. The library never calls this itself.
    :param level: The level to log at.
    :return: The package logger.
    """
    logger = logging.getLogger("StorefrontPaginator")
    if not logger.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
