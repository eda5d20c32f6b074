import logging

logger = logging.getLogger("nnlab")
formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")


def config_logger(path=None, level=logging.INFO):
    """
    Configures the package logger to log messages to the console and,
    optionally, to a file.

    Args:
        path (str, optional): Path to the log file where logs should be written.
        level (int): Logging level for the logger and its handlers.

    - Removes existing handlers to avoid duplicate logs.
    - Creates a console handler that prints logs to stderr.
    - Creates a file handler when a path is given.
    """
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if path is not None:
        file_handler = logging.FileHandler(path)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
