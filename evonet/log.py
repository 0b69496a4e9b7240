import logging
import os
from typing import Optional

LOGGER_NAME = "GeneticEvolution"
LIBRARY_LOGGER_NAME = "evonet"
LOG_FORMAT = "[%(asctime)s][%(processName)s][%(levelname)s] %(message)s"


def setup_logging(log_file: Optional[str] = None) -> logging.Logger:
    """Attach console and (optionally) file handlers to the evolution and library loggers."""
    logger = logging.getLogger(LOGGER_NAME)
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

    # Already configured
    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)
    handlers = []

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    handlers.append(ch)

    if log_file is not None:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        handlers.append(fh)

    # Network creation, breed and mutate records come from the evonet.* loggers
    for target in (logger, library_logger):
        target.setLevel(logging.DEBUG)
        for handler in handlers:
            target.addHandler(handler)

    return logger
