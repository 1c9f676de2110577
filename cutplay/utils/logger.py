import logging
import sys

LOGGER_NAME = "CutPlay"


def setup_logger(level=logging.DEBUG):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Engine chatter goes to stdout, same as the GUI's own messages
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


def get_logger(component):
    """Child logger for one component, e.g. ``CutPlay.playback``."""
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


logger = setup_logger()
