import logging
import sys

ROOT_LOGGER = "solar_calculator"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(debug: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Attach a stdout handler to the calculator's logger tree.

    Safe to call repeatedly: the handler is added once and later calls only
    adjust the level. The root logger is left alone so Streamlit's own
    logging setup is untouched.
    """
    level = logging.WARNING if quiet else (logging.DEBUG if debug else logging.INFO)
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_solar_calculator", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handler._solar_calculator = True
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
