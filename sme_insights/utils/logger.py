import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s — %(name)s: %(message)s"


def configure_logging(level: str = "INFO", name: str = "sme_insights") -> logging.Logger:
    """
    Attach one stream handler to the package logger. Safe to call
    on every Streamlit rerun; only the level is updated after the
    first call.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    logger.addHandler(handler)

    return logger
