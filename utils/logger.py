# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


def setup_logger(log_dir: str | Path = "data/logs", level: int = logging.INFO):
    """
    Attach file and console handlers to the "checkout" logger.

    The cart, repository and checkout services log through "checkout.*"
    child loggers; only warnings (stock and input errors) reach the console.
    """

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "checkout.log"

    logger = logging.getLogger("checkout")
    logger.setLevel(level)

    # already configured by an earlier call
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    # Console handler shows warnings (e.g. stock errors) to the customer
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info(f"Checkout logging to {log_file}")
    return logger
