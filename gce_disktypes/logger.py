import logging

from rich.logging import RichHandler


def setup_logger(name: str = "gce_disktypes", level: int = logging.WARNING) -> logging.Logger:
    """Configures and returns a logger with RichHandler."""

    logger = logging.getLogger(name)

    # Avoid adding duplicate handlers if setup is called multiple times
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger for module ``name``."""
    if name == "gce_disktypes" or name.startswith("gce_disktypes."):
        return logging.getLogger(name)
    return logging.getLogger(f"gce_disktypes.{name}")
