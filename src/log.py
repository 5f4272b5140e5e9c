"""Log utilities."""

import logging
from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for Rich console output.

    The returned logger has its level set to DEBUG, its handlers replaced with
    a single RichHandler for rich-formatted console output, and propagation to
    ancestor loggers disabled.

    Parameters:
        name (str): Name of the logger to retrieve or create.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = [RichHandler()]
    logger.propagate = False
    return logger


def configure_logging(verbose: bool = False, color_log: bool = True) -> None:
    """Configure the root logger to write through a single RichHandler.

    Parameters:
        verbose (bool): Switch the root level from INFO to DEBUG.
        color_log (bool): Use colorized output; plain text when False.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(no_color=not color_log),
                markup=False,
                rich_tracebacks=True,
            )
        ],
        force=True,
    )
