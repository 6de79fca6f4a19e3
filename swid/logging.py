import logging
from rich.logging import RichHandler

_LOGGER = logging.getLogger("swid")
_FORMAT = "%(message)s"

def set_verbosity(verbose: bool) -> None:
    """Route swid logs through a Rich handler; call from the host application."""
    level = logging.DEBUG if verbose else logging.INFO
    handler = RichHandler(rich_tracebacks=True, markup=True)
    logging.basicConfig(level=level, format=_FORMAT, datefmt="[%X]", handlers=[handler])
    _LOGGER.setLevel(level)

def log() -> logging.Logger:
    return _LOGGER
