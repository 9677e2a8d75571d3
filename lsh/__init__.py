"""lsh: a small interactive command shell."""

from loguru import logger

__version__ = "0.1.0"

# Silent unless the command line enables it
logger.disable("lsh")
