import sys

from loguru import logger

from lsh.config import SHELL_NAME, EXIT_FAILURE


def report(err):
    """Print a non-fatal diagnostic to stderr, perror style."""
    print(f"{SHELL_NAME}: {err}", file=sys.stderr)


def fatal(msg="allocation error"):
    """Report an unrecoverable error and terminate the shell."""
    logger.error("fatal: {}", msg)
    report(msg)
    sys.stdout.flush()
    sys.exit(EXIT_FAILURE)
