import sys

from loguru import logger

from lsh.config import EXIT_SUCCESS
from lsh.executor import execute
from lsh.parser import split_line
from lsh.reader import prompt, read_line


def shell_loop():
    """
    Main shell loop: prompt, read, split, execute.
    Returns when a command asks to stop; exits the process on end of input.
    """
    status = True
    while status:
        prompt()
        try:
            line = read_line()
        except EOFError:
            logger.debug("end of input")
            sys.exit(EXIT_SUCCESS)
        except KeyboardInterrupt:
            print()
            continue

        args = split_line(line)
        try:
            status = execute(args)
        except KeyboardInterrupt:
            print()
            status = True

    logger.debug("exit requested")
