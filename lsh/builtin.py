import os
import sys
from types import MappingProxyType

from loguru import logger

from lsh.config import SHELL_NAME
from lsh.errors import report


def builtin_cd(args):
    """Change directory. args[0] is "cd", args[1] is the directory."""
    if len(args) < 2:
        print(f'{SHELL_NAME}: expected argument to "cd"', file=sys.stderr)
        return True

    try:
        os.chdir(args[1])
        logger.debug("cwd is now {}", os.getcwd())
    except OSError as e:
        report(e)
    return True


def builtin_help(args):
    """Print help message"""
    print(f"""{SHELL_NAME} help:
Type program names and arguments, and hit enter.
The following are built in:""")
    for name in builtin_names():
        print(f"  {name}")
    print("Use the man command for information on other programs.")
    return True


def builtin_exit(args):
    """Stop the shell loop. Arguments are ignored."""
    return False


# Registration order is the lookup and help order
BUILTINS = MappingProxyType({
    "cd": builtin_cd,
    "help": builtin_help,
    "exit": builtin_exit,
})


def builtin_names():
    return list(BUILTINS)


def num_builtins():
    return len(BUILTINS)


def lookup(name):
    """
    Find the handler for a builtin command.
    Returns: handler or None
    """
    for builtin_name, handler in BUILTINS.items():
        if name == builtin_name:
            return handler
    return None
