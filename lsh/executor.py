import os
import subprocess

from loguru import logger

from lsh.builtin import lookup
from lsh.errors import report


def wait_child(proc):
    """
    Block until the child exits or is killed by a signal.
    Stop notifications are skipped; the wait is repeated.
    Returns: exit code, or -signum if the child was killed
    """
    while True:
        try:
            _, status = os.waitpid(proc.pid, os.WUNTRACED)
        except KeyboardInterrupt:
            # Ctrl+C reaches the child too; keep waiting for it to die
            continue

        if os.WIFEXITED(status) or os.WIFSIGNALED(status):
            break
        logger.debug("pid {} stopped, still waiting", proc.pid)

    # Reaped here, so Popen must not wait on the pid again
    proc.returncode = os.waitstatus_to_exitcode(status)
    logger.debug("pid {} finished with status {}", proc.pid, proc.returncode)
    return proc.returncode


def launch(args):
    """
    Run an external program and wait for it to finish.
    args[0] is looked up on PATH and passed as argv[0].
    Returns: True, whatever the program's exit status
    """
    try:
        proc = subprocess.Popen(args)
    except (OSError, ValueError) as e:
        # Covers both fork failure and exec failure in the child
        report(e)
        return True

    try:
        logger.debug("started pid {}: {}", proc.pid, args)
    finally:
        # Reap the child even if interrupted before the wait starts
        wait_child(proc)
    return True


def execute(args):
    """
    Run a builtin or launch a program.
    Returns: True if the shell should keep reading, False to stop
    """
    if not args:
        # An empty command was entered
        return True

    handler = lookup(args[0])
    if handler is not None:
        return handler(args)

    return launch(args)
