import sys

from lsh.config import PROMPT
from lsh.errors import fatal


def prompt(stream=None):
    """Print the prompt and flush it so it shows before input blocks"""
    if stream is None:
        stream = sys.stdout
    stream.write(PROMPT)
    stream.flush()
    sys.stderr.flush()


def read_line(stream=None):
    """
    Read one line of input, one character at a time.
    Returns: the line without its newline.
    Raises EOFError as soon as the stream ends; an unterminated
    last line is dropped.
    """
    if stream is None:
        stream = sys.stdin

    buffer = []
    try:
        while True:
            c = stream.read(1)
            if not c:
                raise EOFError
            if c == "\n":
                break
            buffer.append(c)
        return "".join(buffer)
    except MemoryError:
        fatal()
