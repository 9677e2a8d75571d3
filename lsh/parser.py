import re

from lsh.config import TOK_DELIM
from lsh.errors import fatal

# A token is a maximal run of non-delimiter characters
_TOKEN_RE = re.compile(f"[^{re.escape(TOK_DELIM)}]+")


def split_line(line):
    """
    Split a command line into tokens (very naively).
    No quoting or escaping: every non-delimiter character is literal.
    Returns: list of tokens, empty for a blank line
    """
    try:
        return [match.group() for match in _TOKEN_RE.finditer(line)]
    except MemoryError:
        fatal()
