import os

SHELL_NAME = "lsh"
PROMPT = "> "

# Token delimiters: space, tab, CR, LF, bell
TOK_DELIM = " \t\r\n\a"

# Seconds, for --connect
SEND_TIMEOUT = 8

LOG_LEVEL = os.getenv("LSH_LOG_LEVEL", "WARNING").upper()

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
