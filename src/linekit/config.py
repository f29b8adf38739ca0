# src/linekit/config.py

# Path argument meaning "read standard input"
STDIN_MARKER = "-"

# Name used in diagnostics for failures writing to standard output
STDOUT_LABEL = "<stdout>"

TEXT_ENCODING = "utf-8"

# lkwc: width of each right-justified count column
FIELD_WIDTH = 8

# lkwc: fixed display order, and the fields shown when no flag is given
FIELD_ORDER = ("lines", "words", "bytes", "chars")
DEFAULT_FIELDS = ("lines", "words", "bytes")

# lkuniq -c: width of the occurrence count
RUN_COUNT_WIDTH = 4
