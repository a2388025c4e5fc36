INPUT_FILENAME = "input.txt"

LEVEL_WARNING = "warning"
LEVEL_ERROR = "error"

# Tokens are bounded to a signed 64-bit integer.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

# Reading stops after this many consecutive lines fail to be read.
MAX_CONSECUTIVE_READ_FAILURES = 10
