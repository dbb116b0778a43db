"""Resource limits and defaults for JSON path compilation."""

DEFAULT_MAX_PATH_DEPTH = 64
"""Maximum number of segments accepted in a single path (CWE-400 prevention)."""

MAX_INDEX_DIGITS = 18
"""Maximum digits in an array index; any 18-digit value fits a signed 64-bit integer."""
