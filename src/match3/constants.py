# Runs shorter than this are never reported as matches.
MIN_MATCH_LENGTH = 3

DEFAULT_BOARD_WIDTH = 8
DEFAULT_BOARD_HEIGHT = 8

# Swap enumeration is O(width * height * (width + height)); boards past this
# size still work but are logged as a warning.
MAX_RECOMMENDED_BOARD_SIZE = 12
