from typing import Literal

DEFAULT_SECTION_NAME = ""
"""Name of the implicit section holding keys that precede any section header."""
DEFAULT_COMMENT_INDICATORS = ";"
DEFAULT_EQUAL_INDICATORS = "="
DEFAULT_ENCODING = "utf-8"
WHITESPACE = " \t\n\r"
LINE_TERMINATORS = "\n\r"
SECTION_OPEN = "["
SECTION_CLOSE = "]"
VALID_MARKERS = Literal[
    "\\",
    "!",
    '"',
    "%",
    "&",
    "/",
    "(",
    ")",
    "?",
    ":",
    ";",
    "#",
    "'",
    "*",
    ">",
    "<",
    "=",
]
"""Valid characters for markers (comment indicator or equal indicator)."""
