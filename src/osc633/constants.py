"""Shared constants for the OSC 633 wire format."""

# Sequence format: \033]633;<type>[;<field>]*\007
ESC = "\x1b"
OSC633_START = f"{ESC}]633;"
ST = "\x07"
SEPARATOR = ";"

PROMPT_START = "A"
PROMPT_END = "B"
COMMAND_START = "C"
COMMAND_END = "D"
COMMAND_LINE = "E"
PROPERTY = "P"

# Escape markers used inside E command and P value fields.
ESCAPED_SEMICOLON = "\\x3b"
ESCAPED_NEWLINE = "\\x0a"
ESCAPED_BACKSLASH = "\\\\"
