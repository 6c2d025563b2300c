"""Value escaping for OSC 633 command and property fields."""

import re

from osc633.constants import ESCAPED_BACKSLASH, ESCAPED_NEWLINE, ESCAPED_SEMICOLON

_UNESCAPES = {
    ESCAPED_SEMICOLON: ";",
    ESCAPED_NEWLINE: "\n",
    ESCAPED_BACKSLASH: "\\",
}
_ESCAPES = {replacement: marker for marker, replacement in _UNESCAPES.items()}

# One pass over the original text, so a substituted backslash is never
# re-read as the start of another marker.
_UNESCAPE_RE = re.compile("|".join(re.escape(marker) for marker in _UNESCAPES))
_ESCAPE_RE = re.compile(r"[\\;\n]")


def unescape_value(value: str) -> str:
    """Decode ``\\x3b``, ``\\x0a`` and ``\\\\`` markers in a field value.

    Markers are matched in one left-to-right pass, so ``\\\\x3b`` decodes to
    the literal text ``\\x3b``. Chaining three ``str.replace`` calls would
    give ``\\;`` instead and break the round trip with :func:`escape_value`.

    Args:
        value: Raw field text as it appeared on the wire.

    Returns:
        The value with semicolons, newlines and backslashes restored.
    """
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES[m.group(0)], value)


def escape_value(value: str) -> str:
    """Encode a field value so it can be embedded in a sequence.

    Inverse of :func:`unescape_value`.
    """
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], value)
