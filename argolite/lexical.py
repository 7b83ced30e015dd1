"""
Text-to-value conversion in the manner of stream extraction.

Option values arrive as text. Scalars are read the way a formatted input stream
reads them: leading whitespace is skipped, only the first whitespace-delimited
token is looked at, and the longest valid prefix of that token is converted.
When nothing can be converted the target's zero value is produced instead of an
error, since the parser never rejects input.

    >>> extract(" 42 apples", int)
    42
    >>> extract("1.f", float)
    1.0
    >>> extract("many", int)
    0
    >>> split("a|b|", "|")
    ['a', 'b']
"""
import builtins
import logging
import re

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_TRUTHS = frozenset(("true", "yes", "on"))
_FALSEHOODS = frozenset(("false", "no", "off"))


def zero(type, /):
    """
    Zero value of a target type: type() when it can be built without arguments, else None.
    """
    try:
        return type()
    except (TypeError, ValueError):
        return None


def _token(text):
    parts = text.split(None, 1)
    return parts[0] if parts else ""


def _fallback(text, type):
    logger.debug("cannot read %r as %s, using its zero value", text, getattr(type, "__name__", type))
    return zero(type)


def extract(text, type, /):
    """
    Convert text to type the way a formatted stream extraction would.

    Rules
    - bool: an integer prefix (non-zero is true) or one of true/false, yes/no,
      on/off in any case. Anything else reads as False.
    - int (and subclasses): longest "[+-]digits" prefix, e.g. "12abc" -> 12, "1.5" -> 1.
      A subclass refusing the number (an IntEnum without that member) gives zero(type).
    - float (and subclasses): longest decimal prefix, e.g. "1.f" -> 1.0, "2e3x" -> 2000.0.
    Digits are ASCII only.
    - str: the first whitespace-delimited token.
    - any other callable: called with the first token; ValueError/TypeError give zero(type).
    """
    token = _token(text)

    if type is bool:
        if token.lower() in _TRUTHS:
            return True
        if token.lower() in _FALSEHOODS:
            return False
        if match := _INTEGER.match(token):
            return int(match.group()) != 0
        return _fallback(text, type)

    if isinstance(type, builtins.type) and issubclass(type, int):
        if match := _INTEGER.match(token):
            try:
                return type(int(match.group()))
            except (TypeError, ValueError):
                pass
        return _fallback(text, type)

    if isinstance(type, builtins.type) and issubclass(type, float):
        if match := _DECIMAL.match(token):
            try:
                return type(float(match.group()))
            except (TypeError, ValueError):
                pass
        return _fallback(text, type)

    if type is str:
        return token

    try:
        return type(token)
    except (TypeError, ValueError):
        return _fallback(text, type)


def split(text, delim, /):
    """
    Split text on delim with line-reader semantics.

    Each delimiter terminates a fragment, so a single trailing delimiter does not
    open a new, empty fragment: "" -> [], "a" -> ["a"], "a,,b" -> ["a", "", "b"],
    "a," -> ["a"], "," -> [""].

    Joining a list on delim and splitting it back gives the same list, except
    when its last element is empty: ["a", ""] joins to "a," and reads back as ["a"].
    """
    fragments = text.split(delim)
    if fragments[-1] == "":
        fragments.pop()
    return fragments


def render(value, /):
    """
    Canonical text of a scalar, readable back by extract().
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = (
    "extract",
    "split",
    "render",
    "zero",
)
