"""
Input adapters: turn an options file or the environment into tokens and events.

- read_file(path): one token per line, the same shape as argv. Raises OSError
  when the file cannot be opened or read; the registry turns that into a False
  return of load().
- read_environ(names, environ): (name, value) pairs for the names present in
  the mapping, in the order the names are given.
"""
import logging
import os

from . import lexical

logger = logging.getLogger(__name__)


def read_file(path, /):
    """
    Read an options file as a token list.

    Lines keep everything but their line terminator, empty lines become empty
    tokens, and the newline ending the last line does not add a token of its own.
    Universal newlines apply, so CRLF files read the same as LF ones. Bytes that
    are not UTF-8 are kept as lone surrogates instead of failing the read.
    """
    with open(path, encoding="utf-8", errors="surrogateescape") as file:
        text = file.read()
    tokens = lexical.split(text, "\n")
    logger.debug("read %d tokens from %s", len(tokens), os.fspath(path))
    return tokens


def read_environ(names, environ=None, /):
    """
    Yield (name, value) for each of names set in environ (os.environ by default).

    The mapping is consulted at iteration time; nothing is cached.
    """
    if environ is None:
        environ = os.environ
    for name in names:
        try:
            value = environ[name]
        except KeyError:
            continue
        yield name, value


__all__ = (
    "read_file",
    "read_environ",
)
