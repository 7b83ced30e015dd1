"""
Argolite option registry and the parse pipeline.

Overview
- Registry: ordered option descriptors plus one delimiter shared by every multi
  option registered on it. Registration order is the usage-table order and the
  order in which the environment is consulted.
- Declaration
  • add_option(name, default, descr, *, required, type, bind) -> Scalar | String
  • add_multi_option(name, defaults, descr, *, required, type, bind) -> MultiScalar | MultiString
  • add_flag(name, descr, *, bind) -> Flag
  Each returns the descriptor; its `value` is the typed handle the host reads back.
- Input layers (each applies fully on top of the current state)
  • load(path): options file, one argv token per line.
  • parse_env(environ=None): option names looked up verbatim as environment variables.
  • parse(argv=None): argv tokens, leftovers collected as remaining arguments.
  The usual call order is load, parse_env, parse, which gives
  defaults < file < environment < command line.
- Queries
  • is_parsed(name), missing_required(), get_usage(), remaining_arguments.

Argv application
- Every token is looked up by name, including tokens that were just consumed as
  the value of the preceding option. A match marks the option parsed and
  consumes the token; the next token, when there is one, is consumed as its
  value. Flags do not take a value unless the registry was built with
  swallow=True, in which case the token following a flag is consumed and dropped.
- Tokens never consumed become the remaining arguments, in order. Only the last
  pass counts (load() goes through the same pass).

Quick example:
    >>> registry = Registry()
    >>> port = registry.add_option("--port", 8080, "Port to listen on")
    >>> verbose = registry.add_flag("--verbose", "Chatty output")
    >>> registry.parse(["serve", "--port", "9090", "--verbose", "now"])
    ['serve', 'now']
    >>> port.value, verbose.value
    (9090, True)
"""
import logging
import sys
from collections import defaultdict

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import adapters
from .faults import DuplicatedOptionError, MissingRequiredError
from .options import Scalar, String, MultiScalar, MultiString, Flag
from .utils import *

logger = logging.getLogger(__name__)


class Registry:
    """
    Ordered collection of option descriptors.

    Parameters
    - delim: one character splitting the text of multi options (default ",").
    - swallow: when True, the token following a flag on argv (or in a file) is
      consumed along with it and dropped.
    - colorful: whether the rich rendering applies the palette.
    """

    def __init__(self, delim=",", *, swallow=False, colorful=True):
        if not isinstance(delim, str):
            raise TypeError("registry 'delim' must be a string")
        elif len(delim) != 1:
            raise ValueError("registry 'delim' must be a single character")

        self._delim = delim
        self._swallow = bool(swallow)
        self._colorful = bool(colorful)
        self._options = []
        self._index = {}
        self._remaining = []

    delim = mirror("delim")
    swallow = mirror("swallow")
    colorful = mirror("colorful")

    @property
    def remaining_arguments(self):
        """
        Tokens of the last argv pass that were neither option names nor consumed values.
        """
        return list(self._remaining)

    def get_remaining_arguments(self):
        return self.remaining_arguments

    def _register(self, option):
        if option.name in self._index:
            raise DuplicatedOptionError(option.name)
        self._options.append(option)
        self._index[option.name] = option
        return option

    def add_option(self, name, default, descr=Unset, *, required=False, type=Unset, bind=Unset):
        """
        Declare a single-value option and write its default.

        A string default (or type=str) declares a String, kept verbatim; anything
        else declares a Scalar converted with type (by default the default's type).
        """
        if type is str or (type is Unset and isinstance(default, str)):
            option = String(name, default, descr, required=required, bind=bind)
        else:
            option = Scalar(name, default, descr, required=required, type=type, bind=bind)
        return self._register(option)

    def add_multi_option(self, name, defaults, descr=Unset, *, required=False, type=str, bind=Unset):
        """
        Declare a list option; its destination is seeded by splitting defaults on the delimiter.
        """
        if type is str:
            option = MultiString(name, defaults, descr, required=required, delim=self._delim, bind=bind)
        else:
            option = MultiScalar(name, defaults, descr, type=type, required=required, delim=self._delim, bind=bind)
        return self._register(option)

    def add_flag(self, name, descr=Unset, *, bind=Unset):
        """
        Declare a presence-only option; its destination starts as False.
        """
        return self._register(Flag(name, descr, bind=bind))

    def is_parsed(self, name, /):
        return (option := self._index.get(name)) is not None and option.parsed

    def missing_required(self):
        """
        Names of required options no input layer has seen, in registration order.
        """
        return [option.name for option in self._options if option.required and not option.parsed]

    def check(self):
        """
        Raise MissingRequiredError when missing_required() is not empty.

        Parsing never enforces required options; hosts wanting a strict policy call this.
        """
        if missing := self.missing_required():
            raise MissingRequiredError(missing)

    def get_usage(self):
        """
        Render the usage table as plain text.

        One row per option in registration order: name, default, description and
        the REQUIRED / NOT REQUIRED tag. The first three columns are left-aligned
        and padded to the longest entry of the column plus one space. Every row
        ends with a newline; an empty registry renders as "".
        """
        rows = [
            (option.name, option.default_text, option.descr or "",
             "REQUIRED" if option.required else "NOT REQUIRED")
            for option in self._options
        ]
        if not rows:
            return ""

        widths = [max(len(row[column]) for row in rows) + 1 for column in range(3)]
        return "".join(
            f"{name:<{widths[0]}}{default:<{widths[1]}}{descr:<{widths[2]}}{tag}\n"
            for name, default, descr, tag in rows
        )

    def load(self, path, /):
        """
        Apply an options file; return False (and change nothing) when it cannot be read.
        """
        try:
            tokens = adapters.read_file(path)
        except OSError as error:
            logger.debug("cannot load options file %r: %s", path, error)
            return False
        self._apply(tokens, "file")
        return True

    def parse_env(self, environ=None, /):
        """
        Apply environment variables named exactly like the registered options.

        environ defaults to os.environ and is read on every call.
        """
        for name, value in adapters.read_environ([option.name for option in self._options], environ):
            option = self._index[name]
            option.set_parsed(True, source="environment")
            option.set_value(value, source="environment")
            logger.debug("environment supplies %s", name)

    def parse(self, argv=None, /):
        """
        Apply argv tokens (sys.argv[1:] by default) and return the remaining arguments.
        """
        if argv is None:
            argv = sys.argv[1:]
        self._apply(list(argv), "command line")
        return self.remaining_arguments

    def _apply(self, tokens, source, /):
        consumed = [False] * len(tokens)

        for index, token in enumerate(tokens):
            if (option := self._index.get(token)) is None:
                continue

            option.set_parsed(True, source=source)
            consumed[index] = True

            if isinstance(option, Flag) and not self._swallow:
                continue
            if index + 1 < len(tokens):
                option.set_value(tokens[index + 1], source=source)
                consumed[index + 1] = True

        self._remaining = [token for token, used in zip(tokens, consumed) if not used]
        logger.debug(
            "%s: %d tokens, %d consumed, %d remaining",
            source, len(tokens), consumed.count(True), len(self._remaining)
        )

    def values(self):
        """
        Snapshot of the destinations as {name: value}, in registration order.
        """
        return {option.name: option.value for option in self._options}

    def __getitem__(self, name, /):
        return self._index[name]

    def __contains__(self, name, /):
        return name in self._index

    def __iter__(self):
        return iter(tuple(self._options))

    def __len__(self):
        return len(self._options)

    def __repr__(self):
        return f"registry(delim={self._delim!r}, swallow={self._swallow!r}, options={[option.name for option in self._options]!r})"

    def __rich_repr__(self):
        yield "delim", self._delim
        yield "swallow", self._swallow
        yield "options", tuple(self._options)

    def __rich__(self):
        """
        Render the usage table with rich.

        Palette keys
        - option-name, flag-name, default, description, required, not-required, table-border

        Customization
        - Define a mapping named __styles__ in __main__ to override any palette entry.
        - When colorful is False, styling is suppressed.
        """
        styles = defaultdict(str, {
            "option-name": "bold #00E6FF",  # CYAN for options
            "flag-name": "bold #22C55E",  # GREEN for flags
            "default": "bold #FFD600",  # AMBER for defaults
            "description": "#9CA3AF",  # Muted gray
            "required": "bold #EF4444",  # RED when required
            "not-required": "#737373",  # Dim gray otherwise
            "table-border": "#4B5563",  # Slate border
        } | getattr(__import__('__main__'), "__styles__", {}))

        def styler(style):
            return styles[style] if self._colorful else ""

        table = Table(box=ROUNDED, show_header=False, border_style=styler("table-border"))
        for _ in range(4):
            table.add_column()

        for option in self._options:
            table.add_row(
                Text(option.name, styler("flag-name" if isinstance(option, Flag) else "option-name")),
                Text(option.default_text, styler("default")),
                Text(option.descr or "", styler("description")),
                Text(*(("REQUIRED", styler("required")) if option.required else ("NOT REQUIRED", styler("not-required")))),
            )
        return table

    def print_usage(self, console=None, /):
        """
        Print the rich usage table (to a fresh stdout console by default).
        """
        if console is None:
            console = Console()
        console.print(self)


__all__ = (
    "Registry",
)
