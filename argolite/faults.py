"""
Argolite faults and rendering.

Scope
- FaultCode: stable numeric identifiers for the few faults the library raises.
- OptionException: base type carrying a message plus options (code, title, hint,
  colorful, ...) that renders itself through rich.
- DuplicatedOptionError: raised at registration when a name is declared twice.
- MissingRequiredError: raised by Registry.check() when required options were not seen.

Parsing itself never raises: malformed values fall back to zero values and
unknown tokens become remaining arguments. Faults here are either programmer
errors (registration) or opt-in host policy (check()).

Styling
- The host application can define a __styles__ mapping in __main__ to override
  palette entries, and a __codes__ mapping to relabel fault codes.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - registration (2110x): DUPLICATED_OPTION
    - host policy (2120x): MISSING_REQUIRED
    """
    # --- registration errors (211xx) ---
    DUPLICATED_OPTION = 21101

    # --- host policy errors (212xx) ---
    MISSING_REQUIRED  = 21201

    def normalize(self):
        """
        return a host-normalized label for this code (see __codes__ in __main__).
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class OptionException(Exception):
    """
    base of argolite errors.

    options
    - code: FaultCode of the fault.
    - title: short headline.
    - hint: one actionable sentence.
    - colorful: whether __rich__ applies the palette (default True).
    - fancy: whether __rich__ wraps the fault in a panel (default False).
    """
    code = Unset
    title = Unset
    hint = Unset

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(*(() if message is Unset else (message,)))
        self.message = message
        self.options = MappingProxyType({
            "code": self.code,
            "title": self.title,
            "hint": self.hint,
            "colorful": True,
            "fancy": False,
        } | options)

    def __str__(self):
        return "" if self.message is Unset else self.message

    def __rich__(self):
        styles = defaultdict(str, {
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(__import__("__main__"), "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not self.options["colorful"]:
                return Text(str(fragment))
            return Text(str(fragment), styles[style])

        header = Text.assemble(
            "[ ",
            text(self.options["code"].normalize() if self.options["code"] else "", "code"),
            " | ",
            text(coalesce(self.options["title"], "error").title(), "error-title"),
            " ]"
        )
        message = text(str(self), "error-message")
        hint = Text.assemble(text(" → ", "hint-arrow"), text(coalesce(self.options["hint"], ""), "hint"))

        if self.options["fancy"]:
            return Panel(Group(message, hint), title=header, title_align="left")
        return Group(header, message, hint)


class DuplicatedOptionError(OptionException, ValueError):
    """
    an option name was registered twice on the same registry.
    """
    code = FaultCode.DUPLICATED_OPTION
    title = "duplicated option"
    hint = "register every option name once"

    def __init__(self, name, /, **options):
        super().__init__(f"option {name!r} is already registered", **options)
        self.name = name


class MissingRequiredError(OptionException, LookupError):
    """
    required options were not observed by any input layer.
    """
    code = FaultCode.MISSING_REQUIRED
    title = "missing required options"
    hint = "pass them on the command line, in the environment, or in the options file"

    def __init__(self, names, /, **options):
        self.names = tuple(names)
        super().__init__(f"required options not given: {', '.join(self.names)}", **options)


__all__ = (
    "FaultCode",
    "OptionException",
    "DuplicatedOptionError",
    "MissingRequiredError",
)
