r"""
Argolite option descriptors.

Overview
- Kinds
  • Scalar: one value converted from text by stream-style extraction (int, float, bool, ...).
  • String: one value assigned verbatim; whitespace is preserved.
  • MultiScalar: a list; the text is split on the delimiter and every fragment is extracted.
  • MultiString: a list; the text is split on the delimiter and fragments are kept verbatim.
  • Flag: no value; being seen is the value.

- Shared interface
  • name, default_text, descr: identity and usage-table columns.
  • set_parsed(bool): toggles the parsed bit (flags mirror it into their value).
  • set_value(text): kind-specific setter; a no-op for flags.
  • value: the destination, a typed handle the host reads back. An optional `bind`
    callable receives every write, including the initial default one.

- Introspection
  • OptionType metaclass derives __typename__ (the kind) from the class name, publishes
    the fields of __introspectable__ as read-only properties, and provides stable
    __repr__/__rich_repr__ implementations.

Metadata (sanitized on construction)
- name: non-empty string without whitespace; matched verbatim against input tokens.
- descr: Unset | str, non-empty after trimming; becomes None when omitted.
- required: bool, informational only.
- type: callable target of the lexical conversion.
- bind: Unset | callable.
- defaults/delim (multi kinds): text of the default list and a one-character delimiter.

Quick example:
    >>> port = Scalar("--port", 8080, "Port to listen on")
    >>> port.set_value("9090 trailing")
    >>> port.value
    9090
    >>> tags = MultiString("--tags", "a,b")
    >>> tags.value
    ['a', 'b']
"""
import builtins
import functools
import operator
import re

from . import lexical
from .utils import *


class OptionType(type):
    """
    Metaclass that turns option kinds into introspectable descriptors.

    Responsibilities
    - __typename__ is derived from the class name (camel-case split with hyphens),
      e.g. MultiString -> "multi-string". It doubles as the option kind.
    - Every name listed in a class's own __introspectable__ becomes a read-only
      property mirroring the private field "_{name}".
    - __repr__/__rich_repr__ list the introspectable fields in declaration order.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Concise representation, e.g. scalar(name='--port', default=8080, ...).
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (field, value) pairs for pretty printers.
            """
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate and normalize the fields shared by every kind.

    - name: must be a string, non-empty, and free of whitespace (it is matched
      verbatim against argv tokens, file lines, and environment variable names).
    - descr: Unset or a string that is non-empty after trimming; Unset becomes None.
    - required: coerced to bool.
    - bind: Unset or a callable.

    Raises
    - TypeError: wrong types.
    - ValueError: empty name/description or whitespace inside the name.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not name:
        raise ValueError(f"{cls.__typename__} 'name' cannot be empty")
    elif re.search(r"\s", name):
        raise ValueError(f"{cls.__typename__} 'name' cannot contain whitespace")

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = coalesce(descr)

    metadata["required"] = bool(metadata["required"])

    if (bind := metadata["bind"]) is not Unset and not callable(bind):
        raise TypeError(f"{cls.__typename__} 'bind' must be callable")


def _sanitize_typed_metadata(cls, metadata, /):
    """
    Internal: the conversion target must be callable (a type or a converter function).
    """
    if not callable(metadata["type"]):
        raise TypeError(f"{cls.__typename__} 'type' must be callable")


def _sanitize_multi_metadata(cls, metadata, /):
    """
    Internal: multi kinds take their defaults as delimited text and need a one-character delimiter.
    """
    if not isinstance(metadata["default"], str):
        raise TypeError(f"{cls.__typename__} 'default' must be a delimited string")

    if not isinstance(delim := metadata["delim"], str):
        raise TypeError(f"{cls.__typename__} 'delim' must be a string")
    elif len(delim) != 1:
        raise ValueError(f"{cls.__typename__} 'delim' must be a single character")


class Option(metaclass=OptionType):
    """
    Base of all option kinds.

    Subclasses provide __new__ (building and sanitizing metadata), default_text,
    and set_value. The base owns the parsed bit and the destination write path.
    """

    __introspectable__ = (
        "name",
        "default",
        "descr",
        "required",
        "parsed",
        "value",
        "source",
    )

    @classmethod
    def _build(cls, metadata, /):
        self = super().__new__(cls)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._parsed = False
        self._value = None
        self._source = "default"
        return self

    @property
    def kind(self):
        """
        The option kind: "scalar", "string", "multi-scalar", "multi-string", or "flag".
        """
        return type(self).__typename__

    @property
    def default_text(self):
        raise NotImplementedError

    def set_parsed(self, parsed=True, /, *, source="host"):
        self._parsed = bool(parsed)

    def set_value(self, text, /, *, source="host"):
        raise NotImplementedError

    def _assign(self, value, source, /):
        self._value = value
        self._source = source
        if self._bind is not Unset:
            self._bind(self.value)


class Scalar(Option):
    """
    Single value converted from text.

    The conversion reads only the first whitespace-delimited token and keeps its
    longest valid prefix (see lexical.extract). Unreadable text gives the type's
    zero value. The type defaults to the type of the default value.
    """

    __introspectable__ = Option.__introspectable__ + ("type",)

    def __new__(cls, name, default, /, descr=Unset, *, required=False, type=Unset, bind=Unset):
        metadata = {
            "name": name,
            "default": default,
            "descr": descr,
            "required": required,
            "type": coalesce(type, builtins.type(default)),
            "bind": bind,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_typed_metadata(cls, metadata)

        self = cls._build(metadata)
        self._assign(default, "default")
        return self

    @property
    def default_text(self):
        return lexical.render(self._default)

    def set_value(self, text, /, *, source="host"):
        self._assign(lexical.extract(text, self._type), source)


class String(Option):
    """
    Single text value assigned verbatim, spaces and all.
    """

    def __new__(cls, name, default, /, descr=Unset, *, required=False, bind=Unset):
        metadata = {
            "name": name,
            "default": default,
            "descr": descr,
            "required": required,
            "bind": bind,
        }
        _sanitize_metadata(cls, metadata)
        if not isinstance(default, str):
            raise TypeError(f"{cls.__typename__} 'default' must be a string")

        self = cls._build(metadata)
        self._assign(default, "default")
        return self

    @property
    def type(self):
        return str

    @property
    def default_text(self):
        return f'"{self._default}"'

    def set_value(self, text, /, *, source="host"):
        self._assign(text, source)


class MultiScalar(Option):
    """
    List of converted values.

    Every assignment rebuilds the list: the text is split on the delimiter and
    each fragment goes through the same extraction as a Scalar.
    """

    __introspectable__ = Option.__introspectable__ + ("type", "delim")

    def __new__(cls, name, default, /, descr=Unset, *, type, required=False, delim=",", bind=Unset):
        metadata = {
            "name": name,
            "default": default,
            "descr": descr,
            "required": required,
            "type": type,
            "delim": delim,
            "bind": bind,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_typed_metadata(cls, metadata)
        _sanitize_multi_metadata(cls, metadata)

        self = cls._build(metadata)
        self.set_value(default, source="default")
        return self

    @property
    def default_text(self):
        return f'"{self._default}"'

    def set_value(self, text, /, *, source="host"):
        self._assign([lexical.extract(fragment, self._type) for fragment in lexical.split(text, self._delim)], source)


class MultiString(Option):
    """
    List of text fragments.

    Fragments are kept exactly as they appear between delimiters: no trimming
    and no tokenization on whitespace.
    """

    __introspectable__ = Option.__introspectable__ + ("delim",)

    def __new__(cls, name, default, /, descr=Unset, *, required=False, delim=",", bind=Unset):
        metadata = {
            "name": name,
            "default": default,
            "descr": descr,
            "required": required,
            "delim": delim,
            "bind": bind,
        }
        _sanitize_metadata(cls, metadata)
        _sanitize_multi_metadata(cls, metadata)

        self = cls._build(metadata)
        self.set_value(default, source="default")
        return self

    @property
    def type(self):
        return str

    @property
    def default_text(self):
        return f'"{self._default}"'

    def set_value(self, text, /, *, source="host"):
        self._assign(lexical.split(text, self._delim), source)


class Flag(Option):
    """
    Presence-only option.

    The value mirrors the parsed bit; set_value ignores its argument.
    """

    def __new__(cls, name, /, descr=Unset, *, bind=Unset):
        metadata = {
            "name": name,
            "default": False,
            "descr": descr,
            "required": False,
            "bind": bind,
        }
        _sanitize_metadata(cls, metadata)

        self = cls._build(metadata)
        self._assign(False, "default")
        return self

    @property
    def type(self):
        return bool

    @property
    def default_text(self):
        return ""

    def set_parsed(self, parsed=True, /, *, source="host"):
        super().set_parsed(parsed)
        self._assign(self._parsed, source)

    def set_value(self, text, /, *, source="host"):
        pass


__all__ = (
    "Option",
    "Scalar",
    "String",
    "MultiScalar",
    "MultiString",
    "Flag",
)
