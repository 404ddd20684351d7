r"""
Docu switch specifications, decorators and the argument processor.

Overview
- Specs
  • Switch: named, presence-only switch (no payload), e.g. --help.
  • ParameterSwitch: named switch that consumes the following token, e.g. --output PATH.
  Both share one contract:
  • matches(token) -> bool: exact equality with one of the names.
  • handle(tokens, index) -> bool: remove the switch token (and its value) from
    the token list, run the bound handler and return its "continue" signal.

- Decorators
  • @switch(...): build a Switch and bind the decorated handler.
  • @parameter(...): build a ParameterSwitch and bind the decorated handler.

- Processing
  • process(arguments, switches) -> Processed(proceed, arguments)
    For each switch in registry order, the token list is scanned from its end
    toward its start; every match is removed and handled. A handler returning
    False stops processing at once. The caller's sequence is never mutated:
    the residual tokens are handed back as a tuple.

Handler signal
- A handler returns False to stop the run (e.g. --help); any other value,
  including None, means "continue".

Quick example:
    >>> @parameter("--output", metavar="PATH")
    ... def on_output(path):
    ...     print(path)
    ...
    >>> process(["--output", "bin", "foo.dll"], (on_output,))
    bin
    Processed(proceed=True, arguments=('foo.dll',))
"""
import functools
import logging
import operator
import re
from collections import namedtuple

from .faults import FaultCode, MissingSwitchValueError, getdoc
from .utils import *

logger = logging.getLogger(__name__)

Processed = namedtuple("Processed", ("proceed", "arguments"))


class SwitchType(type):
    """
    Metaclass that turns switch specs into introspectable descriptors.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens),
      used in messages and help output.
    - Expose every name listed in __introspectable__ as a read-only property
      backed by the private "_{name}" field.
    - Provide stable __repr__/__rich_repr__ implementations.
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
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    r"""
    Internal: validate and normalize shared switch metadata (mutates in place).

    - names: required; each must match r"--?[^\W\d_](-?[^\W_]+)*" and be unique.
      Kept as a tuple so help lists them in declaration order.
    - group: Unset | non-empty str (defaults to "switches").
    - descr: Unset | non-empty str (defaults to None).
    """
    names = []
    if not metadata["names"]:
        raise TypeError(f"{cls.__typename__} must specify at least one name")

    for name in metadata["names"]:
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} names must be strings")
        elif not (name := name.strip()):
            raise ValueError(f"{cls.__typename__} names cannot be empty-strings")
        elif not re.fullmatch(r"--?[^\W\d_](-?[^\W_]+)*", name):
            raise ValueError(f"{cls.__typename__} names must be valid shell-style option names (unicodes are allowed)")
        elif name in names:
            raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
        names.append(name)

    metadata["names"] = tuple(names)

    if not isinstance(group := metadata["group"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'group' must be a string")
    elif isinstance(group, str) and not (group := group.strip()):
        raise ValueError(f"{cls.__typename__} 'group' cannot be empty")
    metadata["group"] = coalesce(group, "switches")

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    elif isinstance(descr, str) and not (descr := descr.strip()):
        raise ValueError(f"{cls.__typename__} 'descr' cannot be empty")
    metadata["descr"] = coalesce(descr)


class Switch(metaclass=SwitchType):
    """
    Named, presence-only switch specification.

    The bound handler takes no value and returns the "continue" signal.
    """

    __introspectable__ = (
        "names",
        "group",
        "descr",
        "hidden",
    )

    arity = 0

    def __init__(self, *names, group=Unset, descr=Unset, hidden=False):
        metadata = {
            "names": names,
            "group": group,
            "descr": descr,
            "hidden": bool(hidden),
        }
        _sanitize_metadata(type(self), metadata)

        self._callback = Unset  # Bound later by the decorator.
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    def matches(self, token, /):
        """
        Exact token equality against any of the names.
        """
        return token in self._names

    def handle(self, tokens, index, /):
        """
        Remove the matched token at `index` and run the handler.

        Returns
        - False when the handler asked to stop, True otherwise.
        """
        token = tokens.pop(index)
        logger.debug("switch %r matched at index %d", token, index)
        return self() is not False

    def __call__(self):
        if self._callback is Unset:
            return None
        return self._callback()

    def __switch__(self):
        """
        Introspection hook: identify this spec as a Switch.
        """
        return self


class ParameterSwitch(Switch):
    """
    Named switch consuming the next token as its argument.

    The bound handler takes that token (a string) and returns the "continue"
    signal. The value token is never matched against other switches.
    """

    __introspectable__ = (
        "names",
        "metavar",
        "group",
        "descr",
        "hidden",
    )

    arity = 1

    def __init__(self, *names, metavar=Unset, group=Unset, descr=Unset, hidden=False):
        super().__init__(*names, group=group, descr=descr, hidden=hidden)

        if not isinstance(metavar, str | Unset):
            raise TypeError(f"{type(self).__typename__} 'metavar' must be a string")
        elif isinstance(metavar, str) and not (metavar := metavar.strip()):
            raise ValueError(f"{type(self).__typename__} 'metavar' cannot be empty")
        self._metavar = coalesce(metavar, "VALUE")

    def handle(self, tokens, index, /):
        """
        Remove the matched token and the value that follows it, then run the handler.

        Raises
        - MissingSwitchValueError: the switch is the last token.
        """
        token = tokens.pop(index)
        try:
            value = tokens.pop(index)
        except IndexError:
            raise MissingSwitchValueError(
                "switch %r expects a value but none follows it" % token,
                title="missing switch value",
                code=FaultCode.MISSING_SWITCH_VALUE,
                switch=token,
                hint="pass it as '%s %s'" % (token, self._metavar),
                docs=getdoc(FaultCode.MISSING_SWITCH_VALUE),
            ) from None
        logger.debug("switch %r matched at index %d with value %r", token, index, value)
        return self(value) is not False

    def __call__(self, value, /):
        if self._callback is Unset:
            return None
        return self._callback(value)


def process(arguments, switches, /):
    """
    Run every registered switch over the argument tokens.

    parameters
    - arguments: Iterable[str] (not mutated).
    - switches: ordered Iterable of Switch/ParameterSwitch.

    returns
    - Processed(proceed, arguments): proceed is False when a handler asked to
      stop; arguments is the tuple of tokens left once matching ended.

    notes
    - each switch scans the tokens from the end toward the start, so removing
      a match never shifts the indices still to be visited.
    """
    tokens = list(arguments)

    for switch in switches:
        for index in reversed(range(len(tokens))):
            if not switch.matches(tokens[index]):
                continue
            if not switch.handle(tokens, index):
                logger.debug("switch %r halted processing", switch.names[0])
                return Processed(False, tuple(tokens))

    return Processed(True, tuple(tokens))


def switch(*args, **kwargs):
    """
    Decorator/factory for a presence-only switch handler.

        @switch("--help", descr="show this help and exit")
        def on_help():
            return False

    Returns the configured Switch with the decorated function bound.
    """
    switch = Switch(*args, **kwargs)

    @rename("switch")
    def wrapper(callback, /):
        if not callable(callback):
            raise TypeError("@switch() must be applied to a callable")
        if switch._callback is not Unset:
            raise TypeError("@switch() must be applied only once")
        switch._callback = callback
        return switch

    return wrapper


def parameter(*args, **kwargs):
    """
    Decorator/factory for a value-consuming switch handler.

        @parameter("--output", metavar="PATH")
        def on_output(path): ...

    Returns the configured ParameterSwitch with the decorated function bound.
    """
    parameter = ParameterSwitch(*args, **kwargs)

    @rename("parameter")
    def wrapper(callback, /):
        if not callable(callback):
            raise TypeError("@parameter() must be applied to a callable")
        if parameter._callback is not Unset:
            raise TypeError("@parameter() must be applied only once")
        parameter._callback = callback
        return parameter

    return wrapper


__all__ = (
    # Classes (specifications)
    "Switch",
    "ParameterSwitch",

    # Decorators
    "switch",
    "parameter",

    # Processing
    "Processed",
    "process",
)

# Remove the internal metaclass from the module namespace; not part of the public API.
del SwitchType
