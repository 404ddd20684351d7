"""
Docu faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  of the front end. Codes are grouped by domain so logs and searches stay predictable.
- DocuException / DocuWarning: base types that carry a message + read-only options
  and know how to render themselves (rich) in a short, lowercased, actionable way.
- getdoc(): optional description lookup for a code from the host application.

UX goals
- Every fault names the offending argument or path.
- Short titles, one-sentence bodies, a single clear hint.
- Lowercased tone with readable styling (configurable via __styles__ in __main__).

Integration
- The validator and the switch processor raise faults; the application catches
  them and hands each one to its screen exactly once (or re-raises when not in
  shell mode). Engine events are wrapped in warnings and written the same way.
"""
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, stylist


class FaultCode(IntEnum):
    """
    canonical fault codes used across the front end (stable identifiers).

    grouping (by high-level domain)
    - switches (111xx)
      • MISSING_SWITCH_VALUE
    - arguments (112xx)
      • INVALID_ARGUMENT
    - completeness (113xx)
      • NO_BINARIES_SPECIFIED, NO_COMMENT_FILES_FOUND
    - resolution (114xx)
      • BINARY_NOT_FOUND, COMMENT_FILE_NOT_FOUND
    - engine (115xx)
      • GENERATOR_NOT_LOADED
    - relayed engine events (121xx)
      • GENERATOR_WARNING, BAD_FILE
    """
    # --- switch errors (111xx) ---
    MISSING_SWITCH_VALUE        = 11101

    # --- argument validity errors (112xx) ---
    INVALID_ARGUMENT            = 11201

    # --- completeness errors (113xx) ---
    NO_BINARIES_SPECIFIED       = 11301
    NO_COMMENT_FILES_FOUND      = 11302

    # --- resolution errors (114xx) ---
    BINARY_NOT_FOUND            = 11401
    COMMENT_FILE_NOT_FOUND      = 11402

    # --- engine errors (115xx) ---
    GENERATOR_NOT_LOADED        = 11501

    # --- warnings (12xxx) ---
    GENERATOR_WARNING           = 12101
    BAD_FILE                    = 12102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class _Fault:
    """
    rendering and option plumbing shared by exceptions and warnings.

    options (all optional, merged with copy.replace by the screen)
    - title, code, hint, docs: copy shown in the header, hint and footer.
    - prog: program name for the header (__main__.__prog__ wins).
    - fancy, colorful: rendering flags.
    - argument / path / switch: the offending input, kept for callers.
    """
    __palette__ = {}

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message
        self.options = MappingProxyType(options)

    def __rich__(self):
        styler, text = stylist(self.options, self.__palette__)

        prog = text(getattr(__import__("__main__"), "__prog__", self.options.get("prog", "docu")), styler("prog-name"))
        code = self.options.get("code")

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if code is not None else "?", styler("code")),
            " | ",
            text(self.options.get("title", type(self).__name__).title(), styler("title")),
            " ]"
        )
        message = text(self.message, styler("message"))
        renders = [message]

        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))
        if docs := self.options.get("docs"):
            renders.append(text(docs, styler("docs")))

        if self.options.get("fancy", False):
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})

    def __str__(self):
        return str(self.message)


class DocuException(_Fault, Exception):
    """
    base error of the front end; one instance equals one user-facing notification.
    """
    __palette__ = {
        "prog-name": "bold #E6E6F0",  # near-white program name
        "code": "bold #00E5FF",  # neon cyan fault code
        "title": "bold #FF4DA6",  # friendly pinky title
        "message": "#C8C8D0",  # soft light gray message
        "hint-arrow": "#9CE19C dim",  # gentle green arrow
        "hint": "italic #9CE19C",  # gentle green hint text
        "docs": "underline #00E5FF dim",
    }

    def __init__(self, message=Unset, /, **options):
        _Fault.__init__(self, message, **options)
        Exception.__init__(self, message)


class MissingSwitchValueError(DocuException): ...
class InvalidArgumentError(DocuException): ...
class NoBinariesSpecifiedError(DocuException): ...
class BinaryNotFoundError(DocuException): ...
class NoCommentFilesFoundError(DocuException): ...
class CommentFileNotFoundError(DocuException): ...
class GeneratorNotLoadedError(DocuException): ...

class DocuWarning(_Fault, Warning):
    """
    base warning; relayed engine events are wrapped in one of its subclasses.
    """
    __palette__ = {
        "prog-name": "bold #E6E6F0",
        "code": "bold #FFB400",  # amber fault code for warnings
        "title": "bold #FFC2E0",  # softer pinky title for warnings
        "message": "#D6D6DE",
        "hint-arrow": "#B8EFAF dim",
        "hint": "italic #B8EFAF",
        "docs": "underline #FFB400 dim",
    }

    def __init__(self, message=Unset, /, **options):
        _Fault.__init__(self, message, **options)
        Warning.__init__(self, message)


class GeneratorWarning(DocuWarning): ...
class BadFileWarning(DocuWarning): ...


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    lookup
    - the host application may expose a __docs__ mapping in __main__ where keys
      are FaultCode instances and values are short documentation strings.
    - when not found, returns None (renderers treat docs as optional).
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    try:
        return getattr(__import__("__main__"), "__docs__", {})[code]
    except KeyError:
        return None


__all__ = (
    "FaultCode",
    "DocuException",
    "MissingSwitchValueError",
    "InvalidArgumentError",
    "NoBinariesSpecifiedError",
    "BinaryNotFoundError",
    "NoCommentFilesFoundError",
    "CommentFileNotFoundError",
    "GeneratorNotLoadedError",
    "DocuWarning",
    "GeneratorWarning",
    "BadFileWarning",
    "getdoc",
)
