"""
Docu screen messages and the screen that prints them.

Messages
- HelpMessage(switches): usage line, switch listing, notes on wildcards and
  companion comment files.
- SplashMessage(version): one-line banner.
- StartMessage / DoneMessage: bracket the engine call.
Faults and warnings from docu.faults render through the same screen.

Every message is a rich renderable (__rich__) carrying read-only options;
the screen merges its runtime flags (fancy, colorful, prog) into each message
with copy.replace before printing.

Palette keys (override any of them with __styles__ in __main__)
- usage-label, program-name, usage-section, description-section
- group-label, switch-name, metavar, argument-description
- notes-label, notes-dot, note
- splash-name, splash-version, splash-tagline, status, status-done
- panel-title
"""
import copy
from abc import ABC, abstractmethod
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .faults import DocuException, DocuWarning
from .utils import stylist

PALETTE = {
    # === Head sections ===
    "usage-label": "bold #00E6FF",  # CYAN → signature info color
    "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
    "usage-section": "bold #36C5F0",  # SKY-BLUE → softer than cyan
    "description-section": "italic #A3A3A3",  # Neutral gray

    # === Switches ===
    "group-label": "bold #FFFFFF",
    "switch-name": "bold #22C55E",
    "metavar": "bold #FFD600",
    "argument-description": "#9CA3AF",

    # === Notes ===
    "notes-label": "bold #00E6FF",
    "notes-dot": "#00E6FF dim",
    "note": "#D1D5DB",

    # === Splash / status ===
    "splash-name": "bold #FF4D94",
    "splash-version": "#9CA3AF",
    "splash-tagline": "italic #A3A3A3",
    "status": "#36C5F0",
    "status-done": "bold #22C55E",

    # === Fancy panel ===
    "panel-title": "bold #FF4D94",
}


class Message(ABC):
    """
    base screen message: read-only options plus copy.replace support.
    """

    def __init__(self, /, **options):
        self.options = MappingProxyType(options)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        clone = copy.copy(self)
        clone.options = MappingProxyType({**self.options, **overrides})
        return clone

    @abstractmethod
    def __rich__(self): ...

    @property
    def prog(self):
        return getattr(__import__("__main__"), "__prog__", self.options.get("prog", "docu"))


class HelpMessage(Message):
    """
    usage and switch reference, built from the registered switches.
    """

    def __init__(self, switches, /, **options):
        super().__init__(**options)
        self.switches = tuple(switches)

    def __rich__(self):
        styler, text = stylist(self.options, PALETTE)

        usage = Text()
        usage.append(text("usage", styler("usage-label"))).append(":")
        usage.append(" ")
        usage.append(text(self.prog, styler("program-name")))
        for switch in filter(lambda x: not x.hidden, self.switches):
            usage.append(" [").append(text(switch.names[0], styler("switch-name")))
            if switch.arity:
                usage.append(" ").append(text(switch.metavar, styler("metavar")))
            usage.append("]")
        usage.append(" ").append(text("BINARY... [XML...]", styler("usage-section")))

        renders = [
            usage.append("\n"),
            text(
                "generate documentation for .dll/.exe binaries and their .xml comment files",
                styler("description-section")
            ).append("\n"),
        ]

        groups = {}
        for switch in filter(lambda x: not x.hidden, self.switches):
            groups.setdefault(switch.group, []).append(switch)

        padding = 2
        indent = 24
        for group, switches in groups.items():
            section = Text()
            section.append(text(group, styler("group-label"))).append(":").append("\n")
            for switch in switches:
                line = Text(" " * padding)
                line.append(Text(" | ").join(text(name, styler("switch-name")) for name in switch.names))
                if switch.arity:
                    line.append(" ").append(text(switch.metavar, styler("metavar")))
                if switch.descr:
                    # hanging indent when the names column overflows
                    line.append("\n" + " " * indent if len(line) >= indent else " " * (indent - len(line)))
                    line.append(text(switch.descr, styler("argument-description")))
                section.append(line).append("\n")
            renders.append(section)

        dot = text(" • ", styler("notes-dot"))
        notes = Text()
        notes.append(text("notes", styler("notes-label"))).append(":").append("\n")
        for note in (
            "wildcards '*' and '?' are expanded in the file name, e.g. 'bin/*.dll'",
            "without any .xml argument, each binary's companion (same name, .xml) is used",
        ):
            notes.append(dot).append(text(note, styler("note"))).append("\n")
        notes.rstrip()
        renders.append(notes)

        renderable = Group(*renders)
        if self.options.get("fancy", False):
            return Panel(
                renderable,
                title=Text.assemble("[", " ", f"{self.prog} HELP".upper(), " ", "]", style=styler("panel-title")),
                title_align="left",
            )
        return renderable


class SplashMessage(Message):

    def __init__(self, version, /, **options):
        super().__init__(**options)
        self.version = version

    def __rich__(self):
        styler, text = stylist(self.options, PALETTE)
        return Text.assemble(
            text(self.prog, styler("splash-name")),
            " ",
            text("v" + self.version, styler("splash-version")),
            " — ",
            text("simple docs done simply", styler("splash-tagline")),
        )


class StartMessage(Message):

    def __rich__(self):
        styler, text = stylist(self.options, PALETTE)
        return text("generating documentation...", styler("status"))


class DoneMessage(Message):

    def __rich__(self):
        styler, text = stylist(self.options, PALETTE)
        return text("documentation generated", styler("status-done"))


class Screen:
    """
    fire-and-forget notification sink backed by two rich consoles.

    faults and warnings go to stderr, everything else to stdout.
    """

    def __init__(self, *, fancy=False, colorful=True, prog="docu", stdout=None, stderr=None):
        self.fancy = bool(fancy)
        self.colorful = bool(colorful)
        self.prog = prog
        self.stdout = stdout if stdout is not None else Console(no_color=not self.colorful)
        self.stderr = stderr if stderr is not None else Console(stderr=True, no_color=not self.colorful)

    def write(self, message, /):
        if not hasattr(message, "__rich__") or not hasattr(message, "__replace__"):
            raise TypeError("write() argument must have __rich__ and __replace__ methods")
        message = copy.replace(message, fancy=self.fancy, colorful=self.colorful, prog=self.prog)
        console = self.stderr if isinstance(message, DocuException | DocuWarning) else self.stdout
        console.print(message)


__all__ = (
    "Message",
    "HelpMessage",
    "SplashMessage",
    "StartMessage",
    "DoneMessage",
    "Screen",
)
