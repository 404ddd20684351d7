"""
Docu application: the run orchestrator of the command-line front end.

Flow of one run
    NOT_STARTED ─(no arguments)──────────────────────────────→ HALTED (help shown)
        │
        ├─ process switches ─(a handler said stop)───────────→ HALTED
        ↓
    SWITCHES_PROCESSED ── splash
        ↓ classify residual arguments
    CLASSIFIED
        ↓ verify ─(first violation, one notification)────────→ FAILED
    VALIDATED
        ↓ start, engine.generate()
    GENERATING
        ↓ done
    DONE

Built-in switches
- --help: show help, stop the run.
- --output PATH / --templates PATH: forwarded to the engine with trailing
  path separators stripped.

Runtime flags
- shell: write faults to the screen and return FAILED (True), or raise them
  and emit relayed engine warnings through the warnings module (False).
- fancy / colorful / prog: forwarded to the default screen.

Engine warnings and bad files are relayed to the screen only while run() is
executing.
"""
import logging
import warnings
from enum import Enum, auto

from . import __version__
from .faults import *
from .inputs import classify
from .messages import *
from .switches import *
from .utils import Unset, coalesce
from .validation import verify

logger = logging.getLogger(__name__)


class State(Enum):
    NOT_STARTED = auto()
    SWITCHES_PROCESSED = auto()
    CLASSIFIED = auto()
    VALIDATED = auto()
    GENERATING = auto()
    DONE = auto()
    HALTED = auto()
    FAILED = auto()


class Outcome(Enum):
    HALTED = auto()
    FAILED = auto()
    PROCEEDED = auto()


def _trim(path):
    # "bin\\" → "bin", but a bare root separator is kept
    return path.rstrip("\\/") or path


class Application:
    """
    one front end bound to one documentation engine.

    parameters
    - generator: docu.generators.Generator (or anything honouring its contract).
    - screen: notification sink with write(message); defaults to a rich Screen.
    - shell, fancy, colorful, prog: see module docstring.
    """

    def __init__(self, generator, /, screen=Unset, *, shell=True, fancy=False, colorful=True, prog="docu"):
        self.generator = generator
        self.screen = coalesce(screen) or Screen(fancy=fancy, colorful=colorful, prog=prog)
        self.shell = bool(shell)
        self.state = State.NOT_STARTED
        self.switches = self._define_switches()

    def _define_switches(self):
        @switch("--help", descr="show this help and exit")
        def help():
            self.screen.write(HelpMessage(self.switches))
            return False

        @parameter("--output", metavar="PATH", descr="directory the documentation is written to")
        def output(path):
            self.generator.set_output_path(_trim(path))
            return True

        @parameter("--templates", metavar="PATH", descr="directory holding the templates to render with")
        def templates(path):
            self.generator.set_template_path(_trim(path))
            return True

        return (help, output, templates)

    def _transition(self, state):
        logger.debug("state %s → %s", self.state.name, state.name)
        self.state = state

    def _warning(self, message):
        self._relay(GeneratorWarning(
            message,
            title="warning",
            code=FaultCode.GENERATOR_WARNING,
            docs=getdoc(FaultCode.GENERATOR_WARNING),
        ))

    def _bad_file(self, path):
        self._relay(BadFileWarning(
            "file %r could not be read and was skipped" % path,
            title="bad file",
            code=FaultCode.BAD_FILE,
            path=path,
            hint="check the file is a valid binary or comment file",
            docs=getdoc(FaultCode.BAD_FILE),
        ))

    def _relay(self, warning):
        if not self.shell:
            warnings.warn(warning, stacklevel=3)
            return
        self.screen.write(warning)

    def _fail(self, fault):
        self._transition(State.FAILED)
        if not self.shell:
            raise fault
        self.screen.write(fault)
        return Outcome.FAILED

    def run(self, arguments, /):
        """
        run the pipeline once over the raw process arguments.

        returns
        - Outcome.HALTED: no arguments or a switch asked to stop.
        - Outcome.FAILED: a fault was written (or raised when shell is False).
        - Outcome.PROCEEDED: the engine generated the documentation.
        """
        arguments = tuple(arguments)
        self.state = State.NOT_STARTED

        if not arguments:
            self.screen.write(HelpMessage(self.switches))
            self._transition(State.HALTED)
            return Outcome.HALTED

        with (
            self.generator.warnings.subscribe(self._warning),
            self.generator.bad_files.subscribe(self._bad_file),
        ):
            try:
                proceed, arguments = process(arguments, self.switches)
                if not proceed:
                    self._transition(State.HALTED)
                    return Outcome.HALTED
                self._transition(State.SWITCHES_PROCESSED)
                self.screen.write(SplashMessage(__version__))

                inputs = classify(arguments)
                self._transition(State.CLASSIFIED)

                verify(arguments, inputs)
                self._transition(State.VALIDATED)
            except DocuException as fault:
                return self._fail(fault)

            self._transition(State.GENERATING)
            self.screen.write(StartMessage())

            self.generator.set_binaries(inputs.binaries)
            self.generator.set_comment_files(inputs.comment_files)
            self.generator.generate()

            self._transition(State.DONE)
            self.screen.write(DoneMessage())

        return Outcome.PROCEEDED


__all__ = (
    "State",
    "Outcome",
    "Application",
)
