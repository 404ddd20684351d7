"""
Console entry point: `docu [--output PATH] [--templates PATH] BINARY... [XML...]`.

Environment
- DOCU_GENERATOR: engine reference "package.module:attribute" (see
  docu.generators.load); the dry-run engine is used when unset.
- DOCU_LOG_LEVEL: logging level name for the stderr log handler (WARNING);
  unknown names fall back to WARNING.
- NO_COLOR: disables colors (honoured by rich).
"""
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler

from .application import Application, Outcome
from .faults import FaultCode, GeneratorNotLoadedError, getdoc
from .generators import DryRunGenerator, load
from .messages import Screen


def setup_logging(level="WARNING", /):
    """
    route every docu logger through a rich handler on stderr.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("docu")
    logger.handlers[:] = [handler]
    logger.propagate = False

    if (name := level.strip().upper()) in logging.getLevelNamesMapping():
        logger.setLevel(name)
    else:
        logger.setLevel(logging.WARNING)
        logger.warning("unknown log level %r, using WARNING", level)


def _load_generator(reference, screen, /):
    try:
        return load(reference)
    except (ImportError, AttributeError, TypeError, ValueError) as error:
        screen.write(GeneratorNotLoadedError(
            "cannot load generator %r: %s" % (reference, error),
            title="generator not loaded",
            code=FaultCode.GENERATOR_NOT_LOADED,
            reference=reference,
            hint="set DOCU_GENERATOR to 'package.module:attribute' naming a documentation generator",
            docs=getdoc(FaultCode.GENERATOR_NOT_LOADED),
        ))
        return None


def main(argv=None, /):
    setup_logging(os.environ.get("DOCU_LOG_LEVEL", "WARNING"))
    screen = Screen()

    if reference := os.environ.get("DOCU_GENERATOR"):
        if (generator := _load_generator(reference, screen)) is None:
            return 1
    else:
        generator = DryRunGenerator()

    outcome = Application(generator, screen).run(sys.argv[1:] if argv is None else argv)
    return 1 if outcome is Outcome.FAILED else 0


if __name__ == "__main__":
    sys.exit(main())
