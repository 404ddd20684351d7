"""
Documentation generation engine contract.

What this module provides
- Channel: a one-way event channel. Listeners are scoped with
  `with channel.subscribe(callback): ...` and receive every published value
  until the block exits.
- Generator: abstract engine accepting binaries, comment files, an output path
  and a template path, and a blocking generate() call. It exposes two channels,
  `warnings` (messages) and `bad_files` (paths), which engines publish to.
- DryRunGenerator: built-in engine that only logs what it was given.
- load(reference): resolve "package.module:attribute" into an engine instance.

The front end never looks inside an engine: it configures it, calls generate()
once and relays the channels to its screen while the run lasts.
"""
import importlib
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class Channel:
    """
    ordered listener list for one kind of engine event.
    """

    def __init__(self, name, /):
        self.name = name
        self._listeners = []

    @contextmanager
    def subscribe(self, callback, /):
        if not callable(callback):
            raise TypeError("subscribe() argument must be callable")
        self._listeners.append(callback)
        try:
            yield callback
        finally:
            self._listeners.remove(callback)

    def publish(self, value, /):
        for listener in tuple(self._listeners):
            listener(value)

    def __len__(self):
        return len(self._listeners)

    def __repr__(self):
        return "channel(name=%r, listeners=%d)" % (self.name, len(self._listeners))


class Generator(ABC):
    """
    abstract documentation generation engine.

    engines call self.warn(message) / self.reject(path) while generating;
    the front end listens on self.warnings / self.bad_files.
    """

    def __init__(self):
        self.warnings = Channel("warning")
        self.bad_files = Channel("bad-file")

    @abstractmethod
    def set_output_path(self, path, /): ...

    @abstractmethod
    def set_template_path(self, path, /): ...

    @abstractmethod
    def set_binaries(self, binaries, /): ...

    @abstractmethod
    def set_comment_files(self, comment_files, /): ...

    @abstractmethod
    def generate(self): ...

    def warn(self, message, /):
        self.warnings.publish(message)

    def reject(self, path, /):
        self.bad_files.publish(path)


class DryRunGenerator(Generator):
    """
    engine used when none is configured: records its inputs, logs them and
    warns that nothing was generated.
    """

    def __init__(self):
        super().__init__()
        self.output_path = "output"
        self.template_path = "templates"
        self.binaries = ()
        self.comment_files = ()

    def set_output_path(self, path, /):
        self.output_path = path

    def set_template_path(self, path, /):
        self.template_path = path

    def set_binaries(self, binaries, /):
        self.binaries = tuple(binaries)

    def set_comment_files(self, comment_files, /):
        self.comment_files = tuple(comment_files)

    def generate(self):
        logger.info(
            "dry run: %d binaries, %d comment files, templates %r, output %r",
            len(self.binaries), len(self.comment_files), self.template_path, self.output_path
        )
        self.warn("no documentation engine configured (set DOCU_GENERATOR), nothing was written to %r" % self.output_path)


def load(reference, /):
    """
    resolve an engine reference.

    parameters
    - reference: "package.module:attribute" where attribute is a Generator
      instance, a Generator subclass, or a factory returning one.

    raises
    - ValueError: malformed reference.
    - ImportError / AttributeError: the module or attribute does not exist.
    - TypeError: the attribute does not produce a Generator.
    """
    if not isinstance(reference, str):
        raise TypeError("load() argument must be a string")
    module, separator, attribute = reference.strip().partition(":")
    if not module or not separator or not attribute:
        raise ValueError("load() argument must look like 'package.module:attribute'")

    object = importlib.import_module(module)
    for name in attribute.split("."):
        object = getattr(object, name)

    if not isinstance(object, Generator) and callable(object):
        object = object()
    if not isinstance(object, Generator):
        raise TypeError("%r does not resolve to a documentation generator" % reference)

    logger.debug("loaded generator %r from %r", type(object).__name__, reference)
    return object


__all__ = (
    "Channel",
    "Generator",
    "DryRunGenerator",
    "load",
)
