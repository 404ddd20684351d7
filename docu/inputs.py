"""
Input classification: split residual arguments into binaries and comment files.

- Binaries are arguments ending in .dll or .exe, comment files in .xml
  (case-insensitive). Each one is expanded with docu.files.expand.
- When no comment file is named, the companion of every binary (same path,
  .xml extension) is expanded and kept if it exists on disk. An empty result
  is left for the validator to report.
"""
import logging
import os
from collections import namedtuple

from .files import expand

logger = logging.getLogger(__name__)

BINARY_EXTENSIONS = (".dll", ".exe")
COMMENT_EXTENSION = ".xml"

Inputs = namedtuple("Inputs", ("binaries", "comment_files"))


def _suffix(path):
    # the last dot of the file name starts the extension, a leading one included (".dll")
    name = os.path.basename(path)
    index = name.rfind(".")
    return "" if index < 0 else name[index:]


def extension(path, /):
    return _suffix(path).casefold()


def is_binary(argument, /):
    return extension(argument) in BINARY_EXTENSIONS


def is_comment_file(argument, /):
    return extension(argument) == COMMENT_EXTENSION


def companion(binary, /):
    """
    the comment file expected next to a binary: "lib/foo.dll" → "lib/foo.xml".
    """
    return binary[:len(binary) - len(_suffix(binary))] + COMMENT_EXTENSION


def binaries(arguments, /):
    """
    expansions of every binary argument, in argument then expansion order.
    """
    return tuple(path for argument in arguments if is_binary(argument) for path in expand(argument))


def comment_files(arguments, binaries, /):
    """
    expansions of every comment-file argument, or the existing companions of
    `binaries` when none is named.
    """
    found = [path for argument in arguments if is_comment_file(argument) for path in expand(argument)]

    if not found:
        for binary in binaries:
            for path in expand(companion(binary)):
                if os.path.isfile(path):
                    found.append(path)
        logger.debug("inferred %d companion comment file(s) from %d binaries", len(found), len(binaries))

    return tuple(found)


def classify(arguments, /):
    """
    Inputs(binaries, comment_files) for the residual arguments.
    """
    modules = binaries(arguments)
    inputs = Inputs(modules, comment_files(arguments, modules))
    logger.debug("classified %r into %r", arguments, inputs)
    return inputs


__all__ = (
    "BINARY_EXTENSIONS",
    "COMMENT_EXTENSION",
    "Inputs",
    "extension",
    "is_binary",
    "is_comment_file",
    "companion",
    "binaries",
    "comment_files",
    "classify",
)
