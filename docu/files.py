"""
File pattern expansion.

expand(path) turns one path token into the concrete paths it names:
- no wildcard ('*' or '?') → the token itself, unchanged.
- wildcard → the regular files of one directory whose names match the
  filename component, non-recursive, in filesystem enumeration order.

Matches under the current working directory come back relative to it.
Nothing is cached: every call enumerates the directory again.
"""
import functools
import logging
import os
import re

logger = logging.getLogger(__name__)

WILDCARDS = frozenset("*?")
SEPARATORS = tuple(filter(None, (os.sep, os.altsep)))


def haswildcard(path, /):
    """
    True when the token contains '*' or '?'.
    """
    return not WILDCARDS.isdisjoint(path)


@functools.cache
def _compile_pattern(pattern):
    """
    translate a filename pattern into a regex (matched with fullmatch).
      *  → zero or more characters
      ?  → exactly one character
    every other character matches itself; case follows os.path.normcase.
    """
    parts = []
    for char in os.path.normcase(pattern):
        if char == '*':
            parts.append(r'.*')
        elif char == '?':
            parts.append(r'.')
        else:
            parts.append(re.escape(char))
    return re.compile(''.join(parts), re.DOTALL)


def _split(path):
    """
    (directory, pattern) for a wildcard token; directory is None when the
    token carries no separator.
    """
    index = max(path.rfind(separator) for separator in SEPARATORS)
    if index < 0:
        return None, path
    # keep the root separator ("/*.dll" searches "/")
    return path[:index] or path[:index + 1], path[index + 1:]


def expand(path, /):
    """
    yield the concrete paths named by one token.

    parameters
    - path: str, possibly containing '*' or '?' in its filename component.

    yields
    - the token itself when it has no wildcard.
    - otherwise each matching regular file, with the "<cwd><sep>" prefix
      stripped when present; a missing or unreadable directory yields nothing.
    """
    if not haswildcard(path):
        yield path
        return

    cwd = os.getcwd()
    directory, filename = _split(path)
    pattern = _compile_pattern(filename)

    if directory is None:
        directory = cwd

    try:
        entries = os.scandir(directory)
    except OSError as error:
        logger.debug("cannot expand %r: %r is not readable (%s)", path, directory, error)
        return

    prefix = cwd.rstrip(os.sep) + os.sep
    with entries:
        for entry in entries:
            if not entry.is_file() or not pattern.fullmatch(os.path.normcase(entry.name)):
                continue
            match = os.path.join(directory, entry.name)
            if match.startswith(prefix):
                match = match[len(prefix):]
            logger.debug("expanded %r to %r", path, match)
            yield match


__all__ = (
    "WILDCARDS",
    "haswildcard",
    "expand",
)
