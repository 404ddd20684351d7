"""
Input validation: the last gate before the generation engine runs.

verify(arguments, inputs) checks, in order, and raises one fault at the first
violation:
1. every raw argument is a binary or a comment file (InvalidArgumentError);
2. at least one binary (NoBinariesSpecifiedError);
3. every binary exists (BinaryNotFoundError);
4. at least one comment file (NoCommentFilesFoundError);
5. every comment file exists (CommentFileNotFoundError).
"""
import logging
import os

from .faults import *
from .inputs import is_binary, is_comment_file

logger = logging.getLogger(__name__)


def verify(arguments, inputs, /):
    for argument in arguments:
        if is_binary(argument) or is_comment_file(argument):
            continue
        raise InvalidArgumentError(
            "argument %r is neither a binary (.dll, .exe) nor a comment file (.xml)" % argument,
            title="invalid argument",
            code=FaultCode.INVALID_ARGUMENT,
            argument=argument,
            hint="check the spelling or run 'docu --help' to see the accepted switches",
            docs=getdoc(FaultCode.INVALID_ARGUMENT),
        )

    _verify_binaries(inputs.binaries)
    _verify_comment_files(inputs.comment_files)
    logger.debug("verified %d binaries and %d comment files", len(inputs.binaries), len(inputs.comment_files))


def _verify_binaries(binaries):
    if not binaries:
        raise NoBinariesSpecifiedError(
            "no binaries specified",
            title="no binaries specified",
            code=FaultCode.NO_BINARIES_SPECIFIED,
            hint="name at least one .dll or .exe, wildcards are allowed (e.g. 'bin/*.dll')",
            docs=getdoc(FaultCode.NO_BINARIES_SPECIFIED),
        )

    for binary in binaries:
        if not os.path.isfile(binary):
            raise BinaryNotFoundError(
                "binary %r cannot be found" % binary,
                title="binary not found",
                code=FaultCode.BINARY_NOT_FOUND,
                path=binary,
                hint="check the path is relative to %r" % os.getcwd(),
                docs=getdoc(FaultCode.BINARY_NOT_FOUND),
            )


def _verify_comment_files(comment_files):
    if not comment_files:
        raise NoCommentFilesFoundError(
            "no comment files found",
            title="no comment files found",
            code=FaultCode.NO_COMMENT_FILES_FOUND,
            hint="name the .xml files explicitly or place them next to their binaries",
            docs=getdoc(FaultCode.NO_COMMENT_FILES_FOUND),
        )

    for comment_file in comment_files:
        if not os.path.isfile(comment_file):
            raise CommentFileNotFoundError(
                "comment file %r cannot be found" % comment_file,
                title="comment file not found",
                code=FaultCode.COMMENT_FILE_NOT_FOUND,
                path=comment_file,
                hint="check the path is relative to %r" % os.getcwd(),
                docs=getdoc(FaultCode.COMMENT_FILE_NOT_FOUND),
            )


__all__ = (
    "verify",
)
