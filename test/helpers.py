"""
Shared test doubles and fixtures.

- RecordingScreen: collects every written message in order.
- RecordingGenerator: in-memory engine that records its configuration and
  can publish warnings/bad files while generating.
- WorkspaceTestCase: runs each test inside a fresh temporary working directory.
"""
import contextlib
import os
import tempfile
from unittest import TestCase

from docu.generators import Generator


class RecordingScreen:
    def __init__(self):
        self.messages = []

    def write(self, message, /):
        self.messages.append(message)

    def kinds(self):
        return [type(message) for message in self.messages]


class RecordingGenerator(Generator):
    def __init__(self, *, warnings=(), bad_files=()):
        super().__init__()
        self.output_path = None
        self.template_path = None
        self.binaries = None
        self.comment_files = None
        self.generated = 0
        self._pending_warnings = tuple(warnings)
        self._pending_bad_files = tuple(bad_files)

    def set_output_path(self, path, /):
        self.output_path = path

    def set_template_path(self, path, /):
        self.template_path = path

    def set_binaries(self, binaries, /):
        self.binaries = tuple(binaries)

    def set_comment_files(self, comment_files, /):
        self.comment_files = tuple(comment_files)

    def generate(self):
        self.generated += 1
        for message in self._pending_warnings:
            self.warn(message)
        for path in self._pending_bad_files:
            self.reject(path)


class WorkspaceTestCase(TestCase):
    """
    TestCase whose working directory is an empty temporary directory.
    """

    def setUp(self) -> None:
        self.workspace = self.enterContext(tempfile.TemporaryDirectory())
        self.enterContext(contextlib.chdir(self.workspace))

    def touch(self, *paths):
        for path in paths:
            if directory := os.path.dirname(path):
                os.makedirs(directory, exist_ok=True)
            with open(path, "w"):
                pass
