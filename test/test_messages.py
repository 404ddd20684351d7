"""
Screen, message and fault rendering tests.

Scope
- Help lists every visible switch with its metavar and description.
- Faults render code, message and hint, and go to the stderr console.
- copy.replace merges runtime options without touching the original.
"""
import copy
import io
import unittest
from unittest import TestCase

from rich.console import Console

from docu.faults import BinaryNotFoundError, FaultCode, GeneratorWarning
from docu.messages import DoneMessage, HelpMessage, Message, Screen, SplashMessage, StartMessage
from docu.switches import ParameterSwitch, Switch


class TestScreen(TestCase):

    def setUp(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.screen = Screen(
            colorful=False,
            stdout=Console(file=self.out, width=120),
            stderr=Console(file=self.err, width=120),
        )

    def testHelpListsSwitches(self):
        switches = (
            Switch("--help", descr="show this help and exit"),
            ParameterSwitch("--output", metavar="PATH", descr="output directory"),
            ParameterSwitch("--secret", hidden=True),
        )
        self.screen.write(HelpMessage(switches))
        output = self.out.getvalue()
        self.assertIn("usage: docu", output)
        self.assertIn("[--output PATH]", output)
        self.assertIn("show this help and exit", output)
        self.assertNotIn("--secret", output)
        self.assertEqual(self.err.getvalue(), "")

    def testFancyHelpIsPanelled(self):
        self.screen.fancy = True
        self.screen.write(HelpMessage((Switch("--help"),)))
        self.assertIn("DOCU HELP", self.out.getvalue())

    def testStatusMessages(self):
        self.screen.write(SplashMessage("1.2.3"))
        self.screen.write(StartMessage())
        self.screen.write(DoneMessage())
        output = self.out.getvalue()
        self.assertIn("v1.2.3", output)
        self.assertIn("generating documentation", output)
        self.assertIn("documentation generated", output)

    def testFaultGoesToStderr(self):
        self.screen.write(BinaryNotFoundError(
            "binary 'foo.dll' cannot be found",
            title="binary not found",
            code=FaultCode.BINARY_NOT_FOUND,
            path="foo.dll",
            hint="check the path",
        ))
        output = self.err.getvalue()
        self.assertIn("11401", output)
        self.assertIn("Binary Not Found", output)
        self.assertIn("'foo.dll'", output)
        self.assertIn("check the path", output)
        self.assertEqual(self.out.getvalue(), "")

    def testWarningGoesToStderr(self):
        self.screen.write(GeneratorWarning("careful", title="warning", code=FaultCode.GENERATOR_WARNING))
        self.assertIn("careful", self.err.getvalue())

    def testRejectsNonMessages(self):
        with self.assertRaises(TypeError):
            self.screen.write("plain text")

    def testBaseMessageIsAbstract(self):
        with self.assertRaises(TypeError):
            Message()


class TestReplace(TestCase):

    def testFaultReplaceMergesOptions(self):
        fault = BinaryNotFoundError("missing", path="foo.dll")
        clone = copy.replace(fault, fancy=True)
        self.assertIsInstance(clone, BinaryNotFoundError)
        self.assertEqual(clone.options["path"], "foo.dll")
        self.assertTrue(clone.options["fancy"])
        self.assertNotIn("fancy", fault.options)
        self.assertEqual(str(clone), "missing")

    def testMessageReplaceKeepsPayload(self):
        message = HelpMessage((Switch("--help"),))
        clone = copy.replace(message, colorful=False)
        self.assertEqual(clone.switches, message.switches)
        self.assertFalse(clone.options["colorful"])
        self.assertNotIn("colorful", message.options)


if __name__ == "__main__":
    unittest.main()
