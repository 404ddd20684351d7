"""
Input classifier tests.

Scope
- Extension recognition (case-insensitive).
- Binary and comment-file extraction with expansion, ordering and duplicates.
- Companion inference when no comment file is named.
"""
import os
import unittest
from unittest import TestCase

from docu.inputs import Inputs, binaries, classify, comment_files, companion, is_binary, is_comment_file

from helpers import WorkspaceTestCase


class TestRecognition(TestCase):

    def testBinaryExtensionsIgnoreCase(self):
        for argument in ("foo.dll", "FOO.DLL", "tool.exe", "Tool.Exe"):
            with self.subTest(argument=argument):
                self.assertTrue(is_binary(argument))

    def testNonBinaries(self):
        for argument in ("foo.xml", "foo.dll.bak", "dll", "--output", "foo"):
            with self.subTest(argument=argument):
                self.assertFalse(is_binary(argument))

    def testCommentFileExtensionIgnoresCase(self):
        self.assertTrue(is_comment_file("foo.xml"))
        self.assertTrue(is_comment_file("FOO.XML"))
        self.assertFalse(is_comment_file("foo.xsl"))

    def testCompanionReplacesExtension(self):
        self.assertEqual(companion(os.path.join("lib", "foo.dll")), os.path.join("lib", "foo.xml"))
        self.assertEqual(companion("Tool.EXE"), "Tool.xml")

    def testDotOnlyNamesHaveAnExtension(self):
        self.assertTrue(is_binary(".dll"))
        self.assertTrue(is_binary(os.path.join("lib", ".EXE")))
        self.assertTrue(is_comment_file(".xml"))
        self.assertEqual(companion(".dll"), ".xml")

    def testDotsInDirectoriesAreIgnored(self):
        self.assertFalse(is_binary(os.path.join("lib.dll", "readme")))
        self.assertEqual(companion(os.path.join("v1.2", "foo")), os.path.join("v1.2", "foo.xml"))


class TestClassify(WorkspaceTestCase):

    def testBinariesKeepArgumentOrderAndDuplicates(self):
        self.assertEqual(binaries(["b.dll", "a.xml", "a.exe", "b.dll"]), ("b.dll", "a.exe", "b.dll"))

    def testBinaryWildcardsAreExpanded(self):
        self.touch(os.path.join("bin", "a.dll"), os.path.join("bin", "b.dll"))
        self.assertEqual(
            sorted(binaries([os.path.join("bin", "*.dll")])),
            [os.path.join("bin", "a.dll"), os.path.join("bin", "b.dll")],
        )

    def testExplicitCommentFilesAreNotCheckedHere(self):
        self.assertEqual(comment_files(["missing.xml"], ("foo.dll",)), ("missing.xml",))

    def testFallbackFindsCompanion(self):
        self.touch("foo.dll", "foo.xml")
        self.assertEqual(classify(["foo.dll"]), Inputs(("foo.dll",), ("foo.xml",)))

    def testFallbackWithoutCompanionIsEmpty(self):
        self.touch("foo.dll")
        self.assertEqual(classify(["foo.dll"]), Inputs(("foo.dll",), ()))

    def testFallbackOnlyKeepsExistingCompanions(self):
        self.touch("a.dll", "a.xml", "b.dll")
        self.assertEqual(classify(["a.dll", "b.dll"]).comment_files, ("a.xml",))

    def testExplicitCommentFileDisablesFallback(self):
        self.touch("foo.dll", "foo.xml", "other.xml")
        self.assertEqual(classify(["foo.dll", "other.xml"]).comment_files, ("other.xml",))

    def testUnrecognizedArgumentsAreIgnored(self):
        self.assertEqual(classify(["readme.txt"]), Inputs((), ()))


if __name__ == "__main__":
    unittest.main()
