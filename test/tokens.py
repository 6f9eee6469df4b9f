"""
Tokenizer tests (argosy.tokens).

Scope
- Literal classification of dash tokens (boolean, number, string, malformed).
- Option keys: dash stripping, "=" cut, kebab → camel, alias resolution.
- Command names and aliases, positional arguments, the kind-trace.
"""
import unittest
from unittest import TestCase

from argosy import NO_COMMAND, Boolean, Command, Number, Option, String
from argosy.tokens import Kind, Tokenizer, parse_key, parse_literal

ROOT = Command(NO_COMMAND, options=(
    Option("verbose", Boolean(optional=True), aliases=("v",)),
))
TEST = Command("test", aliases=("run-test", "test-command"), options=(
    Option("age", Number(), aliases=("yourAge",)),
    Option("name", String(optional=True), aliases=("yourName",)),
))
INSTALL = Command("install-apk", options=(
    Option("device", String(optional=True)),
    Option("path", String(optional=True)),
    Option("debug", Boolean(optional=True), aliases=("d",)),
    Option("release", Boolean(optional=True), aliases=("r",)),
))


class LiteralTest(TestCase):
    def testBareFlags(self):
        self.assertEqual(parse_literal("--debug"), (True, None))
        self.assertEqual(parse_literal("-d"), (True, None))

    def testFalse(self):
        self.assertEqual(parse_literal("--debug=false"), (False, "false"))

    def testIntegers(self):
        value, inline = parse_literal("--count=42")
        self.assertEqual(value, 42)
        self.assertIsInstance(value, int)
        self.assertEqual(inline, "42")

    def testFloats(self):
        self.assertEqual(parse_literal("--ratio=.5"), (0.5, ".5"))
        self.assertEqual(parse_literal("--ratio=-1.25"), (-1.25, "-1.25"))

    def testStrings(self):
        self.assertEqual(parse_literal("--name=abc"), ("abc", "abc"))
        self.assertEqual(parse_literal("--name=TRUE"), ("TRUE", "TRUE"))

    def testOverlongDigitsStayText(self):
        digits = "1" * 5000
        self.assertEqual(parse_literal("--token=" + digits), (digits, digits))

    def testValueKeepsLaterEquals(self):
        self.assertEqual(parse_literal("--filter=a=b"), ("a=b", "a=b"))

    def testMalformed(self):
        for text in ("-ab", "--name=", "-", "--", "--=x"):
            with self.subTest(text=text):
                self.assertIsNone(parse_literal(text))


class KeyTest(TestCase):
    def testLong(self):
        self.assertEqual(parse_key("--root-path=./app"), "rootPath")
        self.assertEqual(parse_key("--dry-run"), "dryRun")

    def testShort(self):
        self.assertEqual(parse_key("-v"), "v")

    def testCamelKeptAsWritten(self):
        self.assertEqual(parse_key("--yourAge=3"), "yourAge")


class TokenizerTest(TestCase):
    def setUp(self):
        self.tokenizer = Tokenizer((ROOT, TEST, INSTALL))

    def testEmpty(self):
        scan = self.tokenizer.tokenize([])
        self.assertIsNone(scan.command)
        self.assertEqual(scan.args, ())
        self.assertEqual(dict(scan.options), {})
        self.assertEqual(scan.kinds, ())

    def testCommandOptionArgument(self):
        scan = self.tokenizer.tokenize(["test", "--your-age=30", "file.txt"])
        self.assertEqual(scan.command, "test")
        self.assertEqual(dict(scan.options), {"age": 30})
        self.assertEqual(scan.args, ("file.txt",))
        self.assertEqual(scan.kinds, (Kind.COMMAND, Kind.OPTION, Kind.ARG))

    def testCommandAlias(self):
        scan = self.tokenizer.tokenize(["run-test"])
        self.assertEqual(scan.command, "test")
        self.assertEqual(scan.tokens[0].key, "test")
        self.assertEqual(scan.tokens[0].text, "run-test")

    def testShortAlias(self):
        scan = self.tokenizer.tokenize(["install-apk", "-d"])
        self.assertEqual(dict(scan.options), {"debug": True})

    def testScopedBeforeCommand(self):
        scan = self.tokenizer.tokenize(["--your-age=3", "test"])
        self.assertEqual(dict(scan.options), {"yourAge": 3})

    def testGlobalPolicy(self):
        scan = Tokenizer((ROOT, TEST, INSTALL), "global").tokenize(["--your-age=3", "test"])
        self.assertEqual(dict(scan.options), {"age": 3})

    def testUnresolvedKeyKept(self):
        scan = self.tokenizer.tokenize(["test", "--color=red"])
        self.assertEqual(dict(scan.options), {"color": "red"})

    def testLaterOccurrenceWins(self):
        scan = self.tokenizer.tokenize(["install-apk", "--device=a", "--device=b"])
        self.assertEqual(scan.options["device"], "b")
        self.assertEqual(scan.sources["device"].index, 2)

    def testInlineText(self):
        scan = self.tokenizer.tokenize(["install-apk", "--path=42", "--debug"])
        self.assertEqual(scan.options["path"], 42)
        self.assertEqual(scan.sources["path"].inline, "42")
        self.assertIsNone(scan.sources["debug"].inline)

    def testMalformedSetAside(self):
        scan = self.tokenizer.tokenize(["-ab", "file"])
        self.assertEqual([(token.index, token.text) for token in scan.malformed], [(0, "-ab")])
        self.assertEqual(scan.kinds, (Kind.ARG,))

    def testPseudoCommandIsAnArgument(self):
        scan = self.tokenizer.tokenize([NO_COMMAND])
        self.assertIsNone(scan.command)
        self.assertEqual(scan.args, (NO_COMMAND,))

    def testMultipleCommandsKeepTheLast(self):
        scan = self.tokenizer.tokenize(["test", "install-apk"])
        self.assertEqual(scan.command, "install-apk")
        self.assertEqual(scan.kinds, (Kind.COMMAND, Kind.COMMAND))

    def testResultsView(self):
        scan = self.tokenizer.tokenize(["test", "--age=3", "file"])
        self.assertEqual(scan.results, {"args": ["file"], "command": "test", "age": 3})

    def testNonStringRejected(self):
        with self.assertRaises(TypeError):
            self.tokenizer.tokenize(["test", 3])


if __name__ == "__main__":
    unittest.main()
