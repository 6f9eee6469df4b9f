"""
End-to-end parser tests (argosy.engine).

Scope
- parse() / Parser.parse(): success and failure results with their help tree.
- Ordering failures reported alongside (and ahead of) field issues.
- Schema validation before parsing, and its toggle.
- Alias policies seen from the public API.
"""
import sys
import unittest
from unittest import TestCase, mock

from argosy import (
    ArgumentsError,
    Boolean,
    Command,
    DuplicateCommandError,
    Failure,
    FaultCode,
    HelpTree,
    IssueError,
    Number,
    Option,
    Parser,
    ParseOptions,
    String,
    Success,
    command,
    options,
    parse,
)
from argosy.utils import Unset

TEST = command("test", aliases=("run-test", "test-command"), options=(
    Option("age", Number(), aliases=("yourAge",)),
    Option("name", String(optional=True), aliases=("yourName",)),
))
BUILD = command("build", options=(
    Option("path", String(optional=True)),
    Option("release", Boolean(optional=True), aliases=("r",)),
))
CLEAN = command("clean")
GREET = command("greet")
SETTINGS = options(
    name="tool",
    global_options=(Option("verbose", Boolean(optional=True), aliases=("v",)),),
)


class ParseTest(TestCase):
    def testNoCommandNoFlags(self):
        result = parse(TEST, BUILD, argv=["a", "b"], options=SETTINGS)
        self.assertIsInstance(result, Success)
        self.assertTrue(result.success)
        self.assertIsNone(result.data.command)
        self.assertEqual(result.data.args, ("a", "b"))

    def testEmptyArgv(self):
        result = parse(argv=[])
        self.assertTrue(result.success)
        self.assertEqual(dict(result.data), {"command": None, "args": ()})

    def testCommandThenOptions(self):
        result = parse(TEST, BUILD, argv=["build", "--path=x"], options=SETTINGS)
        self.assertTrue(result.success)
        self.assertEqual(result.data.command, "build")
        self.assertEqual(result.data.path, "x")
        self.assertIsNone(result.data.release)

    def testCommandAlias(self):
        result = parse(TEST, argv=["run-test", "--your-age=30", "--your-name=Ada"], options=SETTINGS)
        self.assertTrue(result.success)
        self.assertEqual(result.data.command, "test")
        self.assertEqual(result.data.age, 30)
        self.assertEqual(result.data.name, "Ada")

    def testBooleanForms(self):
        self.assertIs(parse(BUILD, argv=["build", "--release"]).data.release, True)
        self.assertIs(parse(BUILD, argv=["build", "--release=false"]).data.release, False)
        self.assertIs(parse(BUILD, argv=["build", "-r"]).data.release, True)

    def testGlobalOptions(self):
        result = parse(BUILD, argv=["-v"], options=SETTINGS)
        self.assertIs(result.data.verbose, True)

    def testStringStaysText(self):
        self.assertEqual(parse(BUILD, argv=["build", "--path=42"]).data.path, "42")

    def testNumberCoerced(self):
        result = parse(TEST, argv=["test", "--age=42"])
        self.assertEqual(result.data.age, 42)
        self.assertIsInstance(result.data.age, int)

    def testOverlongDigitsKeptAsText(self):
        digits = "1" * 5000
        self.assertEqual(parse(BUILD, argv=["build", "--path=" + digits]).data.path, digits)

    def testOverlongDigitsForNumber(self):
        result = parse(TEST, argv=["test", "--age=" + "9" * 5000])
        self.assertEqual([issue.code for issue in result.issues], [FaultCode.INVALID_VALUE])

    def testOverlongDigitsForUnknownOption(self):
        result = parse(argv=["--x=" + "9" * 5000])
        self.assertIsInstance(result, Failure)
        self.assertEqual([issue.code for issue in result.issues], [FaultCode.UNRECOGNIZED_OPTION])

    def testInvalidNumber(self):
        result = parse(TEST, argv=["test", "--age=abc"])
        self.assertIsInstance(result, Failure)
        self.assertFalse(result.success)
        self.assertEqual(result.issues[0].path, ("age",))
        self.assertIs(result.issues[0].code, FaultCode.INVALID_VALUE)

    def testUnknownOption(self):
        result = parse(BUILD, argv=["build", "--unknown=1"])
        self.assertEqual([issue.code for issue in result.issues], [FaultCode.UNRECOGNIZED_OPTION])

    def testMissingRequiredOption(self):
        result = parse(TEST, argv=["test"])
        self.assertEqual([issue.code for issue in result.issues], [FaultCode.MISSING_OPTION])


class OrderingTest(TestCase):
    def testCommandNotFirst(self):
        result = parse(BUILD, argv=["--path=x", "build"])
        self.assertFalse(result.success)
        self.assertEqual([issue.code for issue in result.issues], [FaultCode.COMMAND_NOT_FIRST])

    def testMultipleCommands(self):
        result = parse(BUILD, CLEAN, argv=["build", "clean"])
        self.assertEqual([issue.code for issue in result.issues], [FaultCode.MULTIPLE_COMMANDS])

    def testOrderingIssueLeads(self):
        result = parse(BUILD, CLEAN, argv=["build", "clean", "--unknown"])
        self.assertEqual(
            [issue.code for issue in result.issues],
            [FaultCode.MULTIPLE_COMMANDS, FaultCode.UNRECOGNIZED_OPTION],
        )


class PolicyTest(TestCase):
    def testScopedKeepsForeignAlias(self):
        result = parse(TEST, GREET, argv=["greet", "--your-age=3"])
        self.assertEqual(result.issues[0].path, ("yourAge",))

    def testGlobalResolvesForeignAlias(self):
        result = parse(TEST, GREET, argv=["greet", "--your-age=3"], options=options(policy="global"))
        self.assertEqual(result.issues[0].path, ("age",))
        self.assertIs(result.issues[0].code, FaultCode.UNRECOGNIZED_OPTION)


class ParserTest(TestCase):
    def testHelpUnsetBeforeParse(self):
        self.assertIs(Parser(BUILD).help, Unset)

    def testHelpAfterParse(self):
        parser = Parser(BUILD, options=SETTINGS)
        result = parser.parse(["build"])
        self.assertIsInstance(parser.help, HelpTree)
        self.assertEqual(parser.help, result.help)
        self.assertEqual(parser.help.name, "tool")

    def testHelpNameFallsBackToProgram(self):
        with mock.patch.object(sys, "argv", ["/usr/bin/tool-cli"]):
            self.assertEqual(Parser(BUILD).project().name, "tool-cli")

    def testCommandsIncludeGlobals(self):
        parser = Parser(BUILD)
        self.assertTrue(parser.commands[0].pseudo)
        self.assertIs(parser.commands[1], BUILD)

    def testCommandsFromNames(self):
        result = Parser("build", "clean").parse(["clean", "x"])
        self.assertEqual(result.data.command, "clean")

    def testReusable(self):
        parser = Parser(TEST, BUILD)
        self.assertTrue(parser.parse(["test", "--age=1"]).success)
        self.assertFalse(parser.parse(["test"]).success)
        self.assertTrue(parser.parse(["build"]).success)

    def testDefaultsToProcessArguments(self):
        with mock.patch.object(sys, "argv", ["tool", "build", "--path=x"]):
            result = Parser(BUILD).parse()
        self.assertEqual(result.data.path, "x")

    def testOptionsMustBeParseOptions(self):
        with self.assertRaises(TypeError):
            Parser(BUILD, options={"name": "tool"})


class SchemaTest(TestCase):
    def testDuplicateCommandRaisesBeforeParsing(self):
        with self.assertRaises(DuplicateCommandError):
            parse(Command("build"), Command("build"), argv=["build"], options=ParseOptions(validate=True))

    def testValidationCanBeDisabled(self):
        parser = Parser(Command("build"), Command("build"), options=ParseOptions(validate=False))
        self.assertTrue(parser.parse(["build"]).success)


class RaiseTest(TestCase):
    def testSuccessReturnsData(self):
        result = parse(BUILD, argv=["build"])
        self.assertIs(result.raise_for_failure(), result.data)

    def testFailureRaisesGroup(self):
        result = parse(BUILD, argv=["build", "--unknown", "--color=red"])
        with self.assertRaises(ArgumentsError) as context:
            result.raise_for_failure()
        error = context.exception
        self.assertIsInstance(error, ExceptionGroup)
        self.assertEqual(len(error.exceptions), 2)
        self.assertTrue(all(isinstance(exception, IssueError) for exception in error.exceptions))
        self.assertEqual(tuple(exception.issue for exception in error.exceptions), result.issues)


if __name__ == "__main__":
    unittest.main()
