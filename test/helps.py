"""
Help projection tests (argosy.helps).

Scope
- Option syntax per value kind.
- Tree layout: globals vs. commands, flags for option aliases.
- Lookup of a command by name or alias.
"""
import unittest
from unittest import TestCase

from argosy import (
    NO_COMMAND,
    Arguments,
    Boolean,
    Command,
    GlobalHelp,
    HelpTree,
    Literal,
    Number,
    Option,
    String,
    option_syntax,
    project,
)

ROOT = Command(NO_COMMAND, arguments=Arguments(description="files to inspect"), options=(
    Option("verbose", Boolean(optional=True), aliases=("v",), description="Say more."),
))
BUILD = Command(
    "build",
    aliases=("make",),
    description="Build the project.",
    example="tool build --root=./app",
    arguments=Arguments(description="targets"),
    options=(
        Option("rootPath", String(optional=True), aliases=("root",), description="Project root."),
        Option("retries", Number(default=3)),
    ),
)
CLEAN = Command("clean", options=(
    Option("force", Boolean(), aliases=("f", "yes")),
))


class SyntaxTest(TestCase):
    def testShortName(self):
        self.assertEqual(option_syntax(Option("v", Boolean())), "-v")

    def testBoolean(self):
        self.assertEqual(option_syntax(Option("dryRun", Boolean())), "--dry-run")

    def testString(self):
        self.assertEqual(option_syntax(Option("rootPath", String())), '--root-path="string"')

    def testNumber(self):
        self.assertEqual(option_syntax(Option("retries", Number())), "--retries=number")

    def testStringLiteral(self):
        self.assertEqual(option_syntax(Option("mode", Literal("debug"))), '--mode="debug"')

    def testNumberLiteral(self):
        self.assertEqual(option_syntax(Option("level", Literal(3))), "--level=3")


class ProjectTest(TestCase):
    def setUp(self):
        self.tree = project((ROOT, BUILD, CLEAN), name="tool", description="A tool.", usage="tool <command>")

    def testMetadata(self):
        self.assertIsInstance(self.tree, HelpTree)
        self.assertEqual(self.tree.name, "tool")
        self.assertEqual(self.tree.description, "A tool.")
        self.assertEqual(self.tree.usage, "tool <command>")

    def testGlobals(self):
        self.assertEqual(self.tree.globals.arguments, "files to inspect")
        verbose, = self.tree.globals.options
        self.assertEqual(verbose.name, "verbose")
        self.assertEqual(verbose.syntax, "--verbose")
        self.assertEqual(verbose.aliases, ("-v",))
        self.assertTrue(verbose.optional)
        self.assertEqual(verbose.description, "Say more.")

    def testCommandsExcludeGlobals(self):
        self.assertEqual([command.name for command in self.tree.commands], ["build", "clean"])

    def testCommand(self):
        build = self.tree.commands[0]
        self.assertEqual(build.description, "Build the project.")
        self.assertEqual(build.example, "tool build --root=./app")
        self.assertEqual(build.aliases, ("make",))
        self.assertEqual(build.arguments, "targets")
        self.assertEqual([option.syntax for option in build.options], ['--root-path="string"', "--retries=number"])

    def testDefaultedOptionIsOptional(self):
        self.assertTrue(self.tree.commands[0].options[1].optional)

    def testRequiredOption(self):
        self.assertFalse(self.tree.commands[1].options[0].optional)

    def testAliasesStayWithTheirCommand(self):
        build, clean = self.tree.commands
        self.assertEqual([option.aliases for option in build.options], [("--root",), ()])
        self.assertEqual([option.aliases for option in clean.options], [("-f", "--yes")])

    def testLookupByNameOrAlias(self):
        self.assertIs(self.tree.command("build"), self.tree.commands[0])
        self.assertIs(self.tree.command("make"), self.tree.commands[0])
        self.assertIsNone(self.tree.command("deploy"))

    def testWithoutGlobals(self):
        tree = project((BUILD,))
        self.assertEqual(tree.globals, GlobalHelp(None, ()))
        self.assertIsNone(tree.name)


if __name__ == "__main__":
    unittest.main()
