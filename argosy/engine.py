"""
Argosy engine: schema in, argv in, one typed result out.

Pipeline per parse
1. schema validation (once per Parser, when ParseOptions.validate is true)
2. tokenize argv (aliases resolved against the command seen so far)
3. assemble the result against the selected command's closed shape
4. check command ordering on the kind-trace
5. return Success(data, help) or Failure(error, help)

The engine never prints and never exits; see argosy.render for terminal output.

Quick example:
    >>> from argosy import Option, String, Boolean, command, options, parse
    >>> build = command("build", options=(Option("rootPath", String(optional=True), aliases=("root",)),))
    >>> result = parse(build, argv=["build", "--root=./app"], options=options(name="tool"))
    >>> result.success, result.data.command, result.data.rootPath
    (True, 'build', './app')
"""
import sys
from typing import NamedTuple

from .assembly import Assembler, ParseResult
from .faults import ArgumentsError, program
from .helps import HelpTree, project
from .specs import ParseOptions, command
from .syntax import refine
from .tokens import Tokenizer
from .utils import Unset
from .validate import validate_schema


class Success(NamedTuple):
    """
    successful parse: the typed result and the help tree of the schema.
    """
    data: ParseResult
    help: HelpTree

    @property
    def success(self):
        return True

    def raise_for_failure(self):
        """
        return the data (a success has nothing to raise).
        """
        return self.data


class Failure(NamedTuple):
    """
    failed parse: an ArgumentsError holding every Issue, and the help tree.
    """
    error: ArgumentsError
    help: HelpTree

    @property
    def success(self):
        return False

    @property
    def issues(self):
        return self.error.issues

    def raise_for_failure(self):
        """
        raise the ArgumentsError (an ExceptionGroup of IssueError).
        """
        raise self.error


class Parser:
    """
    A reusable parser for a fixed schema.

    parameters
    - *commands: Command specs (or arguments accepted by command()).
    - options: ParseOptions (see options()); defaults to ParseOptions().

    Construction validates the schema when options.validate is true, raising a
    SchemaDefinitionError before any argv is read, then prepares the tokenizer
    and the per-command shapes.
    """

    def __init__(self, *commands, options=Unset):
        options = ParseOptions() if options is Unset else options
        if not isinstance(options, ParseOptions):
            raise TypeError("Parser 'options' must be parse options (see options())")

        self._options = options
        self._commands = (options.root, *map(command, commands))

        if options.validate:
            validate_schema(self._commands)

        self._tokenizer = Tokenizer(self._commands, options.policy)
        self._assembler = Assembler(self._commands)
        self._help = Unset

    @property
    def commands(self):
        """
        every command of the schema, the global pseudo-command first.
        """
        return self._commands

    @property
    def options(self):
        return self._options

    @property
    def help(self):
        """
        the help tree computed by the last parse() call, or Unset before any.
        """
        return self._help

    def project(self):
        """
        Build the help tree of this parser's schema.
        """
        return project(
            self._commands,
            name=self._options.name or program(),
            description=self._options.description,
            usage=self._options.usage,
        )

    def parse(self, argv=Unset, /):
        """
        Parse argv (defaults to sys.argv[1:]) into Success or Failure.
        """
        argv = tuple(sys.argv[1:] if argv is Unset else argv)

        self._help = help = self.project()
        scan = self._tokenizer.tokenize(argv)
        violation = refine(scan.tokens)

        try:
            data = self._assembler.assemble(scan)
        except ArgumentsError as error:
            issues = error.issues if violation is None else (violation, *error.issues)
            return Failure(ArgumentsError(issues), help)

        if violation is not None:
            return Failure(ArgumentsError((violation,)), help)
        return Success(data, help)


def parse(*commands, argv=Unset, options=Unset):
    """
    One-shot parse: Parser(*commands, options=options).parse(argv).
    """
    return Parser(*commands, options=options).parse(argv)


__all__ = (
    "Success",
    "Failure",
    "Parser",
    "parse",
)
