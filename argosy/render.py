"""
Terminal presentation of help trees and parse failures (rich).

Nothing in the engine prints; hosts pick what to show:

    result = parser.parse()
    if not result.success:
        report(result)          # issues, then help
        raise SystemExit(2)

Palette keys
- usage-label, program-name, command-name, options-label, args-label
- description-section, section-title
- commands-table, command, command-description
- option-syntax, option-value, optional, required, description, aliases-label, alias, example
- issue-code, issue-path, issue-message, failure-title

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- colorful=False drops every style; fancy=True wraps the output in a panel.
"""
from rich.box import ROUNDED
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .faults import console, palette, program

STYLES = {
    # === Head sections ===
    "usage-label": "bold #00E6FF",
    "program-name": "bold #FF4D94",
    "command-name": "bold #FFD600",
    "options-label": "#00E6FF",
    "args-label": "#22C55E",
    "description-section": "italic #A3A3A3",
    "section-title": "bold #FFFFFF",

    # === Commands table ===
    "commands-table": "#4B5563",
    "command": "bold #36C5F0",
    "command-description": "#9CA3AF",

    # === Options ===
    "option-syntax": "bold #00E6FF",
    "option-value": "#FF4D94",
    "optional": "italic dim",
    "required": "italic #FFD600",
    "description": "#D1D5DB",
    "aliases-label": "#E91E63",
    "alias": "#00BCD4",
    "example": "#22C55E",

    # === Failures ===
    "failure-title": "bold #FF4DA6",
    "issue-code": "bold #00E5FF",
    "issue-path": "#9CA3AF",
    "issue-message": "#C8C8D0",

    # === Fancy panel ===
    "panel-title": "bold #FF4D94",
}


def _syntax(syntax, styler, text):
    """
    --name="string" with the flag and the value part styled apart.
    """
    flag, sign, value = syntax.partition("=")
    return Text.assemble(text(flag, styler("option-syntax")), sign, text(value, styler("option-value")))


def _options(options, styler, text, *, padding=2):
    section = Text()
    width = max((len(option.syntax) for option in options), default=0)

    for option in options:
        section.append(" " * padding)
        section.append(_syntax(option.syntax, styler, text))
        section.append(" " * (width - len(option.syntax) + 2))
        if option.optional:
            section.append(text("optional", styler("optional")))
        else:
            section.append(text("required", styler("required")))
        if option.description:
            section.append(" • ").append(text(option.description, styler("description")))
        section.append("\n")

        indent = " " * (padding + width + 2)
        if option.aliases:
            section.append(indent).append(text("aliases", styler("aliases-label"))).append("  ")
            section.append(Text(", ").join(text(alias, styler("alias")) for alias in option.aliases))
            section.append("\n")
        if option.example:
            section.append(indent).append(text("example", styler("example"))).append("  ")
            section.append(text(option.example, styler("description")))
            section.append("\n")

    return section


def render_help(tree, /, *, colorful=True, fancy=False):
    """
    Build the rich renderable of a HelpTree.
    """
    styler, text = palette(STYLES, colorful=colorful)
    renders = []

    usage = Text()
    usage.append(text("usage", styler("usage-label"))).append(": ")
    if tree.usage:
        usage.append(tree.usage)
    else:
        usage.append(text(tree.name or program(), styler("program-name")))
        if tree.commands:
            usage.append(" ").append(text("<command>", styler("command-name")))
        usage.append(" ").append(text("[options]", styler("options-label")))
        usage.append(" ").append(text("[args]", styler("args-label")))
    renders.append(usage.append("\n"))

    if tree.description:
        renders.append(text(tree.description, styler("description-section")).append("\n"))

    if tree.commands:
        table = Table(
            "command", "help",
            title=text("commands", styler("section-title")),
            box=ROUNDED,
            style=styler("commands-table"),
            header_style=styler("section-title"),
        )
        for command in tree.commands:
            names = Text(", ").join(
                text(name, styler("command")) for name in (command.name, *command.aliases)
            )
            table.add_row(names, text(command.description or "no description", styler("command-description")))
        renders.append(table)

        for command in tree.commands:
            section = Text()
            section.append(text(command.name, styler("command"))).append(":")
            if command.description:
                section.append(" ").append(text(command.description, styler("command-description")))
            section.append("\n")
            if command.arguments:
                section.append("  ").append(text("arguments", styler("args-label"))).append(" • ")
                section.append(text(command.arguments, styler("description"))).append("\n")
            if command.example:
                section.append("  ").append(text("example", styler("example"))).append("   ")
                section.append(text(command.example, styler("description"))).append("\n")
            if command.options:
                section.append(_options(command.options, styler, text, padding=4))
            renders.append(section)

    globals = tree.globals
    if globals.options or globals.arguments:
        section = Text()
        section.append(text("global", styler("section-title"))).append(":\n")
        if globals.arguments:
            section.append("  ").append(text("arguments", styler("args-label"))).append(" • ")
            section.append(text(globals.arguments, styler("description"))).append("\n")
        section.append(_options(globals.options, styler, text))
        renders.append(section)

    renders[-1].rstrip()
    renderable = Group(*renders)

    if fancy:
        renderable = Panel(
            renderable,
            title=Text.assemble("[ ", f"{tree.name or program()} help".upper(), " ]", style=styler("panel-title")),
            title_align="left",
        )

    return renderable


def render_failure(failure, /, *, colorful=True, fancy=False):
    """
    Build the rich renderable of a Failure (or of any iterable of Issues).
    """
    styler, text = palette(STYLES, colorful=colorful)
    issues = getattr(failure, "issues", failure)

    lines = Text()
    for issue in issues:
        lines.append("[ ").append(text(issue.code.normalize(), styler("issue-code"))).append(" ] ")
        if issue.path:
            lines.append(text(".".join(map(str, issue.path)), styler("issue-path"))).append(" : ")
        lines.append(text(issue.message, styler("issue-message"))).append("\n")
    lines.rstrip()

    title = Text.assemble(
        "[ ",
        text(program(), styler("program-name")),
        " — ",
        text("invalid arguments", styler("failure-title")),
        " ]",
    )

    if fancy:
        return Panel(lines, title=title, title_align="left")
    return Group(title, lines)


def print_help(tree, /, **options):
    console.print(render_help(tree, **options))


def print_failure(failure, /, **options):
    console.print(render_failure(failure, **options))


def report(failure, /, **options):
    """
    Print the issues of a failure followed by its help tree.
    """
    print_failure(failure, **options)
    console.print()
    print_help(failure.help, **options)


__all__ = (
    "render_help",
    "render_failure",
    "print_help",
    "print_failure",
    "report",
)
