"""
Ordering rules over the kind-trace.

The closed shapes cannot see where a command token stood or how many there
were, so refine() checks the classified tokens once assembly is done:

1. a command token must be the first token (COMMAND_NOT_FIRST);
2. at most one command token may appear (MULTIPLE_COMMANDS).

The first violated rule is reported.
"""
from .faults import FaultCode, Issue
from .tokens import Kind
from .utils import ordinal


def refine(tokens, /):
    """
    Return the Issue for the first ordering rule the tokens break, or None.

    - tokens: classified Tokens in argv order (Scan.tokens).
    """
    tokens = tuple(tokens)
    commands = [token for token in tokens if token.kind is Kind.COMMAND]
    if not commands:
        return None

    first = commands[0]
    if first is not tokens[0]:
        return Issue(
            ("argv", first.index),
            "command %r must come first, found it at %s position" % (first.text, ordinal(first.index + 1)),
            FaultCode.COMMAND_NOT_FIRST,
        )

    if len(commands) > 1:
        return Issue(
            ("argv", commands[1].index),
            "only one command is allowed, got %s" % ", ".join(repr(token.text) for token in commands),
            FaultCode.MULTIPLE_COMMANDS,
        )

    return None


__all__ = (
    "refine",
)
