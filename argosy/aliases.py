"""
Option alias resolution.

An option flag typed on the command line is reduced to a key (see tokens) and
must be mapped back to the canonical option name before it can be stored in the
accumulator. Two policies exist (AliasPolicy):

- GLOBAL: search every command's options, in schema order (the global
  pseudo-command first). A command's alias can then satisfy a flag that belongs
  to another command, and flags may appear anywhere in argv.
- SCOPED (default): search only the command recognized so far, or the global
  options while no command token has been seen. Flags must follow the command
  they belong to, which matches the "command comes first" rule.

Exact option names win over aliases under both policies.
"""
from .specs import NO_COMMAND, AliasPolicy


class AliasResolver:
    """
    Map option keys to canonical option names under a chosen policy.

    parameters
    - commands: every Command of the schema, the global pseudo-command included.
    - policy: AliasPolicy (or its string value).

    the lookup tables are built once; resolve() is a couple of dict reads.
    """

    def __init__(self, commands, policy=AliasPolicy.SCOPED):
        self.policy = AliasPolicy(policy)
        self._scopes = {}
        self._everywhere = {}

        commands = tuple(commands)
        for command in commands:
            table = {}
            for option in command.options:
                for alias in option.aliases:
                    table.setdefault(alias, option.name)
            # names last: a name shadows an equal alias of a sibling option
            for option in command.options:
                table[option.name] = option.name
            self._scopes[command.command] = table

        for command in commands:
            for option in command.options:
                self._everywhere.setdefault(option.name, option.name)
        for command in commands:
            for option in command.options:
                for alias in option.aliases:
                    self._everywhere.setdefault(alias, option.name)

    def resolve(self, key, command=None):
        """
        return the canonical option name for `key`, or None when nothing matches.

        - command: name of the active command; None selects the global options.
          ignored under the GLOBAL policy.
        """
        if self.policy is AliasPolicy.GLOBAL:
            return self._everywhere.get(key)
        return self._scopes.get(NO_COMMAND if command is None else command, {}).get(key)


__all__ = (
    "AliasResolver",
)
