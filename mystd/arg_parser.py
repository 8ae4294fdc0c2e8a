"""A small command-line argument parser with several value-consumption modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

from mystd.errors import LibraryError

_LOOKUP_ERROR_CODE = 5


class Nargs(IntEnum):
    """How an argument takes the values that follow it on the command line."""

    IMMEDIATE_OPTIONAL = 0
    """Takes at most one value, and only straight after the flag."""
    DELAYED_OPTIONAL = 1
    """Takes at most one value, from the first free positional after the flag."""
    DELAYED_ZERO_OR_MORE = 2
    """Takes every free positional after the flag."""
    IMMEDIATE_ZERO_OR_MORE = 3
    """Takes the values straight after the flag, until the next flag."""
    COMMAND_ONLY = 4
    """A switch that takes no values."""
    REMAINING_ARGUMENTS = 5
    """Collects every positional that nothing else took."""


_IMMEDIATE = frozenset({Nargs.IMMEDIATE_OPTIONAL, Nargs.IMMEDIATE_ZERO_OR_MORE})
_DELAYED = frozenset({Nargs.DELAYED_OPTIONAL, Nargs.DELAYED_ZERO_OR_MORE})
_OPTIONAL = frozenset({Nargs.IMMEDIATE_OPTIONAL, Nargs.DELAYED_OPTIONAL})


@dataclass(eq=False)
class _Argument:
    small_name: str
    long_name: str
    name: str
    narg: Nargs
    values: list[str] = field(default_factory=list)
    involved: bool = False
    to_read: bool = False


class Parser:
    """Parses a command line against a list of declared arguments.

    Arguments are looked up by their ``name``; when several share a name,
    the one declared first wins.
    """

    def __init__(self) -> None:
        self._arguments: list[_Argument] = []

    def add_argument(self, small_name: str, long_name: str, name: str, narg: Nargs) -> None:
        """Declare an argument with a short flag, a long flag and a lookup name."""
        self._arguments.append(_Argument(small_name, long_name, name, Nargs(narg)))

    def parse(self, argv: Iterable[str]) -> None:
        """Parse ``argv``; its first element is the program name and is skipped."""
        for token in list(argv)[1:]:
            if self._consume_flag(token):
                continue
            if self._feed(token, _IMMEDIATE):
                continue
            if self._feed(token, _DELAYED):
                continue
            for argument in self._arguments:
                if argument.narg is Nargs.REMAINING_ARGUMENTS:
                    argument.values.append(token)

    def _consume_flag(self, token: str) -> bool:
        matched = False
        engaged: list[_Argument] = []
        for argument in self._arguments:
            for flag in (argument.small_name, argument.long_name):
                if len(token) > len(flag):
                    if not (token.startswith(flag) and token[len(flag)] == "="):
                        continue
                    matched = True
                    argument.involved = True
                    if argument.narg is Nargs.COMMAND_ONLY:
                        continue
                    if argument.narg is Nargs.DELAYED_OPTIONAL or (
                        argument.narg is Nargs.IMMEDIATE_OPTIONAL and not argument.values
                    ):
                        argument.values.append(token[len(flag) + 1:])
                    if argument.narg not in _OPTIONAL:
                        argument.to_read = True
                        engaged.append(argument)
                elif token == flag:
                    matched = True
                    argument.involved = True
                    if argument.narg is not Nargs.COMMAND_ONLY:
                        argument.to_read = True
                        engaged.append(argument)

        if matched:
            # A new flag ends immediate reading for every argument it did not engage.
            position = 0
            for argument in self._arguments:
                current = engaged[position] if position < len(engaged) else None
                if argument.narg in _IMMEDIATE and argument is not current:
                    argument.to_read = False
                elif argument is current:
                    position += 1
        return matched

    def _feed(self, token: str, group: frozenset[Nargs]) -> bool:
        taken = False
        for argument in self._arguments:
            if argument.narg in group and argument.to_read:
                taken = True
                argument.values.append(token)
                if argument.narg in _OPTIONAL:
                    argument.to_read = False
        return taken

    def _find(self, name: str | None) -> _Argument | None:
        if name is None:
            return None
        return next((arg for arg in self._arguments if arg.name == name), None)

    def __len__(self) -> int:
        return len(self._arguments)

    def involved(self, name: str | None) -> bool:
        """Return whether the named argument's flag appeared on the command line."""
        argument = self._find(name)
        return argument.involved if argument is not None else False

    def argument_size(self, name: str | None) -> int:
        """Return how many values the named argument collected (0 if unknown)."""
        argument = self._find(name)
        return len(argument.values) if argument is not None else 0

    def value(self, name: str | None, index: int) -> str:
        """Return value ``index`` of the named argument."""
        if name is None:
            raise LibraryError("value lookup was given no argument name", _LOOKUP_ERROR_CODE)
        argument = self._find(name)
        if argument is None:
            raise LibraryError(f"no argument named {name!r}", _LOOKUP_ERROR_CODE)
        return argument.values[index]