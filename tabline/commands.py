# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registry of the shell's built-in command names.

Only names matter to completion: the command matcher offers them as the first
word of a line, and a class named right after one of them (`show Foo::`) is
completed with all of its members rather than only static ones.
"""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field


class ShellCommand(BaseModel):
    """A shell command name and its aliases."""

    name: str
    aliases: list[str] = Field(default_factory=list)
    help_text: str = ""

    def names(self) -> list[str]:
        return [self.name, *self.aliases]


DEFAULT_COMMANDS: list[ShellCommand] = [
    ShellCommand(name="help", aliases=["?"], help_text="Show a list of commands."),
    ShellCommand(name="ls", aliases=["dir"], help_text="List local, instance or class variables, methods and constants."),
    ShellCommand(name="doc", aliases=["rtfm", "man"], help_text="Read the documentation for an object, class, constant, method or property."),
    ShellCommand(name="show", help_text="Show the code for an object, class, constant, method or property."),
    ShellCommand(name="dump", help_text="Dump an object or primitive."),
    ShellCommand(name="wtf", aliases=["last-exception"], help_text="Show the backtrace of the most recent exception."),
    ShellCommand(name="whereami", help_text="Show where you are in the code."),
    ShellCommand(name="trace", help_text="Show the current call stack."),
    ShellCommand(name="history", aliases=["hist"], help_text="Show the shell history."),
    ShellCommand(name="clear", help_text="Clear the screen."),
    ShellCommand(name="edit", help_text="Open an external editor."),
    ShellCommand(name="completions", help_text="List completions for a partial input."),
    ShellCommand(name="exit", aliases=["quit", "q"], help_text="End the current session."),
]


class CommandRegistry:
    """Known shell command names, including aliases."""

    def __init__(self, commands: Iterable[ShellCommand | str] | None = None) -> None:
        self._commands: list[ShellCommand] = []
        for command in DEFAULT_COMMANDS if commands is None else commands:
            self.add(command)

    def add(self, command: ShellCommand | str) -> None:
        if isinstance(command, str):
            command = ShellCommand(name=command)
        self._commands.append(command)

    @property
    def commands(self) -> list[ShellCommand]:
        return list(self._commands)

    def names(self) -> list[str]:
        names: list[str] = []
        for command in self._commands:
            names.extend(command.names())
        return names

    def is_command(self, name: str) -> bool:
        return name in self.names()

