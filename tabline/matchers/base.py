# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Base class and shared plumbing for completion matchers.

A matcher answers two questions about a token suffix:

- `has_matched(tokens)`: does this kind of completion apply here? Pure, looks
  at the tokens only, and by default evaluates the matcher's row of
  `tabline.rules.RULES`.
- `get_matches(tokens, scope)`: which strings complete the word? May query
  the catalog, variables and commands held by the `CompletionScope`.

All whitespace tokens have been removed from `tokens`, and the final token is
the word to complete: an identifier prefix, or `""` at a word boundary.

Note that the word may not be identical to what the line editor replaces,
because `:` is not a word-break character: candidates for `Foo::CO` must be
`Foo::CONSTANT_VALUE`, not `CONSTANT_VALUE`.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Collection, Iterable, Sequence

from tabline.logger import logger
from tabline.namespace import namespace_and_class
from tabline.protocols import CommandRegistry, SymbolCatalog, VariableContext
from tabline.rules import RULES, MatcherKind, applies
from tabline.tokens import Token, has_token, is_command_name, is_identifier_prefix


@dataclass(frozen=True)
class CompletionScope:
    """
    Read-only snapshot of the shell state for one completion request.

    The engine builds one per `complete()` call; matchers never mutate it or
    anything it refers to.
    """

    catalog: SymbolCatalog
    variables: VariableContext
    commands: CommandRegistry
    command_names: frozenset[str] = field(default=frozenset())

    def __post_init__(self) -> None:
        if not self.command_names:
            object.__setattr__(self, "command_names", frozenset(self.commands.names()))


class AbstractMatcher(ABC):
    """
    Abstract tab completion matcher.

    Subclasses set `kinds` to the rows of the rule table they answer to, and
    implement `get_matches()`.
    """

    kinds: ClassVar[tuple[MatcherKind, ...]] = ()

    def has_matched(self, tokens: Sequence[Token]) -> bool:
        """Check whether this matcher can provide completions for `tokens`."""
        return any(applies(RULES[kind], tokens) for kind in self.kinds)

    @abstractmethod
    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> Iterable[str]:
        """Provide completion candidates for `tokens`."""

    def collect(self, tokens: Sequence[Token], scope: CompletionScope) -> set[str]:
        """
        Run `get_matches()`, downgrading any failure to no candidates.

        One faulty matcher must never deny completions from the others.
        """
        try:
            return set(self.get_matches(tokens, scope))
        except Exception as error:
            logger.debug(
                "%s failed on '%s': %s",
                type(self).__name__,
                "".join(token.text for token in tokens),
                error,
                exc_info=True,
            )
            return set()

    @staticmethod
    def get_input(
        tokens: Sequence[Token], valid_tokens: Collection[str] | None = None
    ) -> str | None:
        """
        Get the word to be completed.

        Returns the text of the final token if it is valid, `None` otherwise.
        By default the token is valid if it is an identifier prefix,
        including "".
        """
        token = tokens[-1]
        if valid_tokens is not None:
            return token.text if has_token(valid_tokens, token) else None
        if is_identifier_prefix(token, True):
            return token.text
        return None

    @staticmethod
    def class_path(tokens: Sequence[Token], scope: CompletionScope) -> str:
        """Qualified class path ending at the last of `tokens`."""
        return namespace_and_class(tokens, scope.command_names)

    @staticmethod
    def in_command_argument(tokens: Sequence[Token], scope: CompletionScope) -> bool:
        """Whether the line starts with a shell command (`show Foo::...`)."""
        return len(tokens) > 1 and is_command_name(tokens[1], scope.command_names)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
