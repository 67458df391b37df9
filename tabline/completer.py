# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `AutoCompleter`, the completion engine, and `TablineCompleter`, its
Prompt Toolkit adapter.

`AutoCompleter.complete(line, cursor)`:
1. tokenizes the line up to the cursor, behind a `<?php ` opening tag,
2. drops whitespace tokens and makes sure the last token is the word being
   completed (an identifier prefix, or "" at a word boundary),
3. asks every registered matcher, in registration order, whether it applies,
4. collects candidates from those that do,
5. returns the union as a set.

A matcher that fails yields no candidates; the others still contribute.
"""
from __future__ import annotations

from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from tabline.catalog import SymbolTable
from tabline.commands import CommandRegistry
from tabline.context import Context
from tabline.lexer import OPEN_TAG, tokenize
from tabline.logger import logger
from tabline.matchers import AbstractMatcher, CompletionScope, default_matchers
from tabline.protocols import CommandRegistry as CommandRegistryProtocol
from tabline.protocols import SymbolCatalog, VariableContext
from tabline.tokens import (
    EMPTY,
    T_OPEN_TAG,
    T_STRING,
    T_VARIABLE,
    T_WHITESPACE,
    Token,
    is_identifier_prefix,
    token_is,
)


class AutoCompleter:
    """
    Context-sensitive tab completion for PHP shell input.

    Holds the ordered matcher list and read-only handles to the symbol
    catalog, the variable context and the command registry.

    Args:
        catalog (SymbolCatalog | None): Declared symbols. Defaults to the PHP
            built-ins.
        variables (VariableContext | None): Variable bindings. Defaults to an
            empty `Context`.
        commands (CommandRegistry | None): Shell command names. Defaults to
            the standard shell commands.
        matchers (Iterable[AbstractMatcher] | None): Matchers to register.
    """

    def __init__(
        self,
        catalog: SymbolCatalog | None = None,
        variables: VariableContext | None = None,
        commands: CommandRegistryProtocol | None = None,
        matchers: Iterable[AbstractMatcher] | None = None,
    ) -> None:
        self.catalog: SymbolCatalog = (
            catalog if catalog is not None else SymbolTable.with_builtins()
        )
        self.context: VariableContext = variables if variables is not None else Context()
        self.commands: CommandRegistryProtocol = (
            commands if commands is not None else CommandRegistry()
        )
        self.matchers: list[AbstractMatcher] = []
        if matchers:
            self.add_matchers(matchers)

    @classmethod
    def default(
        cls,
        catalog: SymbolCatalog | None = None,
        variables: VariableContext | None = None,
        commands: CommandRegistryProtocol | None = None,
    ) -> AutoCompleter:
        """Build an engine with every built-in matcher registered."""
        return cls(catalog, variables, commands, matchers=default_matchers())

    def add_matcher(self, matcher: AbstractMatcher) -> None:
        if not isinstance(matcher, AbstractMatcher):
            raise TypeError(
                f"Expected an AbstractMatcher, got '{type(matcher).__name__}'."
            )
        self.matchers.append(matcher)

    register_matcher = add_matcher

    def add_matchers(self, matchers: Iterable[AbstractMatcher]) -> None:
        for matcher in matchers:
            self.add_matcher(matcher)

    def tokenize(self, line: str, cursor: int | None = None) -> tuple[Token, ...]:
        """
        Tokenize `line` up to `cursor` into the suffix matchers work on.

        Whitespace is removed; the opening tag stays first. A trailing
        variable (`$fo`) is split into `$` and `fo`. When the input ends at a
        word boundary, or in a token that cannot start a name, the empty word
        is appended.
        """
        if cursor is None:
            cursor = len(line)
        raw_tokens = tokenize(OPEN_TAG + line[:cursor])
        at_boundary = len(raw_tokens) > 1 and token_is(raw_tokens[-1], T_WHITESPACE)
        tokens = [token for token in raw_tokens if not token_is(token, T_WHITESPACE)]

        last = tokens[-1]
        if token_is(last, T_VARIABLE) and not at_boundary:
            tokens[-1:] = [
                Token.literal("$", last.line),
                Token(T_STRING, last.text[1:], last.line),
            ]
        elif at_boundary or token_is(last, T_OPEN_TAG) or not is_identifier_prefix(last):
            tokens.append(EMPTY)
        return tuple(tokens)

    def complete(self, line: str, cursor: int | None = None) -> set[str]:
        """
        Return every candidate that could complete the word at `cursor`.

        Args:
            line (str): The full input line.
            cursor (int | None): Cursor offset into `line`; defaults to the end.

        Returns:
            set[str]: Candidate strings, without duplicates.
        """
        tokens = self.tokenize(line, cursor)
        scope = CompletionScope(
            catalog=self.catalog, variables=self.context, commands=self.commands
        )

        matches: set[str] = set()
        for matcher in self.matchers:
            try:
                matched = matcher.has_matched(tokens)
            except Exception as error:
                logger.debug(
                    "%r could not check '%s': %s", matcher, line, error, exc_info=True
                )
                continue
            if not matched:
                continue
            found = matcher.collect(tokens, scope)
            logger.debug("%r matched '%s': %d candidate(s)", matcher, line, len(found))
            matches |= found
        return matches


class TablineCompleter(Completer):
    """
    Prompt Toolkit completer backed by an `AutoCompleter`.

    Candidates do not all replace the same amount of text: `Foo::CO` is
    replaced whole by `Foo::CONSTANT_VALUE`, while after `Psy\\C` only `C` is
    replaced by `Context`. Each completion therefore starts at the longest
    tail of the word before the cursor that the candidate begins with.

    Args:
        auto_completer (AutoCompleter): The engine producing candidates.
    """

    def __init__(self, auto_completer: AutoCompleter):
        self.auto_completer = auto_completer

    def get_completions(
        self, document: Document, complete_event: CompleteEvent | None
    ) -> Iterable[Completion]:
        """
        Compute completions for the text before the cursor.

        Yields:
            Completion: One per candidate, in sorted order.
        """
        text = document.text_before_cursor
        try:
            candidates = self.auto_completer.complete(text)
        except Exception as error:
            logger.debug("Completion failed for '%s': %s", text, error, exc_info=True)
            return

        word = document.get_word_before_cursor(WORD=True)
        for candidate in sorted(candidates):
            yield Completion(
                candidate,
                start_position=-self._replaced_length(word, candidate),
                display=candidate,
            )

    @staticmethod
    def _replaced_length(word: str, candidate: str) -> int:
        """Length of the longest tail of `word` that `candidate` starts with."""
        for length in range(min(len(word), len(candidate)), 0, -1):
            if candidate.startswith(word[-length:]):
                return length
        return 0
