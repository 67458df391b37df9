# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A shell command name tab completion matcher.

Commands are only valid as the first word of the line, right after the
opening tag the engine prepends.
"""
from __future__ import annotations

from typing import Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.rules import MatcherKind
from tabline.tokens import Token, filter_prefix


class CommandsMatcher(AbstractMatcher):
    kinds = (MatcherKind.COMMAND,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        if not word:
            return []
        return filter_prefix(word, scope.commands.names())
