# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A variable name tab completion matcher.

Candidates are bare names: `$` breaks words for the line editor, so after
`$fo` the word being replaced is `fo`.
"""
from __future__ import annotations

from typing import Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.rules import MatcherKind
from tabline.tokens import Token, filter_prefix


class VariablesMatcher(AbstractMatcher):
    kinds = (MatcherKind.VARIABLE,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        if word is None:
            return []
        return filter_prefix(word, scope.variables.names())
