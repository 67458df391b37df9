# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A constant name tab completion matcher.

This matcher provides completion for all defined constants.
"""
from __future__ import annotations

from typing import Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.rules import MatcherKind
from tabline.tokens import Token, filter_prefix


class ConstantsMatcher(AbstractMatcher):
    kinds = (MatcherKind.CONSTANT,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        if word is None:
            return []
        return filter_prefix(word, scope.catalog.list_constants())
