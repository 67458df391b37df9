# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A PHP keyword tab completion matcher.

This matcher provides completion for the function-like PHP keywords. They are
never offered for an empty word at the start of a statement, so a bare tab on
an empty line is not flooded with keywords.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.rules import MatcherKind
from tabline.tokens import Token, filter_prefix

KEYWORDS = [
    "array", "clone", "declare", "die", "echo", "empty", "eval", "exit", "include",
    "include_once", "isset", "list", "print", "require", "require_once", "unset",
]


class KeywordsMatcher(AbstractMatcher):
    kinds = (MatcherKind.KEYWORD,)

    def __init__(self, keywords: Iterable[str] | None = None) -> None:
        self.keywords = list(KEYWORDS if keywords is None else keywords)

    def get_keywords(self) -> list[str]:
        return list(self.keywords)

    def is_keyword(self, keyword: str) -> bool:
        return keyword in self.keywords

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        if word is None:
            return []
        return filter_prefix(word, self.keywords)
