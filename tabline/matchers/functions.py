# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A function name tab completion matcher.

Namespaced functions are completed the same way as class names: segments
already typed before the last `\\` are not repeated.
"""
from __future__ import annotations

from typing import Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.namespace import drop_typed_namespace, strip_leading_separator
from tabline.rules import MatcherKind
from tabline.tokens import Token, starts_with


class FunctionsMatcher(AbstractMatcher):
    kinds = (MatcherKind.FUNCTION_NAME,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        typed = strip_leading_separator(self.class_path(tokens, scope))
        if not typed:
            return []
        return [
            drop_typed_namespace(typed, function)
            for function in scope.catalog.list_functions()
            if starts_with(typed, function)
        ]
