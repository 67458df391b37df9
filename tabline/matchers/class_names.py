# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A class name tab completion matcher.

Completes declared class and interface names, following the namespace typed
so far: after `Psy\\C` it offers `Context` for `Psy\\Context`, because `\\`
breaks words for the line editor.
"""
from __future__ import annotations

from typing import Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.namespace import drop_typed_namespace, strip_leading_separator
from tabline.rules import MatcherKind
from tabline.tokens import Token, starts_with


class ClassNamesMatcher(AbstractMatcher):
    kinds = (MatcherKind.CLASS_NAME,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        typed = strip_leading_separator(self.class_path(tokens, scope))
        return [
            drop_typed_namespace(typed, class_name)
            for class_name in scope.catalog.list_classes()
            if starts_with(typed, class_name)
        ]
