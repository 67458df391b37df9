# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Class member tab completion matchers, for input following `ClassName::`.

Outside of a command these complete static members only. As the argument of a
shell command (`doc Foo::`, `show Foo::`) every member is offered, since the
command inspects the member rather than calling it.

The line editor does not break words at `:`, so the word it replaces includes
the `ClassName::` text already typed, and every candidate must carry it too.
Only the class's short name is repeated: `\\` does break words.
"""
from __future__ import annotations

from typing import Sequence

from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.namespace import short_name
from tabline.rules import RULES, MatcherKind, applies
from tabline.tokens import Token, starts_with


class ClassMethodsMatcher(AbstractMatcher):
    """Completes `Foo::method` names."""

    kinds = (MatcherKind.CLASS_METHOD,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        if word is None:
            return []

        # Drop the word and the `::` operator.
        class_path = self.class_path(tokens[:-2], scope)
        descriptor = scope.catalog.resolve_class(class_path)
        if descriptor is None:
            return []

        static_only = not self.in_command_argument(tokens, scope)
        class_name = short_name(class_path)
        return [
            f"{class_name}::{method.name}"
            for method in descriptor.get_methods(static_only=static_only)
            if starts_with(word, method.name)
        ]


class ClassAttributesMatcher(AbstractMatcher):
    """Completes `Foo::CONSTANT` and `Foo::$property` names."""

    kinds = (MatcherKind.CLASS_ATTRIBUTE, MatcherKind.CLASS_STATIC_PROPERTY)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        if word is None:
            return []

        if applies(RULES[MatcherKind.CLASS_STATIC_PROPERTY], tokens):
            # `Foo::$na` splits into `Foo`, `::`, `$`, `na`.
            word = "$" + word
            class_tokens = tokens[:-3]
        else:
            class_tokens = tokens[:-2]

        class_path = self.class_path(class_tokens, scope)
        descriptor = scope.catalog.resolve_class(class_path)
        if descriptor is None:
            return []

        static_only = not self.in_command_argument(tokens, scope)
        names = [f"${prop.name}" for prop in descriptor.get_properties(static_only)]
        names.extend(constant.name for constant in descriptor.constants)

        class_name = short_name(class_path)
        return [f"{class_name}::{name}" for name in names if starts_with(word, name)]
