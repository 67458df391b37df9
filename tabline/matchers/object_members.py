# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Object member tab completion matchers, for input following `$variable->`.

The variable must be bound in the shell's context to an `ObjectValue`; its
class is then looked up in the symbol catalog. Unbound variables, scalars and
unknown classes produce no candidates.
"""
from __future__ import annotations

from typing import Sequence

from tabline.catalog import ClassDescriptor
from tabline.context import ObjectValue
from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.rules import MatcherKind
from tabline.tokens import T_VARIABLE, Token, starts_with, token_is


class ObjectMembersMatcher(AbstractMatcher):
    """Shared lookup of the object a member operator is applied to."""

    kinds = (MatcherKind.OBJECT_METHOD, MatcherKind.NULLSAFE_OBJECT_MEMBER)

    def get_object(
        self, tokens: Sequence[Token], scope: CompletionScope
    ) -> tuple[ObjectValue, ClassDescriptor | None] | None:
        # `$foo->ba` is `$foo`, `->`, `ba`.
        if len(tokens) < 3 or not token_is(tokens[-3], T_VARIABLE):
            return None
        try:
            value = scope.variables.value_of(tokens[-3].text[1:])
        except KeyError:
            return None
        if not isinstance(value, ObjectValue):
            return None
        return value, scope.catalog.resolve_class(value.class_name)


class ObjectMethodsMatcher(ObjectMembersMatcher):
    """Completes public method names, hiding magic methods (`__construct`...)."""

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        found = self.get_object(tokens, scope)
        if word is None or found is None:
            return []
        _, descriptor = found
        if descriptor is None:
            return []
        return [
            method.name
            for method in descriptor.get_methods()
            if method.is_public
            and starts_with(word, method.name)
            and not starts_with("__", method.name)
        ]


class ObjectAttributesMatcher(ObjectMembersMatcher):
    """Completes declared public properties and dynamic properties of the object."""

    kinds = (MatcherKind.OBJECT_ATTRIBUTE, MatcherKind.NULLSAFE_OBJECT_MEMBER)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        word = self.get_input(tokens)
        found = self.get_object(tokens, scope)
        if word is None or found is None:
            return []
        value, descriptor = found

        names = list(value.properties)
        if descriptor is not None:
            names.extend(
                prop.name
                for prop in descriptor.get_properties()
                if prop.is_public and not prop.static
            )
        return [name for name in names if starts_with(word, name)]
