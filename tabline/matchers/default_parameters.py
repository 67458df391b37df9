# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Default parameter tab completion matchers.

Right after the opening parenthesis of a call whose parameters all have
default values, these offer a single hint spelling the defaults out and
closing the call:

    json_decode(   ->   $associative = null, $depth = 512, $flags = 0)

only when every parameter is optional; see `default_parameter_signature`.
"""
from __future__ import annotations

from typing import Sequence

from tabline.catalog import ClassDescriptor
from tabline.exceptions import MatcherError
from tabline.matchers.base import AbstractMatcher, CompletionScope
from tabline.matchers.object_members import ObjectMembersMatcher
from tabline.rules import MatcherKind
from tabline.tokens import T_STRING, Token, token_is


def _method_name(tokens: Sequence[Token]) -> str:
    if len(tokens) < 4 or not token_is(tokens[-3], T_STRING):
        raise MatcherError(f"Expected a method name before '(', got {tokens[-3:]!r}")
    return tokens[-3].text


def _method_signature(descriptor: ClassDescriptor | None, name: str) -> list[str]:
    if descriptor is None:
        return []
    method = descriptor.get_method(name)
    if method is None or method.default_signature is None:
        return []
    return [method.default_signature]


class FunctionDefaultParametersMatcher(AbstractMatcher):
    """`func(`: tokens end in the function name, `(` and the empty word."""

    kinds = (MatcherKind.FUNCTION_DEFAULT_PARAMETERS,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        function = scope.catalog.resolve_function(self.class_path(tokens[:-2], scope))
        if function is None or function.default_signature is None:
            return []
        return [function.default_signature]


class ClassMethodDefaultParametersMatcher(AbstractMatcher):
    """`Foo::method(`"""

    kinds = (MatcherKind.CLASS_METHOD_DEFAULT_PARAMETERS,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        method_name = _method_name(tokens)
        class_path = self.class_path(tokens[:-4], scope)
        return _method_signature(scope.catalog.resolve_class(class_path), method_name)


class ObjectMethodDefaultParametersMatcher(ObjectMembersMatcher):
    """`$foo->method(`"""

    kinds = (MatcherKind.OBJECT_METHOD_DEFAULT_PARAMETERS,)

    def get_matches(self, tokens: Sequence[Token], scope: CompletionScope) -> list[str]:
        method_name = _method_name(tokens)
        # Same shape as `$foo->` once the method name, `(` and word are dropped.
        found = self.get_object(tokens[:-2], scope)
        if found is None:
            return []
        return _method_signature(found[1], method_name)
