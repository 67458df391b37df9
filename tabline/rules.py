# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
When does each kind of completion apply?

Every matcher decides applicability from the last few tokens only, with the
same rule shape. The rules for all matcher kinds live in one table, `RULES`,
so the exclusivity policy (e.g. only class names after `new`) reads in one
place. `applies()` evaluates a rule, first match wins:

1. Marker rules (`after`): accept iff the marker sequence (`::`, `->`, `$`,
   `name(`...) immediately precedes the word, the token before the marker is
   not in `not_after`, and the word is an identifier prefix.
2. Reject if the token before the word is in the rule's `blacklist`.
3. After an expression delimiter (`<?php`, `;`), accept iff the word is an
   identifier prefix, empty allowed per `allow_empty_at_start`.
4. Otherwise accept iff the word is an identifier prefix, empty allowed per
   `allow_empty`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from tabline.tokens import (
    T_DOUBLE_COLON,
    T_FUNCTION,
    T_INCLUDE,
    T_INCLUDE_ONCE,
    T_NEW,
    T_NS_SEPARATOR,
    T_NULLSAFE_OBJECT_OPERATOR,
    T_OBJECT_OPERATOR,
    T_OPEN_TAG,
    T_REQUIRE,
    T_REQUIRE_ONCE,
    T_STRING,
    Token,
    has_token,
    is_expression_delimiter,
    is_identifier_prefix,
    token_is,
)


class MatcherKind(str, Enum):
    CLASS_NAME = "class_name"
    CLASS_METHOD = "class_method"
    CLASS_ATTRIBUTE = "class_attribute"
    CLASS_STATIC_PROPERTY = "class_static_property"
    OBJECT_METHOD = "object_method"
    OBJECT_ATTRIBUTE = "object_attribute"
    NULLSAFE_OBJECT_MEMBER = "nullsafe_object_member"
    FUNCTION_NAME = "function_name"
    CONSTANT = "constant"
    KEYWORD = "keyword"
    COMMAND = "command"
    VARIABLE = "variable"
    FUNCTION_DEFAULT_PARAMETERS = "function_default_parameters"
    CLASS_METHOD_DEFAULT_PARAMETERS = "class_method_default_parameters"
    OBJECT_METHOD_DEFAULT_PARAMETERS = "object_method_default_parameters"


@dataclass(frozen=True)
class MatchRule:
    """
    Applicability rule for one matcher kind.

    Attributes:
        blacklist: Token kinds that, right before the word, rule it out.
        allow_empty: Whether an empty word is accepted mid-expression.
        allow_empty_at_start: Whether an empty word is accepted right after
            an expression delimiter.
        after: Marker token kinds that must immediately precede the word.
        not_after: Token kinds that must not come right before `after`.
        empty_word_only: With `after`, accept only when nothing is typed yet.
    """

    blacklist: frozenset[str] = frozenset()
    allow_empty: bool = True
    allow_empty_at_start: bool = True
    after: tuple[str, ...] = ()
    not_after: frozenset[str] = frozenset()
    empty_word_only: bool = False


MEMBER_OPERATORS = frozenset([T_OBJECT_OPERATOR, T_NULLSAFE_OBJECT_OPERATOR, T_DOUBLE_COLON])
FILE_INCLUSION = frozenset([T_INCLUDE, T_INCLUDE_ONCE, T_REQUIRE, T_REQUIRE_ONCE])

RULES: dict[MatcherKind, MatchRule] = {
    MatcherKind.CLASS_NAME: MatchRule(
        blacklist=FILE_INCLUSION | MEMBER_OPERATORS | {"$"},
    ),
    MatcherKind.FUNCTION_NAME: MatchRule(
        blacklist=MEMBER_OPERATORS | {T_NEW, "$"},
        allow_empty=False,
        allow_empty_at_start=False,
    ),
    MatcherKind.CONSTANT: MatchRule(
        blacklist=MEMBER_OPERATORS | {T_NEW, T_NS_SEPARATOR, "$"},
    ),
    MatcherKind.KEYWORD: MatchRule(
        blacklist=MEMBER_OPERATORS | {T_NEW, T_NS_SEPARATOR, "$"},
        allow_empty_at_start=False,
    ),
    MatcherKind.COMMAND: MatchRule(after=(T_OPEN_TAG,), allow_empty=False),
    MatcherKind.VARIABLE: MatchRule(after=("$",), not_after=frozenset([T_DOUBLE_COLON])),
    MatcherKind.CLASS_METHOD: MatchRule(after=(T_DOUBLE_COLON,)),
    MatcherKind.CLASS_ATTRIBUTE: MatchRule(after=(T_DOUBLE_COLON,)),
    MatcherKind.CLASS_STATIC_PROPERTY: MatchRule(after=(T_DOUBLE_COLON, "$")),
    MatcherKind.OBJECT_METHOD: MatchRule(after=(T_OBJECT_OPERATOR,)),
    MatcherKind.OBJECT_ATTRIBUTE: MatchRule(after=(T_OBJECT_OPERATOR,)),
    MatcherKind.NULLSAFE_OBJECT_MEMBER: MatchRule(after=(T_NULLSAFE_OBJECT_OPERATOR,)),
    MatcherKind.FUNCTION_DEFAULT_PARAMETERS: MatchRule(
        after=(T_STRING, "("),
        not_after=MEMBER_OPERATORS | {T_NEW, T_FUNCTION},
        empty_word_only=True,
    ),
    MatcherKind.CLASS_METHOD_DEFAULT_PARAMETERS: MatchRule(
        after=(T_DOUBLE_COLON, T_STRING, "("),
        empty_word_only=True,
    ),
    MatcherKind.OBJECT_METHOD_DEFAULT_PARAMETERS: MatchRule(
        after=(T_OBJECT_OPERATOR, T_STRING, "("),
        empty_word_only=True,
    ),
}


def _follows_marker(rule: MatchRule, tokens: Sequence[Token]) -> bool:
    width = len(rule.after)
    if len(tokens) < width + 1:
        return False
    marker = tokens[-1 - width : -1]
    if not all(token_is(token, which) for token, which in zip(marker, rule.after)):
        return False
    before = tokens[-2 - width] if len(tokens) > width + 1 else None
    return not has_token(rule.not_after, before)


def applies(rule: MatchRule, tokens: Sequence[Token]) -> bool:
    """Evaluate `rule` against a token suffix. Pure: looks at tokens only."""
    if not tokens:
        return False
    token = tokens[-1]
    prev_token = tokens[-2] if len(tokens) > 1 else None

    if rule.after:
        if not _follows_marker(rule, tokens):
            return False
        if rule.empty_word_only:
            return token.text == ""
        return is_identifier_prefix(token, rule.allow_empty)

    if has_token(rule.blacklist, prev_token):
        return False
    if prev_token is None or is_expression_delimiter(prev_token):
        return is_identifier_prefix(token, rule.allow_empty_at_start)
    return is_identifier_prefix(token, rule.allow_empty)
