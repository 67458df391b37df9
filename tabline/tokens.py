# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token model and the predicates every matcher shares.

A token is either *typed* (a PHP token name such as `T_STRING` plus its text)
or *literal* (a bare punctuation character such as `(` or `$`, identified by
its text). Both are compared through `Token.kind`: the name for typed tokens,
the text for literal ones. This lets rule tables mix `"T_NEW"` and `"$"` in a
single collection.

The empty literal token `EMPTY` marks a word boundary: the engine appends it
when the cursor sits right after whitespace or punctuation, so the last token
of a suffix is always the word being completed.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Collection, Iterable

T_OPEN_TAG = "T_OPEN_TAG"
T_INLINE_HTML = "T_INLINE_HTML"
T_WHITESPACE = "T_WHITESPACE"
T_COMMENT = "T_COMMENT"
T_VARIABLE = "T_VARIABLE"
T_STRING = "T_STRING"
T_LNUMBER = "T_LNUMBER"
T_DNUMBER = "T_DNUMBER"
T_CONSTANT_ENCAPSED_STRING = "T_CONSTANT_ENCAPSED_STRING"
T_ENCAPSED_AND_WHITESPACE = "T_ENCAPSED_AND_WHITESPACE"
T_OBJECT_OPERATOR = "T_OBJECT_OPERATOR"
T_NULLSAFE_OBJECT_OPERATOR = "T_NULLSAFE_OBJECT_OPERATOR"
T_DOUBLE_COLON = "T_DOUBLE_COLON"
T_NS_SEPARATOR = "T_NS_SEPARATOR"
T_DOUBLE_ARROW = "T_DOUBLE_ARROW"
T_NEW = "T_NEW"
T_CLONE = "T_CLONE"
T_FUNCTION = "T_FUNCTION"
T_INCLUDE = "T_INCLUDE"
T_INCLUDE_ONCE = "T_INCLUDE_ONCE"
T_REQUIRE = "T_REQUIRE"
T_REQUIRE_ONCE = "T_REQUIRE_ONCE"
T_AND_EQUAL = "T_AND_EQUAL"
T_BOOLEAN_AND = "T_BOOLEAN_AND"
T_BOOLEAN_OR = "T_BOOLEAN_OR"

IDENTIFIER_SYNTAX = re.compile(r"^[a-zA-Z_\x7f-\uffff][a-zA-Z0-9_\x7f-\uffff]*$")
VARIABLE_SYNTAX = re.compile(r"^\$[a-zA-Z_\x7f-\uffff][a-zA-Z0-9_\x7f-\uffff]*$")
MISC_OPERATORS = "+-*/^|&"

DEFAULT_COMMAND_NAMES: frozenset[str] = frozenset(["doc", "ls", "show", "completions"])


@dataclass(frozen=True)
class Token:
    """A single lexer token. `name` is `None` for literal tokens."""

    name: str | None
    text: str
    line: int = 1

    @classmethod
    def literal(cls, text: str, line: int = 1) -> Token:
        return cls(None, text, line)

    @property
    def is_literal(self) -> bool:
        return self.name is None

    @property
    def kind(self) -> str:
        return self.text if self.name is None else self.name

    def __str__(self) -> str:
        return self.text


EMPTY = Token.literal("")


def token_is(token: Token | None, which: str) -> bool:
    """
    Check whether `token` is of type `which`.

    `which` may be a token name (e.g. `T_VARIABLE`) or a literal token text
    (e.g. `"+"`).
    """
    if token is None:
        return False
    return token.kind == which


def has_token(collection: Collection[str], token: Token | None) -> bool:
    """Check whether the kind of `token` is present in `collection`."""
    if token is None:
        return False
    return token.kind in collection


def has_syntax(token: Token | None, syntax: re.Pattern = VARIABLE_SYNTAX) -> bool:
    """Check whether a typed token's text matches a syntax pattern."""
    if token is None or token.is_literal:
        return False
    return bool(syntax.match(token.text))


def is_identifier_prefix(token: Token | None, allow_empty: bool = False) -> bool:
    """Check whether `token` is a valid prefix for a PHP identifier."""
    if token is not None and token.text == "":
        return allow_empty
    return has_syntax(token, IDENTIFIER_SYNTAX)


def is_expression_delimiter(token: Token | None) -> bool:
    """
    Check whether `token` separates PHP expressions, meaning that whatever
    follows it is a new expression. Separators are the opening tag and `;`.
    """
    return token_is(token, ";") or token_is(token, T_OPEN_TAG)


def is_operator(token: Token | None) -> bool:
    if token is None or not token.is_literal or token.text == "":
        return False
    return token.text in MISC_OPERATORS


def starts_with(prefix: str, word: str) -> bool:
    """Literal, case-sensitive prefix test."""
    return word.startswith(prefix)


def is_command_name(
    token: Token | None, commands: Iterable[str] = DEFAULT_COMMAND_NAMES
) -> bool:
    """
    Check whether `token` names a shell command.

    Used both to test the first word of the line and to keep command names
    from being folded into a qualified class path, which would otherwise
    happen because whitespace tokens are dropped before matching.
    """
    if token is None or token.is_literal:
        return False
    return token.text in commands


def filter_prefix(prefix: str, names: Iterable[str]) -> list[str]:
    return [name for name in names if starts_with(prefix, name)]
