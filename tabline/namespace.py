# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Qualified-name resolution over a token suffix.

`namespace_and_class()` walks backwards over name and `\\` tokens to rebuild
the path typed so far (`Foo\\Bar`), stopping at the first other token or at
a shell command name. Command names are lexically valid identifiers, and
once whitespace is dropped `show Foo` looks like the two-part name `showFoo`;
the command check keeps them apart.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from tabline.tokens import (
    DEFAULT_COMMAND_NAMES,
    T_NS_SEPARATOR,
    T_STRING,
    Token,
    has_token,
    is_command_name,
    is_identifier_prefix,
)

NS_SEPARATOR = "\\"
PATH_TOKENS = frozenset([T_NS_SEPARATOR, T_STRING])


def namespace_and_class(
    tokens: Sequence[Token], commands: Iterable[str] = DEFAULT_COMMAND_NAMES
) -> str:
    """
    Get the namespace and class (if any) ending at the last of `tokens`.

    Args:
        tokens (Sequence[Token]): Token suffix, already cut so that its last
            token is the final segment of the path.
        commands (Iterable[str]): Shell command names that end the path.

    Returns:
        str: The qualified path, or "" if the last token cannot end one.
    """
    if not tokens:
        return ""
    commands = frozenset(commands)

    remaining = list(tokens)
    token = remaining.pop()
    if not has_token(PATH_TOKENS, token) and not is_identifier_prefix(token, True):
        return ""
    path = token.text

    while remaining:
        token = remaining.pop()
        if not has_token(PATH_TOKENS, token) or is_command_name(token, commands):
            break
        path = token.text + path

    return path


def strip_leading_separator(path: str) -> str:
    """Drop the leading `\\` of a fully qualified name."""
    return path[1:] if path.startswith(NS_SEPARATOR) else path


def split_class_name(path: str) -> tuple[str, str]:
    """Split `Foo\\Bar\\Baz` into (`Foo\\Bar`, `Baz`)."""
    namespace, _, short_name = strip_leading_separator(path).rpartition(NS_SEPARATOR)
    return namespace, short_name


def short_name(path: str) -> str:
    return split_class_name(path)[1]


def drop_typed_namespace(typed_path: str, qualified_name: str) -> str:
    """
    Remove from `qualified_name` the namespace segments already typed.

    The line editor breaks words at `\\`, so after `Psy\\C` the word being
    completed is `C` and a candidate for `Psy\\Context` must be `Context`.
    """
    depth = strip_leading_separator(typed_path).count(NS_SEPARATOR)
    return NS_SEPARATOR.join(qualified_name.split(NS_SEPARATOR)[depth:])
