# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
A small PHP tokenizer producing `Token` streams shaped like PHP's own
`token_get_all()` output.

It only needs to be faithful for the tokens completion cares about:
names, variables, keywords, namespace separators, member operators and the
opening tag. Everything else is recognised coarsely (numbers, strings,
comments) or falls through as a single-character literal token. It never
raises: an unterminated string or comment at the end of the line becomes a
best-effort token and lexing carries on.
"""
from __future__ import annotations

import re

from tabline.tokens import (
    T_COMMENT,
    T_CONSTANT_ENCAPSED_STRING,
    T_DNUMBER,
    T_ENCAPSED_AND_WHITESPACE,
    T_INLINE_HTML,
    T_LNUMBER,
    T_OPEN_TAG,
    T_STRING,
    T_VARIABLE,
    T_WHITESPACE,
    Token,
)

OPEN_TAG = "<?php "

KEYWORDS = [
    "abstract", "array", "as", "break", "callable", "case", "catch", "class",
    "clone", "const", "continue", "declare", "default", "do", "echo", "else",
    "elseif", "empty", "enddeclare", "endfor", "endforeach", "endif",
    "endswitch", "endwhile", "eval", "exit", "extends", "final", "finally",
    "fn", "for", "foreach", "function", "global", "goto", "if", "implements",
    "include", "include_once", "instanceof", "insteadof", "interface", "isset",
    "list", "match", "namespace", "new", "print", "private", "protected",
    "public", "readonly", "require", "require_once", "return", "static",
    "switch", "throw", "trait", "try", "unset", "use", "var", "while", "yield",
]

KEYWORD_TOKENS: dict[str, str] = {word: f"T_{word.upper()}" for word in KEYWORDS}
KEYWORD_TOKENS.update(
    {
        "die": "T_EXIT",
        "and": "T_LOGICAL_AND",
        "or": "T_LOGICAL_OR",
        "xor": "T_LOGICAL_XOR",
    }
)

# Longest operators first so that `===` wins over `==`.
OPERATOR_TOKENS: dict[str, str] = {
    "<<=": "T_SL_EQUAL",
    ">>=": "T_SR_EQUAL",
    "**=": "T_POW_EQUAL",
    "??=": "T_COALESCE_EQUAL",
    "===": "T_IS_IDENTICAL",
    "!==": "T_IS_NOT_IDENTICAL",
    "<=>": "T_SPACESHIP",
    "?->": "T_NULLSAFE_OBJECT_OPERATOR",
    "...": "T_ELLIPSIS",
    "->": "T_OBJECT_OPERATOR",
    "::": "T_DOUBLE_COLON",
    "=>": "T_DOUBLE_ARROW",
    "==": "T_IS_EQUAL",
    "!=": "T_IS_NOT_EQUAL",
    "<>": "T_IS_NOT_EQUAL",
    "<=": "T_IS_SMALLER_OR_EQUAL",
    ">=": "T_IS_GREATER_OR_EQUAL",
    "&&": "T_BOOLEAN_AND",
    "||": "T_BOOLEAN_OR",
    "++": "T_INC",
    "--": "T_DEC",
    "+=": "T_PLUS_EQUAL",
    "-=": "T_MINUS_EQUAL",
    "*=": "T_MUL_EQUAL",
    "/=": "T_DIV_EQUAL",
    ".=": "T_CONCAT_EQUAL",
    "%=": "T_MOD_EQUAL",
    "&=": "T_AND_EQUAL",
    "|=": "T_OR_EQUAL",
    "^=": "T_XOR_EQUAL",
    "**": "T_POW",
    "??": "T_COALESCE",
    "<<": "T_SL",
    ">>": "T_SR",
    "\\": "T_NS_SEPARATOR",
}

_NAME = r"[a-zA-Z_\x7f-\uffff][a-zA-Z0-9_\x7f-\uffff]*"

_PATTERNS: list[tuple[str, re.Pattern]] = [
    (T_WHITESPACE, re.compile(r"\s+")),
    (T_COMMENT, re.compile(r"(?://|#)[^\n]*|/\*.*?(?:\*/|\Z)", re.DOTALL)),
    (T_VARIABLE, re.compile(rf"\${_NAME}")),
    (T_STRING, re.compile(_NAME)),
    (T_DNUMBER, re.compile(r"(?:\d+\.\d*|\.\d+)(?:[eE][+-]?\d+)?|\d+[eE][+-]?\d+")),
    (T_LNUMBER, re.compile(r"0[xX][0-9a-fA-F_]+|0[bB][01_]+|\d[\d_]*")),
    (T_CONSTANT_ENCAPSED_STRING, re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"")),
    (T_ENCAPSED_AND_WHITESPACE, re.compile(r"['\"].*\Z", re.DOTALL)),
]


def _in_qualified_name(source: str, start: int, end: int) -> bool:
    """Reserved words are plain names as segments of `Foo\\List\\Bar`."""
    return source[start - 1 : start] == "\\" or source[end : end + 1] == "\\"


def _match_operator(source: str, position: int) -> tuple[str, str] | None:
    for text, name in OPERATOR_TOKENS.items():
        if source.startswith(text, position):
            return name, text
    return None


def tokenize(source: str) -> list[Token]:
    """
    Split PHP source into tokens.

    Text before an opening `<?php` tag is inline HTML, as in PHP. The opening
    tag token includes the single whitespace character that follows it.
    """
    tokens: list[Token] = []
    line = 1
    position = 0

    if not source.startswith("<?php"):
        return [Token(T_INLINE_HTML, source)] if source else []

    tag_end = 5
    if len(source) > tag_end and source[tag_end] in " \t\n":
        tag_end += 1
    tokens.append(Token(T_OPEN_TAG, source[:tag_end], line))
    line += source[:tag_end].count("\n")
    position = tag_end

    while position < len(source):
        token = _next_token(source, position, line)
        tokens.append(token)
        position += len(token.text)
        line += token.text.count("\n")

    return tokens


def _next_token(source: str, position: int, line: int) -> Token:
    operator = _match_operator(source, position)
    if operator:
        return Token(operator[0], operator[1], line)

    for name, pattern in _PATTERNS:
        match = pattern.match(source, position)
        if not match:
            continue
        text = match.group(0)
        if name == T_STRING and not _in_qualified_name(source, position, match.end()):
            name = KEYWORD_TOKENS.get(text.lower(), T_STRING)
        return Token(name, text, line)

    return Token.literal(source[position], line)
