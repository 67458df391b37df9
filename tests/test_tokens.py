from tabline.tokens import (
    EMPTY,
    T_NEW,
    T_OPEN_TAG,
    T_STRING,
    T_VARIABLE,
    Token,
    filter_prefix,
    has_syntax,
    has_token,
    is_command_name,
    is_expression_delimiter,
    is_identifier_prefix,
    is_operator,
    starts_with,
    token_is,
)


def test_token_kind_typed_and_literal():
    typed = Token(T_STRING, "foo")
    literal = Token.literal("(")
    assert typed.kind == T_STRING
    assert not typed.is_literal
    assert literal.kind == "("
    assert literal.is_literal
    assert str(literal) == "("


def test_token_is():
    assert token_is(Token(T_NEW, "new"), T_NEW)
    assert token_is(Token.literal("$"), "$")
    assert not token_is(Token.literal("$"), T_VARIABLE)
    assert not token_is(None, T_NEW)


def test_has_token_mixes_names_and_literals():
    collection = {T_NEW, "$"}
    assert has_token(collection, Token(T_NEW, "new"))
    assert has_token(collection, Token.literal("$"))
    assert not has_token(collection, Token(T_STRING, "new"))
    assert not has_token(collection, None)


def test_is_identifier_prefix():
    assert is_identifier_prefix(Token(T_STRING, "array_"))
    assert is_identifier_prefix(Token(T_STRING, "_private"))
    assert is_identifier_prefix(Token(T_STRING, "Ünïcode"))
    assert not is_identifier_prefix(Token(T_STRING, "1abc"))
    assert not is_identifier_prefix(Token.literal("("))
    assert not is_identifier_prefix(None)


def test_is_identifier_prefix_empty():
    assert not is_identifier_prefix(EMPTY)
    assert is_identifier_prefix(EMPTY, allow_empty=True)


def test_has_syntax_ignores_literals():
    assert has_syntax(Token(T_VARIABLE, "$foo"))
    assert not has_syntax(Token(T_VARIABLE, "foo"))
    assert not has_syntax(Token.literal("$"))


def test_is_expression_delimiter():
    assert is_expression_delimiter(Token(T_OPEN_TAG, "<?php "))
    assert is_expression_delimiter(Token.literal(";"))
    assert not is_expression_delimiter(Token.literal("("))
    assert not is_expression_delimiter(None)


def test_is_operator():
    for operator in "+-*/^|&":
        assert is_operator(Token.literal(operator))
    assert not is_operator(Token.literal("("))
    assert not is_operator(EMPTY)
    assert not is_operator(Token(T_STRING, "+"))


def test_starts_with_is_literal_and_case_sensitive():
    assert starts_with("arr", "array_map")
    assert starts_with("", "anything")
    assert not starts_with("Arr", "array_map")
    assert not starts_with("ray", "array_map")


def test_is_command_name():
    assert is_command_name(Token(T_STRING, "ls"))
    assert is_command_name(Token(T_STRING, "wtf"), ["wtf"])
    assert not is_command_name(Token(T_STRING, "wtf"))
    assert not is_command_name(Token.literal("ls"))


def test_filter_prefix():
    names = ["array_map", "array_merge", "in_array"]
    assert filter_prefix("array_m", names) == ["array_map", "array_merge"]
    assert filter_prefix("", names) == names
    assert filter_prefix("x", names) == []
