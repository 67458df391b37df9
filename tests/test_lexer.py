from tabline.lexer import OPEN_TAG, tokenize
from tabline.tokens import (
    T_CLONE,
    T_CONSTANT_ENCAPSED_STRING,
    T_DNUMBER,
    T_DOUBLE_COLON,
    T_ENCAPSED_AND_WHITESPACE,
    T_INLINE_HTML,
    T_LNUMBER,
    T_NEW,
    T_NS_SEPARATOR,
    T_NULLSAFE_OBJECT_OPERATOR,
    T_OBJECT_OPERATOR,
    T_OPEN_TAG,
    T_STRING,
    T_VARIABLE,
    T_WHITESPACE,
)


def kinds(source):
    return [token.kind for token in tokenize(source)]


def test_open_tag_includes_one_whitespace():
    tokens = tokenize(OPEN_TAG)
    assert len(tokens) == 1
    assert tokens[0].name == T_OPEN_TAG
    assert tokens[0].text == "<?php "


def test_inline_html_without_open_tag():
    tokens = tokenize("hello")
    assert [token.name for token in tokens] == [T_INLINE_HTML]
    assert tokenize("") == []


def test_object_access():
    assert kinds("<?php $foo->bar") == [T_OPEN_TAG, T_VARIABLE, T_OBJECT_OPERATOR, T_STRING]
    assert kinds("<?php $foo?->bar") == [
        T_OPEN_TAG,
        T_VARIABLE,
        T_NULLSAFE_OBJECT_OPERATOR,
        T_STRING,
    ]


def test_static_access():
    tokens = tokenize("<?php Foo::CO")
    assert [token.kind for token in tokens] == [T_OPEN_TAG, T_STRING, T_DOUBLE_COLON, T_STRING]
    assert tokens[-1].text == "CO"


def test_namespaced_name():
    assert kinds("<?php new Psy\\C") == [
        T_OPEN_TAG,
        T_NEW,
        T_WHITESPACE,
        T_STRING,
        T_NS_SEPARATOR,
        T_STRING,
    ]


def test_keywords_are_case_insensitive():
    assert kinds("<?php NEW Foo")[1] == T_NEW
    assert kinds("<?php Clone $x")[1] == T_CLONE


def test_identifier_starting_with_keyword_is_a_name():
    tokens = tokenize("<?php array_")
    assert tokens[-1].name == T_STRING
    assert tokens[-1].text == "array_"


def test_numbers_and_literal_operators():
    assert kinds("<?php 12 + 3.5") == [
        T_OPEN_TAG,
        T_LNUMBER,
        T_WHITESPACE,
        "+",
        T_WHITESPACE,
        T_DNUMBER,
    ]


def test_lone_dollar_is_literal():
    tokens = tokenize("<?php clone $")
    assert tokens[-1].is_literal
    assert tokens[-1].text == "$"


def test_strings():
    assert kinds("<?php 'abc'")[-1] == T_CONSTANT_ENCAPSED_STRING
    assert kinds('<?php "a\\"b"')[-1] == T_CONSTANT_ENCAPSED_STRING


def test_unterminated_string_does_not_raise():
    tokens = tokenize("<?php echo 'abc")
    assert tokens[-1].name == T_ENCAPSED_AND_WHITESPACE
    assert tokens[-1].text == "'abc"


def test_tokens_cover_source():
    source = "<?php $a = array_map(fn($x) => $x * 2, [1, 2]); // done"
    assert "".join(token.text for token in tokenize(source)) == source


def test_line_numbers():
    tokens = tokenize("<?php\n$a;\n$b")
    assert tokens[-1].text == "$b"
    assert tokens[-1].line == 3


def test_reserved_words_inside_qualified_names():
    assert kinds("<?php new App\\List\\I") == [
        T_OPEN_TAG,
        T_NEW,
        T_WHITESPACE,
        T_STRING,
        T_NS_SEPARATOR,
        T_STRING,
        T_NS_SEPARATOR,
        T_STRING,
    ]
    assert kinds("<?php Match\\Foo")[1] == T_STRING
    assert kinds("<?php list($a)")[1] != T_STRING
