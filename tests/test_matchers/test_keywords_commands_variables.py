from tabline.completer import AutoCompleter
from tabline.matchers import CommandsMatcher, KeywordsMatcher, VariablesMatcher

tokenize = AutoCompleter(matchers=[]).tokenize


def matches(matcher, line, scope):
    tokens = tokenize(line)
    if not matcher.has_matched(tokens):
        return None
    return set(matcher.get_matches(tokens, scope))


def test_keywords(scope):
    assert matches(KeywordsMatcher(), "req", scope) == {"require", "require_once"}
    assert matches(KeywordsMatcher(), "e", scope) == {"echo", "empty", "eval", "exit"}


def test_keywords_not_for_empty_statement(scope):
    assert matches(KeywordsMatcher(), "", scope) is None
    assert matches(KeywordsMatcher(), "$x = 1; ", scope) is None


def test_keywords_mid_expression(scope):
    assert "isset" in matches(KeywordsMatcher(), "$x = ", scope)


def test_custom_keywords(scope):
    matcher = KeywordsMatcher(["fn", "match"])
    assert matcher.get_keywords() == ["fn", "match"]
    assert matcher.is_keyword("match")
    assert not matcher.is_keyword("echo")
    assert matches(matcher, "ma", scope) == {"match"}


def test_commands(scope):
    assert matches(CommandsMatcher(), "sho", scope) == {"show"}
    assert matches(CommandsMatcher(), "l", scope) == {"ls", "last-exception"}
    assert matches(CommandsMatcher(), "q", scope) == {"q", "quit"}


def test_commands_only_first_word(scope):
    assert matches(CommandsMatcher(), "ls ", scope) is None
    assert matches(CommandsMatcher(), "$x = sh", scope) is None
    assert matches(CommandsMatcher(), "", scope) is None


def test_variables(scope):
    assert matches(VariablesMatcher(), "$", scope) == {"foo", "bar", "sample", "ghost"}
    assert matches(VariablesMatcher(), "$b", scope) == {"bar"}
    assert matches(VariablesMatcher(), "6 + $b", scope) == {"bar"}
    assert matches(VariablesMatcher(), "12 + clone $", scope) == {
        "foo",
        "bar",
        "sample",
        "ghost",
    }


def test_variables_not_after_double_colon(scope):
    assert matches(VariablesMatcher(), "Foo::$", scope) is None
    assert matches(VariablesMatcher(), "foo", scope) is None
