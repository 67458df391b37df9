import json
import logging
from pathlib import Path

import pytest

from tabline.__main__ import bind_assignment, build_auto_completer, get_parser, main
from tabline.context import Context, ObjectValue


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Run every test from an empty directory with no logging side effects."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv("TABLINE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    calls = []
    monkeypatch.setattr(
        "tabline.__main__.setup_logging", lambda **kwargs: calls.append(kwargs)
    )
    return calls


def test_get_parser():
    """Test that both subcommands and the global options are available."""
    parser = get_parser()
    args = parser.parse_args(["--config", "x.yaml", "-v", "complete", "array_", "--cursor", "3"])
    assert args.config == Path("x.yaml")
    assert args.verbose
    assert args.command == "complete"
    assert args.line == "array_"
    assert args.cursor == 3
    assert parser.parse_args(["shell"]).command == "shell"


def test_build_auto_completer_without_config():
    """Without a config file the built-in catalog is used."""
    auto_completer = build_auto_completer(None)
    assert "stdClass" in auto_completer.complete("new s")


def test_build_auto_completer_discovers_config(tmp_path):
    (tmp_path / "tabline.yaml").write_text(
        "include_builtins: false\nclasses: [{name: Widget}]\n", encoding="UTF-8"
    )
    auto_completer = build_auto_completer(None)
    assert auto_completer.complete("new ") == {"Widget"}


def test_main_complete_json(capsys):
    """Test that `complete --json` prints the sorted candidates."""
    assert main(["complete", "array_m", "--json"]) == 0
    candidates = json.loads(capsys.readouterr().out)
    assert candidates == sorted(candidates)
    assert {"array_map", "array_merge"} <= set(candidates)


def test_main_complete_columns(capsys):
    main(["complete", "Foo::", "--json"])
    assert json.loads(capsys.readouterr().out) == []
    main(["complete", "T_OPE"])
    out = capsys.readouterr().out
    assert "T_OPEN_TAG" in out


def test_main_complete_keeps_brackets_in_hints(tmp_path, capsys):
    """Default-parameter hints print literally, not as rich markup."""
    config = tmp_path / "flags.yaml"
    config.write_text(
        "include_builtins: false\n"
        "functions: [{name: flags, parameters: [{name: opts, default: [true, false]}]}]\n",
        encoding="UTF-8",
    )
    main(["--config", str(config), "complete", "flags("])
    assert "$opts = [true, false])" in capsys.readouterr().out


def test_main_no_completions(capsys):
    main(["complete", "zzz_nothing"])
    assert "No completions." in capsys.readouterr().out


def test_main_with_config(tmp_path, capsys):
    config = tmp_path / "custom.toml"
    config.write_text('functions = ["zz_custom"]\n', encoding="UTF-8")
    main(["--config", str(config), "complete", "zz_", "--json"])
    assert json.loads(capsys.readouterr().out) == ["zz_custom"]


def test_main_bad_config_exits(tmp_path, capsys):
    """A broken config file is reported and exits with status 1."""
    config = tmp_path / "broken.yaml"
    config.write_text("- not a mapping\n", encoding="UTF-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(config), "complete", "x"])
    assert exc_info.value.code == 1
    assert "must contain a mapping" in capsys.readouterr().out


def test_main_logging_options(isolated):
    main(["--log-mode", "json", "-v", "complete", "x", "--json"])
    assert isolated[-1]["mode"] == "json"
    assert isolated[-1]["console_log_level"] == logging.DEBUG
    main(["complete", "x", "--json"])
    assert isolated[-1]["mode"] is None
    assert isolated[-1]["console_log_level"] == logging.WARNING


def test_main_without_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: tabline" in capsys.readouterr().out


def test_bind_assignment_objects():
    context = Context()
    assert bind_assignment(context, "$doc = new \\DOMDocument;") == (
        "doc",
        ObjectValue(class_name="DOMDocument"),
    )
    assert context.get("doc").class_name == "DOMDocument"


def test_bind_assignment_scalars():
    context = Context()
    assert bind_assignment(context, "$n = 12") == ("n", 12)
    assert bind_assignment(context, "$s = 'hi';") == ("s", "hi")
    assert bind_assignment(context, "$l = [1, 2]") == ("l", [1, 2])
    assert bind_assignment(context, "$nothing = null") == ("nothing", None)
    assert "nothing" in context


def test_bind_assignment_ignores_other_lines():
    context = Context()
    assert bind_assignment(context, "echo $x") is None
    assert bind_assignment(context, "$x == 1") is None
    assert context.names() == []
