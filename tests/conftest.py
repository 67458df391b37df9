import pytest

from tabline.catalog import ClassDescriptor, FunctionDescriptor, SymbolTable
from tabline.commands import CommandRegistry
from tabline.completer import AutoCompleter
from tabline.context import Context, ObjectValue
from tabline.matchers import CompletionScope

SAMPLE_MEMBERS = {
    "constants": {"CONSTANT_VALUE": 12},
    "properties": [
        {"name": "staticVariable", "static": True},
        "publicVariable",
        {"name": "hiddenVariable", "visibility": "private"},
    ],
    "methods": [
        {"name": "staticFunction", "static": True},
        {
            "name": "withDefaults",
            "static": True,
            "parameters": [{"name": "a", "default": 1}, {"name": "b", "default": "x"}],
        },
        "instanceFunction",
        "__construct",
    ],
}


@pytest.fixture
def catalog():
    table = SymbolTable.with_builtins()
    table.add_class(ClassDescriptor(name="Psy\\Context"))
    table.add_class(ClassDescriptor(name="Psy\\Configuration"))
    table.add_class(ClassDescriptor(name="Psy\\TabCompletion\\Matcher\\AbstractMatcher"))
    table.add_class(ClassDescriptor.model_validate({"name": "Foo", **SAMPLE_MEMBERS}))
    table.add_class(
        ClassDescriptor.model_validate(
            {"name": "Psy\\Test\\TabCompletion\\StaticSample", **SAMPLE_MEMBERS}
        )
    )
    table.add_function(FunctionDescriptor(name="Psy\\sh"))
    table.add_function(FunctionDescriptor(name="Psy\\debug"))
    return table


@pytest.fixture
def context():
    return Context(
        {
            "foo": 1,
            "bar": ObjectValue(class_name="DOMDocument"),
            "sample": ObjectValue(class_name="Foo", properties={"dynamicProp": True}),
            "ghost": ObjectValue(class_name="Does\\Not\\Exist"),
        }
    )


@pytest.fixture
def commands():
    return CommandRegistry()


@pytest.fixture
def scope(catalog, context, commands):
    return CompletionScope(catalog=catalog, variables=context, commands=commands)


@pytest.fixture
def auto_completer(catalog, context, commands):
    return AutoCompleter.default(catalog, context, commands)
