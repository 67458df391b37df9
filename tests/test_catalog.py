import pytest

from tabline.catalog import (
    ClassDescriptor,
    FunctionDescriptor,
    Member,
    MemberKind,
    Parameter,
    SymbolTable,
    default_parameter_signature,
    value_to_short_string,
)
from tabline.exceptions import CatalogError, UnknownSymbolError


def test_value_to_short_string():
    assert value_to_short_string(None) == "null"
    assert value_to_short_string(True) == "true"
    assert value_to_short_string(512) == "512"
    assert value_to_short_string("x") == '"x"'
    assert value_to_short_string([1, "a"]) == '[1, "a"]'
    assert value_to_short_string({"k": [1, 2]}) == '["k" => [1, 2]]'


def test_parameter_detects_default():
    assert Parameter(name="flags", default=0).has_default
    assert Parameter(name="flags", default=None).has_default
    assert not Parameter(name="flags").has_default


def test_default_parameter_signature():
    parameters = [Parameter(name="depth", default=512), Parameter(name="flags", default=0)]
    assert default_parameter_signature(parameters) == "$depth = 512, $flags = 0)"


def test_default_parameter_signature_requires_all_defaults():
    parameters = [Parameter(name="json"), Parameter(name="depth", default=512)]
    assert default_parameter_signature(parameters) is None
    assert default_parameter_signature([]) is None


def test_descriptor_accepts_shorthand_members():
    descriptor = ClassDescriptor.model_validate(
        {
            "name": "\\App\\User",
            "methods": ["save", {"name": "find", "static": True, "parameters": ["id"]}],
            "properties": ["email"],
            "constants": {"TABLE": "users"},
        }
    )
    assert descriptor.name == "App\\User"
    assert descriptor.short_name == "User"
    assert [method.name for method in descriptor.get_methods(static_only=True)] == ["find"]
    assert descriptor.properties[0].kind is MemberKind.PROPERTY
    constant = descriptor.constants[0]
    assert constant.kind is MemberKind.CONSTANT
    assert constant.static
    assert constant.value == "users"
    assert descriptor.get_method("FIND").parameters[0].name == "id"


def test_static_and_instance_members():
    descriptor = ClassDescriptor(
        name="Foo",
        methods=[Member(name="make", static=True), Member(name="run")],
        constants=[Member(name="BAR")],
    )
    assert {member.name for member in descriptor.static_members()} == {"make", "BAR"}
    assert {member.name for member in descriptor.instance_members()} == {"run"}


def test_member_default_signature_only_for_methods():
    method = Member(name="save", parameters=[{"name": "force", "default": False}])
    prop = Member(name="save", kind=MemberKind.PROPERTY)
    assert method.default_signature == "$force = false)"
    assert prop.default_signature is None


def test_function_descriptor():
    function = FunctionDescriptor(name="\\Psy\\sh", parameters=["a"])
    assert function.name == "Psy\\sh"
    assert function.default_signature is None


def test_with_builtins():
    table = SymbolTable.with_builtins()
    assert "stdClass" in table.list_classes()
    assert "array_search" in table.list_functions()
    assert "T_OPEN_TAG" in table.list_constants()
    assert table.constant_value("PHP_INT_SIZE") == 8


def test_resolve_class_is_case_insensitive():
    table = SymbolTable([ClassDescriptor(name="Psy\\Context")])
    assert table.resolve_class("psy\\context").name == "Psy\\Context"
    assert table.resolve_class("\\Psy\\Context").name == "Psy\\Context"
    assert table.resolve_class("Psy\\Nope") is None
    assert "\\psy\\CONTEXT" in table


def test_resolve_class_merges_parents():
    table = SymbolTable.with_builtins()
    descriptor = table.resolve_class("DOMDocument")
    names = {method.name for method in descriptor.methods}
    assert {"load", "appendChild"} <= names
    assert "nodeName" in {prop.name for prop in descriptor.properties}
    # Resolving again does not accumulate inherited members.
    assert len(table.resolve_class("DOMDocument").methods) == len(descriptor.methods)
    assert "load" not in {method.name for method in table.get_class("DOMNode").methods}


def test_resolve_class_own_members_win():
    table = SymbolTable(
        [
            ClassDescriptor(name="Base", methods=[Member(name="run", static=True)]),
            ClassDescriptor(name="Child", parent="Base", methods=[Member(name="run")]),
        ]
    )
    methods = table.resolve_class("Child").methods
    assert len(methods) == 1
    assert not methods[0].static


def test_resolve_class_survives_inheritance_cycles():
    table = SymbolTable(
        [
            ClassDescriptor(name="A", parent="B", methods=["a"]),
            ClassDescriptor(name="B", parent="A", methods=["b"]),
        ]
    )
    assert {method.name for method in table.resolve_class("A").methods} == {"a", "b"}


def test_resolve_class_with_undeclared_parent():
    table = SymbolTable([ClassDescriptor(name="A", parent="Missing", methods=["a"])])
    assert [method.name for method in table.resolve_class("A").methods] == ["a"]


def test_get_class_raises_for_unknown():
    table = SymbolTable()
    with pytest.raises(UnknownSymbolError) as excinfo:
        table.get_class("Nope")
    assert isinstance(excinfo.value, CatalogError)
    assert excinfo.value.kind == "class"
    assert excinfo.value.name == "Nope"


def test_functions_resolve_case_insensitively():
    table = SymbolTable(functions=[FunctionDescriptor(name="array_map")])
    assert table.resolve_function("ARRAY_MAP").name == "array_map"
    assert table.resolve_function("nope") is None
    with pytest.raises(UnknownSymbolError):
        table.get_function("nope")


def test_constants_are_case_sensitive():
    table = SymbolTable(constants={"PHP_EOL": "\n"})
    assert table.list_constants() == ["PHP_EOL"]
    with pytest.raises(KeyError):
        table.constant_value("php_eol")
