# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Symbol catalog models and the in-memory `SymbolTable`.

The catalog is the completion engine's view of the running PHP shell: which
classes, functions and constants are declared, and what members each class
has. Descriptors are pydantic models so that they can be declared in YAML or
TOML configuration as well as built in code.

Name resolution follows PHP: class and function names resolve
case-insensitively and ignore a leading `\\`, constants are case-sensitive.
Listing and prefix filtering stay literal; see `tabline.tokens.starts_with`.
"""
from __future__ import annotations

import json
from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator, model_validator

from tabline.exceptions import UnknownSymbolError
from tabline.logger import logger
from tabline.namespace import short_name, strip_leading_separator


class MemberKind(str, Enum):
    METHOD = "method"
    PROPERTY = "property"
    CONSTANT = "constant"


class Visibility(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


def value_to_short_string(value: Any) -> str:
    """
    Render a default value the way PHP code would spell it, compactly.

    Scalars are JSON-encoded (`"a"`, `1`, `true`, `null`). Lists become
    `[a, b]`; mappings become `[k => v]`.
    """
    if isinstance(value, dict):
        chunks = [
            f"{value_to_short_string(key)} => {value_to_short_string(item)}"
            for key, item in value.items()
        ]
        return f"[{', '.join(chunks)}]"
    if isinstance(value, (list, tuple)):
        return f"[{', '.join(value_to_short_string(item) for item in value)}]"
    return json.dumps(value)


class Parameter(BaseModel):
    """A function or method parameter. `has_default` is set whenever a default is given."""

    name: str
    default: Any = None
    has_default: bool = False

    @model_validator(mode="before")
    @classmethod
    def detect_default(cls, data: Any) -> Any:
        if isinstance(data, dict) and "default" in data and "has_default" not in data:
            return {**data, "has_default": True}
        return data


def default_parameter_signature(parameters: Iterable[Parameter]) -> str | None:
    """
    Build the completion hint for a call whose parameters all have defaults,
    e.g. `$flags = 0, $depth = 512)`. Returns `None` when there are no
    parameters or when any parameter is required.
    """
    processed = []
    for parameter in parameters:
        if not parameter.has_default:
            return None
        processed.append(
            f"${parameter.name} = {value_to_short_string(parameter.default)}"
        )
    if not processed:
        return None
    return ", ".join(processed) + ")"


def _coerce_parameters(value: Any) -> Any:
    if isinstance(value, list):
        return [{"name": item} if isinstance(item, str) else item for item in value]
    return value


class Member(BaseModel):
    """A method, property or constant of a class."""

    name: str
    kind: MemberKind = MemberKind.METHOD
    static: bool = False
    visibility: Visibility = Visibility.PUBLIC
    parameters: list[Parameter] = Field(default_factory=list)
    value: Any = None

    @field_validator("parameters", mode="before")
    @classmethod
    def coerce_parameters(cls, value: Any) -> Any:
        return _coerce_parameters(value)

    @property
    def default_signature(self) -> str | None:
        if self.kind is not MemberKind.METHOD:
            return None
        return default_parameter_signature(self.parameters)

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


def _coerce_members(value: Any, kind: MemberKind) -> Any:
    if isinstance(value, dict):
        value = [{"name": name, "value": item} for name, item in value.items()]
    if not isinstance(value, list):
        return value
    members = []
    for item in value:
        if isinstance(item, str):
            item = {"name": item}
        elif isinstance(item, Member):
            item = item.model_dump()
        if isinstance(item, dict):
            item = {**item, "kind": kind}
            if kind is MemberKind.CONSTANT:
                item["static"] = True
        members.append(item)
    return members


class ClassDescriptor(BaseModel):
    """
    Describes a declared class or interface.

    `name` is fully qualified without a leading separator (`Psy\\Context`).
    Members listed here are the class's own; `SymbolTable.resolve_class`
    returns a descriptor with inherited members merged in.
    """

    name: str
    parent: str | None = None
    interface: bool = False
    methods: list[Member] = Field(default_factory=list)
    properties: list[Member] = Field(default_factory=list)
    constants: list[Member] = Field(default_factory=list)

    @field_validator("name", "parent")
    @classmethod
    def strip_separator(cls, value: str | None) -> str | None:
        return strip_leading_separator(value) if value else value

    @field_validator("methods", mode="before")
    @classmethod
    def coerce_methods(cls, value: Any) -> Any:
        return _coerce_members(value, MemberKind.METHOD)

    @field_validator("properties", mode="before")
    @classmethod
    def coerce_properties(cls, value: Any) -> Any:
        return _coerce_members(value, MemberKind.PROPERTY)

    @field_validator("constants", mode="before")
    @classmethod
    def coerce_constants(cls, value: Any) -> Any:
        return _coerce_members(value, MemberKind.CONSTANT)

    @property
    def short_name(self) -> str:
        return short_name(self.name)

    def members(self) -> list[Member]:
        return [*self.constants, *self.properties, *self.methods]

    def static_members(self) -> list[Member]:
        return [member for member in self.members() if member.static]

    def instance_members(self) -> list[Member]:
        return [member for member in self.members() if not member.static]

    def get_methods(self, static_only: bool = False) -> list[Member]:
        if static_only:
            return [method for method in self.methods if method.static]
        return list(self.methods)

    def get_properties(self, static_only: bool = False) -> list[Member]:
        if static_only:
            return [prop for prop in self.properties if prop.static]
        return list(self.properties)

    def get_method(self, name: str) -> Member | None:
        """Find a method by name, case-insensitively as PHP does."""
        lowered = name.lower()
        return next(
            (method for method in self.methods if method.name.lower() == lowered), None
        )


class FunctionDescriptor(BaseModel):
    """A declared function. `name` may be namespaced (`Foo\\bar`)."""

    name: str
    parameters: list[Parameter] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def strip_separator(cls, value: str) -> str:
        return strip_leading_separator(value)

    @field_validator("parameters", mode="before")
    @classmethod
    def coerce_parameters(cls, value: Any) -> Any:
        return _coerce_parameters(value)

    @property
    def default_signature(self) -> str | None:
        return default_parameter_signature(self.parameters)


def _merge_members(own: list[Member], inherited: list[Member]) -> list[Member]:
    seen = {member.name.lower() for member in own}
    return own + [member for member in inherited if member.name.lower() not in seen]


class SymbolTable:
    """
    In-memory symbol catalog.

    Owned and mutated by the shell between completion requests; the
    completion engine only ever reads from it.
    """

    def __init__(
        self,
        classes: Iterable[ClassDescriptor] = (),
        functions: Iterable[FunctionDescriptor] = (),
        constants: dict[str, Any] | None = None,
    ) -> None:
        self._classes: dict[str, ClassDescriptor] = {}
        self._functions: dict[str, FunctionDescriptor] = {}
        self._constants: dict[str, Any] = {}
        for descriptor in classes:
            self.add_class(descriptor)
        for function in functions:
            self.add_function(function)
        for name, value in (constants or {}).items():
            self.define_constant(name, value)

    @classmethod
    def with_builtins(cls) -> SymbolTable:
        from tabline.builtin_symbols import load_builtins

        table = cls()
        load_builtins(table)
        return table

    def add_class(self, descriptor: ClassDescriptor) -> None:
        key = descriptor.name.lower()
        if key in self._classes:
            logger.debug("Redeclaring class '%s'", descriptor.name)
        self._classes[key] = descriptor

    def add_function(self, function: FunctionDescriptor) -> None:
        self._functions[function.name.lower()] = function

    def define_constant(self, name: str, value: Any = None) -> None:
        self._constants[strip_leading_separator(name)] = value

    def list_classes(self) -> list[str]:
        return [descriptor.name for descriptor in self._classes.values()]

    def list_functions(self) -> list[str]:
        return [function.name for function in self._functions.values()]

    def list_constants(self) -> list[str]:
        return list(self._constants)

    def constant_value(self, name: str) -> Any:
        return self._constants[strip_leading_separator(name)]

    def resolve_class(self, name: str) -> ClassDescriptor | None:
        """
        Look up a class by (possibly `\\`-prefixed) qualified name.

        Returns a descriptor with members inherited from parent classes merged
        in, or `None` when the class is unknown.
        """
        descriptor = self._classes.get(strip_leading_separator(name).lower())
        if descriptor is None:
            return None

        methods = list(descriptor.methods)
        properties = list(descriptor.properties)
        constants = list(descriptor.constants)
        visited = {descriptor.name.lower()}
        parent_name = descriptor.parent
        while parent_name and parent_name.lower() not in visited:
            visited.add(parent_name.lower())
            parent = self._classes.get(parent_name.lower())
            if parent is None:
                logger.debug(
                    "Parent class '%s' of '%s' is not declared", parent_name, name
                )
                break
            methods = _merge_members(methods, parent.methods)
            properties = _merge_members(properties, parent.properties)
            constants = _merge_members(constants, parent.constants)
            parent_name = parent.parent

        return descriptor.model_copy(
            update={"methods": methods, "properties": properties, "constants": constants}
        )

    def get_class(self, name: str) -> ClassDescriptor:
        descriptor = self.resolve_class(name)
        if descriptor is None:
            raise UnknownSymbolError("class", name)
        return descriptor

    def resolve_function(self, name: str) -> FunctionDescriptor | None:
        return self._functions.get(strip_leading_separator(name).lower())

    def get_function(self, name: str) -> FunctionDescriptor:
        function = self.resolve_function(name)
        if function is None:
            raise UnknownSymbolError("function", name)
        return function

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = strip_leading_separator(name).lower()
        return key in self._classes or key in self._functions
