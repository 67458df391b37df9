# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the capability protocols the completion engine consumes.

These runtime-checkable `Protocol` classes specify what the engine needs from
the surrounding shell, without requiring explicit base classes. Any object
with the right methods can stand in, which is how tests swap in small
deterministic catalogs.

Protocols:
- SymbolCatalog: declared classes, functions and constants, plus lookups.
- VariableContext: the shell's current variable bindings.
- CommandRegistry: the names of the shell's built-in commands.
"""
from __future__ import annotations

from typing import Any, Iterable, Protocol, runtime_checkable

from tabline.catalog import ClassDescriptor, FunctionDescriptor


@runtime_checkable
class SymbolCatalog(Protocol):
    def list_classes(self) -> Iterable[str]: ...

    def list_functions(self) -> Iterable[str]: ...

    def list_constants(self) -> Iterable[str]: ...

    def resolve_class(self, name: str) -> ClassDescriptor | None: ...

    def resolve_function(self, name: str) -> FunctionDescriptor | None: ...


@runtime_checkable
class VariableContext(Protocol):
    def names(self) -> Iterable[str]: ...

    def value_of(self, name: str) -> Any: ...


@runtime_checkable
class CommandRegistry(Protocol):
    def names(self) -> Iterable[str]: ...

    def is_command(self, name: str) -> bool: ...
