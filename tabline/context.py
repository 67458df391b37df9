# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Variable bindings of the running shell.

`Context` maps variable names (without the `$` sigil) to values. Values are
plain Python data for PHP scalars and arrays, or an `ObjectValue` standing for
a PHP object: its class name plus any dynamic properties set on it. Object
completion inspects `ObjectValue.class_name` against the symbol catalog.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tabline.logger import logger


class ObjectValue(BaseModel):
    """A PHP object bound to a shell variable."""

    class_name: str
    properties: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        return f"object({self.class_name})"


class Context:
    """
    The shell's current variable bindings.

    Special variables the shell maintains itself (`$_`, `$_e`, `$this`) are
    kept apart from user variables, and `names()` lists both.
    """

    SPECIAL_NAMES = frozenset(["_", "_e", "__out", "__class", "__file", "this"])

    def __init__(self, variables: dict[str, Any] | None = None) -> None:
        self._scope: dict[str, Any] = {}
        self._special: dict[str, Any] = {}
        if variables:
            self.set_all(variables)

    def set(self, name: str, value: Any) -> None:
        name = name.lstrip("$")
        if name in self.SPECIAL_NAMES:
            self._special[name] = value
        else:
            self._scope[name] = value
        logger.debug("Bound $%s to %s", name, type(value).__name__)

    def set_all(self, variables: dict[str, Any]) -> None:
        for name, value in variables.items():
            self.set(name, value)

    def unset(self, name: str) -> None:
        name = name.lstrip("$")
        self._scope.pop(name, None)
        self._special.pop(name, None)

    def get(self, name: str) -> Any:
        """Get a variable's value; raises `KeyError` when it is not bound."""
        name = name.lstrip("$")
        if name in self._special:
            return self._special[name]
        if name in self._scope:
            return self._scope[name]
        raise KeyError(f"Unknown variable: ${name}")

    value_of = get

    def get_all(self) -> dict[str, Any]:
        return {**self._scope, **self._special}

    def names(self) -> list[str]:
        return list(self.get_all())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        name = name.lstrip("$")
        return name in self._scope or name in self._special
