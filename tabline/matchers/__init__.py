# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tabline matchers: one per completion context.

Each matcher decides from the token suffix alone whether it applies, then
produces candidates from the symbol catalog, the variable context or the
command registry.
"""
from .base import AbstractMatcher, CompletionScope
from .class_members import ClassAttributesMatcher, ClassMethodsMatcher
from .class_names import ClassNamesMatcher
from .commands import CommandsMatcher
from .constants import ConstantsMatcher
from .default_parameters import (
    ClassMethodDefaultParametersMatcher,
    FunctionDefaultParametersMatcher,
    ObjectMethodDefaultParametersMatcher,
)
from .functions import FunctionsMatcher
from .keywords import KeywordsMatcher
from .object_members import ObjectAttributesMatcher, ObjectMethodsMatcher
from .variables import VariablesMatcher


def default_matchers() -> list[AbstractMatcher]:
    """Return a fresh instance of every built-in matcher."""
    return [
        ClassAttributesMatcher(),
        ClassMethodDefaultParametersMatcher(),
        ClassMethodsMatcher(),
        ClassNamesMatcher(),
        CommandsMatcher(),
        ConstantsMatcher(),
        FunctionDefaultParametersMatcher(),
        FunctionsMatcher(),
        KeywordsMatcher(),
        ObjectAttributesMatcher(),
        ObjectMethodDefaultParametersMatcher(),
        ObjectMethodsMatcher(),
        VariablesMatcher(),
    ]


__all__ = [
    "AbstractMatcher",
    "CompletionScope",
    "ClassAttributesMatcher",
    "ClassMethodDefaultParametersMatcher",
    "ClassMethodsMatcher",
    "ClassNamesMatcher",
    "CommandsMatcher",
    "ConstantsMatcher",
    "FunctionDefaultParametersMatcher",
    "FunctionsMatcher",
    "KeywordsMatcher",
    "ObjectAttributesMatcher",
    "ObjectMethodDefaultParametersMatcher",
    "ObjectMethodsMatcher",
    "VariablesMatcher",
    "default_matchers",
]
