"""
Tabline Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .catalog import ClassDescriptor, FunctionDescriptor, SymbolTable
from .commands import CommandRegistry, ShellCommand
from .completer import AutoCompleter, TablineCompleter
from .context import Context, ObjectValue
from .logger import logger

__all__ = [
    "AutoCompleter",
    "TablineCompleter",
    "SymbolTable",
    "ClassDescriptor",
    "FunctionDescriptor",
    "Context",
    "ObjectValue",
    "CommandRegistry",
    "ShellCommand",
    "logger",
]
