# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Tabline: declares the symbols, variables and shell
commands a completion engine starts from."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tabline.catalog import ClassDescriptor, FunctionDescriptor, SymbolTable
from tabline.commands import CommandRegistry, ShellCommand
from tabline.completer import AutoCompleter
from tabline.context import Context, ObjectValue
from tabline.exceptions import ConfigError
from tabline.logger import logger
from tabline.matchers import KeywordsMatcher, default_matchers

CONFIG_EXAMPLE = (
    "classes:\n"
    "  - name: 'App\\\\User'\n"
    "    methods: ['save', {name: 'find', static: true}]\n"
    "functions: ['app_helper']\n"
    "constants: {APP_ENV: 'dev'}\n"
    "variables: {user: {class: 'App\\\\User'}}\n"
)


def _named(value: Any) -> Any:
    if isinstance(value, list):
        return [{"name": item} if isinstance(item, str) else item for item in value]
    return value


class TablineConfig(BaseModel):
    """Tabline configuration model."""

    include_builtins: bool = True
    commands: list[ShellCommand] | None = None
    keywords: list[str] | None = None
    classes: list[ClassDescriptor] = Field(default_factory=list)
    functions: list[FunctionDescriptor] = Field(default_factory=list)
    constants: dict[str, Any] = Field(default_factory=dict)
    variables: dict[str, Any] = Field(default_factory=dict)

    @field_validator("commands", "functions", mode="before")
    @classmethod
    def coerce_names(cls, value: Any) -> Any:
        return _named(value)

    @field_validator("variables")
    @classmethod
    def coerce_objects(cls, value: dict[str, Any]) -> dict[str, Any]:
        """`{class: Foo, properties: {...}}` declares an object of class Foo."""
        variables = {}
        for name, item in value.items():
            if isinstance(item, dict) and "class" in item:
                item = ObjectValue(
                    class_name=item["class"], properties=item.get("properties", {})
                )
            variables[name.lstrip("$")] = item
        return variables

    def build_catalog(self) -> SymbolTable:
        catalog = SymbolTable.with_builtins() if self.include_builtins else SymbolTable()
        for descriptor in self.classes:
            catalog.add_class(descriptor)
        for function in self.functions:
            catalog.add_function(function)
        for name, value in self.constants.items():
            catalog.define_constant(name, value)
        return catalog

    def build_context(self) -> Context:
        return Context(self.variables)

    def build_commands(self) -> CommandRegistry:
        return CommandRegistry(self.commands)

    def to_auto_completer(self) -> AutoCompleter:
        matchers = default_matchers()
        if self.keywords is not None:
            matchers = [
                KeywordsMatcher(self.keywords) if isinstance(m, KeywordsMatcher) else m
                for m in matchers
            ]
        return AutoCompleter(
            catalog=self.build_catalog(),
            variables=self.build_context(),
            commands=self.build_commands(),
            matchers=matchers,
        )


def find_tabline_config() -> Path | None:
    candidates = [
        Path.cwd() / "tabline.yaml",
        Path.cwd() / "tabline.toml",
        Path.cwd() / ".tabline.yaml",
        Path.cwd() / ".tabline.toml",
        Path(os.environ.get("TABLINE_CONFIG", "tabline.yaml")),
        Path.home() / ".config" / "tabline" / "tabline.yaml",
        Path.home() / ".config" / "tabline" / "tabline.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def load_config(file_path: Path | str) -> TablineConfig:
    """
    Load Tabline configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        TablineConfig: The validated configuration.

    Raises:
        ConfigError: If the file is missing, has an unsupported format, cannot
            be parsed, or does not describe a valid configuration.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping.\n"
            f"Example:\n{CONFIG_EXAMPLE}"
        )

    try:
        config = TablineConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration in {path}:\n{error}") from error

    logger.debug(
        "Loaded %d class(es), %d function(s), %d constant(s) from %s",
        len(config.classes),
        len(config.functions),
        len(config.constants),
        path,
    )
    return config


def loader(file_path: Path | str) -> AutoCompleter:
    """Load a config file and build the completion engine it describes."""
    return load_config(file_path).to_auto_completer()
