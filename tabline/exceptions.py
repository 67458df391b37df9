# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Tabline.

None of these ever reach the line editor during a completion request: matchers
downgrade them to an empty candidate list. They surface only from the public
catalog and configuration APIs.

Exception Hierarchy:
- TablineError
    ├── CatalogError
    │   └── UnknownSymbolError
    ├── ConfigError
    └── MatcherError
"""


class TablineError(Exception):
    """Base exception for Tabline."""


class CatalogError(TablineError):
    """Exception raised when the symbol catalog cannot answer a query."""


class UnknownSymbolError(CatalogError):
    """Exception raised when a class or function name cannot be resolved."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind}: '{name}'")
        self.kind = kind
        self.name = name


class ConfigError(TablineError):
    """Exception raised when a configuration file is missing or malformed."""


class MatcherError(TablineError):
    """Exception raised when a matcher meets a token shape it cannot handle."""
