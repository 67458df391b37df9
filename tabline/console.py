# Tabline Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for the Tabline CLI."""
from rich.console import Console

console = Console(highlight=False)
