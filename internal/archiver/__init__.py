"""Wiring shared by the archiver commands.

This package contains:
- Dependencies: Struct holding the initialized adapters
- init_dependencies / close_dependencies: Build and release them
- ArchiverRegistry: Builds the use cases each command runs
"""

from .type import Dependencies
from .dependencies import init_dependencies, close_dependencies
from .registry import ArchiverRegistry

__all__ = [
    "Dependencies",
    "init_dependencies",
    "close_dependencies",
    "ArchiverRegistry",
]
