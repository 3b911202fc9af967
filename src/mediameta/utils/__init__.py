"""Utility functions for mediameta."""

from .deps import (
    check_all_dependencies,
    check_python_dependencies,
    check_system_dependencies,
    print_dependency_status,
)

__all__ = [
    # Dependency checking
    "check_system_dependencies",
    "check_python_dependencies",
    "check_all_dependencies",
    "print_dependency_status",
]
