"""Dependency checking utilities."""

import importlib.util

from mediameta.config import MediaMetaConfig
from mediameta.extractors import get_tool_status


def check_system_dependencies(config: MediaMetaConfig | None = None) -> dict[str, bool]:
    """Check availability of system dependencies (binaries).

    Returns:
        Dict mapping tool names to availability status.
    """
    return get_tool_status(config)


def check_python_dependencies() -> dict[str, bool]:
    """Check availability of Python packages.

    Returns:
        Dict mapping package names to availability status.
    """
    modules = {"lxml": "lxml", "pydantic": "pydantic", "pyyaml": "yaml"}
    return {name: importlib.util.find_spec(module) is not None for name, module in modules.items()}


def check_all_dependencies(config: MediaMetaConfig | None = None) -> dict[str, dict[str, bool]]:
    """Check all dependencies.

    Returns:
        Dict with 'system' and 'python' keys containing availability dicts.
    """
    return {
        "system": check_system_dependencies(config),
        "python": check_python_dependencies(),
    }


def print_dependency_status(config: MediaMetaConfig | None = None) -> None:
    """Print dependency status to stdout."""
    deps = check_all_dependencies(config)

    print("mediameta dependency status:")
    print("=" * 40)

    print("\nSystem binaries:")
    for name, available in sorted(deps["system"].items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    print("\nPython packages:")
    for name, available in sorted(deps["python"].items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    if config is not None:
        print(f"\nmediainfo binary: {config.mediainfo_bin}")

    if not deps["system"]["mediainfo"]:
        print("\n⚠️  mediainfo is required. Install: brew install mediainfo")
