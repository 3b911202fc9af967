"""Metadata tool wrappers for mediameta."""

from mediameta.config import MediaMetaConfig
from mediameta.extractors.base import BaseTool
from mediameta.extractors.mediainfo import NO_INPUT_EXIT_CODE, MediaInfoTool

# All tool classes known to mediameta
_TOOLS: list[type[BaseTool]] = [
    MediaInfoTool,
]


def get_tool_status(config: MediaMetaConfig | None = None) -> dict[str, bool]:
    """Get availability status of all tools.

    Returns:
        Dict mapping tool names to availability status.
    """
    return {tool_cls.name: tool_cls(config).is_available() for tool_cls in _TOOLS}


__all__ = [
    "BaseTool",
    "MediaInfoTool",
    "NO_INPUT_EXIT_CODE",
    "get_tool_status",
]
