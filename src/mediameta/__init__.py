"""mediameta - normalized media metadata from mediainfo.

Usage:
    from mediameta import get_media_info

    info = get_media_info("video.mp4")

    if info.is_media:
        print(f"{info.video.width}x{info.video.height}, {info.audio.channels} channels")

    # Export as JSON (absent sections are omitted)
    print(info.to_json())
"""

from mediameta._version import __version__
from mediameta.analyze import get_media_info, is_installed
from mediameta.config import MediaMetaConfig, load_config
from mediameta.errors import (
    ExecutionFailedError,
    MalformedReportError,
    MediaMetaError,
    ToolNotInstalledError,
)
from mediameta.extractors import BaseTool, MediaInfoTool
from mediameta.formatters import format_default, format_json, format_quiet, to_dict
from mediameta.mapping import map_report
from mediameta.models import Audio, General, MediaInfo, Menu, Report, Track, Video
from mediameta.report import parse_report

__all__ = [
    # Version
    "__version__",
    # Main functions
    "get_media_info",
    "is_installed",
    "parse_report",
    "map_report",
    # Tools
    "BaseTool",
    "MediaInfoTool",
    # Configuration
    "MediaMetaConfig",
    "load_config",
    # Models
    "MediaInfo",
    "General",
    "Video",
    "Audio",
    "Menu",
    "Report",
    "Track",
    # Errors
    "MediaMetaError",
    "ToolNotInstalledError",
    "ExecutionFailedError",
    "MalformedReportError",
    # Formatters
    "format_default",
    "format_json",
    "format_quiet",
    "to_dict",
]
