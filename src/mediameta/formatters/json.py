"""JSON output formatter."""

import json
from typing import Any

from mediameta.models import MediaInfo


def format_json(info: MediaInfo, indent: int = 2) -> str:
    """Format a record as JSON string.

    Args:
        info: MediaInfo record
        indent: JSON indentation level

    Returns:
        JSON formatted string without the absent sections
    """
    return info.to_json(indent=indent)


def format_json_list(infos: dict[str, MediaInfo], indent: int = 2) -> str:
    """Format several records as a JSON array.

    Args:
        infos: Mapping of file path to MediaInfo record
        indent: JSON indentation level

    Returns:
        JSON array of ``{"path": ..., "mediainfo": {...}}`` objects
    """
    data = [{"path": path, "mediainfo": to_dict(info)} for path, info in infos.items()]
    return json.dumps(data, indent=indent, ensure_ascii=False)


def to_dict(info: MediaInfo) -> dict[str, Any]:
    """Convert a record to a dictionary.

    Args:
        info: MediaInfo record

    Returns:
        Dictionary representation without the absent sections
    """
    return info.model_dump(mode="json", exclude_none=True)
