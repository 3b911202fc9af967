"""Quiet output formatter - one-line summary."""

import os

from mediameta.models import MediaInfo


def format_quiet(info: MediaInfo, path: str) -> str:
    """Format a record as one-line summary.

    Format: filename | duration | resolution | media: yes/no
    """
    parts = [os.path.basename(path)]

    # Prefer the container duration, fall back to the video stream
    duration = ""
    if info.general is not None:
        duration = info.general.duration
    if not duration and info.video is not None:
        duration = info.video.duration
    parts.append(duration or "N/A")

    resolution = info.video.resolution if info.video is not None else None
    parts.append(resolution or "N/A")

    parts.append("media: yes" if info.is_media else "media: no")

    return " | ".join(parts)
