"""Pydantic models for mediameta."""

from .record import Audio, General, MediaInfo, Menu, Video
from .report import REPEATED_ELEMENTS, Report, Track

__all__ = [
    # Output record
    "MediaInfo",
    "General",
    "Video",
    "Audio",
    "Menu",
    # Intermediate report
    "Report",
    "Track",
    "REPEATED_ELEMENTS",
]
