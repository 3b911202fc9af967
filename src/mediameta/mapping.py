"""Fold a mediainfo Report into the fixed MediaInfo record.

Each output field is described by a FieldRule naming the Track field it
comes from and which of the reported values to use. mediainfo lists most
measurements several times (raw value first, then human renderings), so
the first value is taken. Interlacement is the exception and takes the
second value.
"""

from dataclasses import dataclass
from enum import IntEnum

from pydantic import BaseModel

from mediameta.models import Audio, General, MediaInfo, Menu, Report, Track, Video


class Pick(IntEnum):
    """Index of the value selected from a repeated field."""

    FIRST = 0
    SECOND = 1


@dataclass(frozen=True)
class FieldRule:
    """Copy ``Track.<source>[pick]`` into ``<section>.<target>``."""

    target: str
    source: str
    pick: Pick = Pick.FIRST


GENERAL_RULES: tuple[FieldRule, ...] = (
    FieldRule("duration", "duration"),
    FieldRule("format", "format"),
    FieldRule("file_size", "file_size"),
    FieldRule("overall_bit_rate_mode", "overall_bit_rate_mode"),
    FieldRule("overall_bit_rate", "overall_bit_rate"),
    FieldRule("complete_name", "complete_name"),
    FieldRule("file_name", "file_name"),
    FieldRule("file_extension", "file_extension"),
    FieldRule("frame_rate", "frame_rate"),
    FieldRule("stream_size", "stream_size"),
    FieldRule("writing_application", "writing_application"),
)

VIDEO_RULES: tuple[FieldRule, ...] = (
    FieldRule("width", "width"),
    FieldRule("height", "height"),
    FieldRule("format", "format"),
    FieldRule("bitrate", "bit_rate"),
    FieldRule("duration", "duration"),
    FieldRule("bit_depth", "bit_depth"),
    FieldRule("scan_type", "scan_type"),
    FieldRule("format_info", "format_info"),
    FieldRule("frame_rate", "frame_rate"),
    FieldRule("format_profile", "format_profile"),
    FieldRule("interlacement", "interlacement", Pick.SECOND),
    FieldRule("writing_library", "writing_library"),
    FieldRule("format_settings_cabac", "format_settings_cabac"),
    FieldRule("format_settings_reframes", "format_settings_reframes"),
)

AUDIO_RULES: tuple[FieldRule, ...] = (
    FieldRule("format", "format"),
    FieldRule("channels", "channels"),
    FieldRule("duration", "duration"),
    FieldRule("bitrate", "bit_rate"),
    FieldRule("format_info", "format_info"),
    FieldRule("frame_rate", "frame_rate"),
    FieldRule("sampling_rate", "sampling_rate"),
    FieldRule("format_profile", "format_profile"),
)

MENU_RULES: tuple[FieldRule, ...] = (
    FieldRule("duration", "duration"),
    FieldRule("format", "format"),
)

# track type -> (MediaInfo attribute, section model, rules)
SECTIONS: dict[str, tuple[str, type[BaseModel], tuple[FieldRule, ...]]] = {
    "General": ("general", General, GENERAL_RULES),
    "Video": ("video", Video, VIDEO_RULES),
    "Audio": ("audio", Audio, AUDIO_RULES),
    "Menu": ("menu", Menu, MENU_RULES),
}


def select(track: Track, rule: FieldRule) -> str:
    """Apply one rule to a track; absent values become an empty string."""
    return track.pick(rule.source, rule.pick) or ""


def build_section(track: Track, model: type[BaseModel], rules: tuple[FieldRule, ...]) -> BaseModel:
    """Build one output section from a single track."""
    return model(**{rule.target: select(track, rule) for rule in rules})


def map_report(report: Report) -> MediaInfo:
    """Map every recognized track into the MediaInfo record.

    Tracks are visited in report order. When several tracks share a type,
    the last one replaces the section built from earlier ones. Unknown
    track types are skipped.
    """
    sections: dict[str, BaseModel] = {}
    for track in report.tracks:
        entry = SECTIONS.get(track.type)
        if entry is None:
            continue
        attr, model, rules = entry
        sections[attr] = build_section(track, model, rules)

    return MediaInfo(**sections)
