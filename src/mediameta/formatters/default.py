"""Default output formatter - sectioned text report."""

import os

from pydantic import BaseModel

from mediameta.models import MediaInfo

LABELS = {
    "bitrate": "Bit rate",
    "channels": "Channels",
    "format_settings_cabac": "CABAC",
    "format_settings_reframes": "ReFrames",
}


def _label(field_name: str) -> str:
    return LABELS.get(field_name, field_name.replace("_", " ").capitalize())


def _file_size(value: str) -> str:
    """Render mediainfo's byte count as "1.00 MiB (1048576 bytes)"."""
    if not value.isdigit():
        return value
    size = float(value)
    for unit in ("bytes", "KiB", "MiB", "GiB", "TiB"):
        if size < 1024 or unit == "TiB":
            break
        size /= 1024
    if unit == "bytes":
        return f"{value} bytes"
    return f"{size:.2f} {unit} ({value} bytes)"


def _section_lines(title: str, section: BaseModel) -> list[str]:
    """Render the non-empty fields of one section."""
    lines = ["", f"## {title}"]
    values = section.model_dump()
    for name, value in values.items():
        if not value:
            continue
        if name == "file_size":
            value = _file_size(value)
        lines.append(f"  {_label(name) + ':':<22}{value}")
    if len(lines) == 2:
        lines.append("  (no fields reported)")
    return lines


def format_default(info: MediaInfo, path: str) -> str:
    """Format a record as a sectioned text report.

    Lists each present section (General, Video, Audio, Menu) with its
    non-empty fields, followed by the media classification.
    """
    lines = []

    lines.append("=" * 70)
    lines.append(f"File: {os.path.basename(path)}")
    lines.append("=" * 70)

    sections = [
        ("GENERAL", info.general),
        ("VIDEO", info.video),
        ("AUDIO", info.audio),
        ("MENU", info.menu),
    ]
    found = False
    for title, section in sections:
        if section is None:
            continue
        found = True
        lines.extend(_section_lines(title, section))

    if not found:
        lines.append("")
        lines.append("  (mediainfo reported no tracks)")

    lines.append("")
    lines.append(f"Audio+video media: {'yes' if info.is_media else 'no'}")

    return "\n".join(lines)
