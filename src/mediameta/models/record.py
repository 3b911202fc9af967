"""Normalized output record models."""

from pydantic import BaseModel


class General(BaseModel):
    """Container-level information (the "General" track)."""

    format: str = ""
    duration: str = ""
    file_size: str = ""
    overall_bit_rate_mode: str = ""
    overall_bit_rate: str = ""
    complete_name: str = ""
    file_name: str = ""
    file_extension: str = ""
    frame_rate: str = ""
    stream_size: str = ""
    writing_application: str = ""


class Video(BaseModel):
    """Video stream information."""

    width: str = ""
    height: str = ""
    format: str = ""
    bitrate: str = ""
    duration: str = ""
    format_info: str = ""
    format_profile: str = ""
    format_settings_cabac: str = ""
    format_settings_reframes: str = ""
    frame_rate: str = ""
    bit_depth: str = ""
    scan_type: str = ""
    interlacement: str = ""
    writing_library: str = ""

    @property
    def resolution(self) -> str | None:
        """Return resolution as WxH string."""
        if self.width and self.height:
            return f"{self.width}x{self.height}"
        return None


class Audio(BaseModel):
    """Audio stream information."""

    format: str = ""
    duration: str = ""
    bitrate: str = ""
    channels: str = ""
    frame_rate: str = ""
    format_info: str = ""
    sampling_rate: str = ""
    format_profile: str = ""


class Menu(BaseModel):
    """Chapter/menu track information."""

    format: str = ""
    duration: str = ""


class MediaInfo(BaseModel):
    """Metadata for one media file.

    Each section is None when the report had no track of that type.
    Missing fields inside a present section are empty strings.
    """

    general: General | None = None
    video: Video | None = None
    audio: Audio | None = None
    menu: Menu | None = None

    @property
    def is_media(self) -> bool:
        """True if both a video and an audio duration were reported.

        A heuristic for "audio+video presentation"; single-stream files
        are not media by this definition.
        """
        return bool(
            self.video is not None
            and self.video.duration
            and self.audio is not None
            and self.audio.duration
        )

    def to_json(self, indent: int | None = None) -> str:
        """Serialize to JSON with absent sections omitted."""
        return self.model_dump_json(indent=indent, exclude_none=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "MediaInfo":
        """Load a record previously produced by ``to_json``."""
        return cls.model_validate_json(data)
