"""Intermediate models mirroring the mediainfo XML report."""

from pydantic import BaseModel, ConfigDict, Field


class Track(BaseModel):
    """One ``<track>`` element of a mediainfo report.

    Singular fields hold ``None`` when absent. Repeated fields hold every
    value mediainfo printed for that element, in document order; with
    ``-f`` mediainfo repeats most measurements in several renderings
    (raw number, "1 920 pixels", ...).
    """

    model_config = ConfigDict(extra="ignore")

    type: str = ""

    # Singular fields
    file_name: str | None = Field(default=None, alias="File_name")
    format_info: str | None = Field(default=None, alias="Format_Info")
    color_space: str | None = Field(default=None, alias="Color_space")
    complete_name: str | None = Field(default=None, alias="Complete_name")
    format_profile: str | None = Field(default=None, alias="Format_profile")
    file_extension: str | None = Field(default=None, alias="File_extension")
    chroma_subsampling: str | None = Field(default=None, alias="Chroma_subsampling")
    writing_application: str | None = Field(default=None, alias="Writing_application")
    proportion_of_this_stream: str | None = Field(default=None, alias="Proportion_of_this_stream")

    # Repeated fields
    width: list[str] = Field(default_factory=list, alias="Width")
    height: list[str] = Field(default_factory=list, alias="Height")
    format: list[str] = Field(default_factory=list, alias="Format")
    duration: list[str] = Field(default_factory=list, alias="Duration")
    bit_rate: list[str] = Field(default_factory=list, alias="Bit_rate")
    bit_depth: list[str] = Field(default_factory=list, alias="Bit_depth")
    scan_type: list[str] = Field(default_factory=list, alias="Scan_type")
    file_size: list[str] = Field(default_factory=list, alias="File_size")
    frame_rate: list[str] = Field(default_factory=list, alias="Frame_rate")
    channels: list[str] = Field(default_factory=list, alias="Channel_s_")
    stream_size: list[str] = Field(default_factory=list, alias="Stream_size")
    interlacement: list[str] = Field(default_factory=list, alias="Interlacement")
    bit_rate_mode: list[str] = Field(default_factory=list, alias="Bit_rate_mode")
    sampling_rate: list[str] = Field(default_factory=list, alias="Sampling_rate")
    writing_library: list[str] = Field(default_factory=list, alias="Writing_library")
    frame_rate_mode: list[str] = Field(default_factory=list, alias="Frame_rate_mode")
    overall_bit_rate: list[str] = Field(default_factory=list, alias="Overall_bit_rate")
    display_aspect_ratio: list[str] = Field(default_factory=list, alias="Display_aspect_ratio")
    overall_bit_rate_mode: list[str] = Field(default_factory=list, alias="Overall_bit_rate_mode")
    format_settings_cabac: list[str] = Field(default_factory=list, alias="Format_settings__CABAC")
    format_settings_reframes: list[str] = Field(
        default_factory=list, alias="Format_settings__ReFrames"
    )

    def pick(self, name: str, index: int = 0) -> str | None:
        """Return the value at ``index`` for field ``name``, or None.

        Never raises for a short or missing field. Singular fields only
        answer index 0.
        """
        value = getattr(self, name, None)
        if value is None or index < 0:
            return None
        if isinstance(value, list):
            return value[index] if index < len(value) else None
        return value if index == 0 else None


# XML element names that may appear more than once per track
REPEATED_ELEMENTS = frozenset(
    field.alias
    for field in Track.model_fields.values()
    if field.alias and field.annotation == list[str]
)


class Report(BaseModel):
    """A deserialized mediainfo report: tracks in document order."""

    tracks: list[Track] = Field(default_factory=list)

    def tracks_of(self, track_type: str) -> list[Track]:
        """Return all tracks of the given type, in report order."""
        return [t for t in self.tracks if t.type == track_type]
