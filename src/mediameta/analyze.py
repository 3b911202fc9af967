"""Core extraction functions."""

from mediameta.config import MediaMetaConfig, load_config
from mediameta.extractors import MediaInfoTool
from mediameta.models import MediaInfo


def is_installed(config: MediaMetaConfig | None = None) -> bool:
    """Check whether the configured mediainfo binary can be run.

    Args:
        config: Configuration to use (default: load_config())

    Returns:
        False only if the binary cannot be found
    """
    return MediaInfoTool(config or load_config()).is_available()


def get_media_info(path: str, config: MediaMetaConfig | None = None) -> MediaInfo:
    """Extract metadata from a media file.

    This is the main entry point. It:
    1. Checks that mediainfo is installed
    2. Runs ``mediainfo --Output=XML -f`` on the file
    3. Parses the XML report
    4. Maps the General/Video/Audio/Menu tracks into a MediaInfo record

    The path is not checked beforehand; a missing file is reported by
    mediainfo itself.

    Args:
        path: Path to the media file
        config: Configuration to use (default: load_config())

    Returns:
        MediaInfo record with every section the report contained

    Raises:
        ToolNotInstalledError: If mediainfo cannot be found
        ExecutionFailedError: If mediainfo fails
        MalformedReportError: If the report cannot be parsed
    """
    return MediaInfoTool(config or load_config()).extract(path)

