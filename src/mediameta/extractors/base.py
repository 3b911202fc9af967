"""Base class for external metadata tools."""

from abc import ABC, abstractmethod
from typing import ClassVar

from mediameta.config import MediaMetaConfig
from mediameta.models import MediaInfo


class BaseTool(ABC):
    """Abstract base class for wrappers around an external inspection binary.

    A tool is constructed with the configuration holding its binary path,
    can check whether that binary is installed, and extracts a MediaInfo
    record for one file per call.

    Attributes:
        name: Human-readable name of the tool
    """

    name: ClassVar[str] = "base"

    def __init__(self, config: MediaMetaConfig | None = None):
        self.config = config if config is not None else MediaMetaConfig()

    @property
    @abstractmethod
    def binary(self) -> str:
        """Path or name of the executable to spawn."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the binary can be executed.

        Returns:
            True unless the binary cannot be found
        """
        pass

    @abstractmethod
    def extract(self, path: str) -> MediaInfo:
        """Extract metadata for a file.

        Args:
            path: Path to the media file

        Returns:
            MediaInfo record for the file
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, binary={self.binary!r})"
