"""MediaInfo tool wrapper."""

import subprocess
from typing import ClassVar

from mediameta.errors import ExecutionFailedError, ToolNotInstalledError
from mediameta.extractors.base import BaseTool
from mediameta.mapping import map_report
from mediameta.models import MediaInfo
from mediameta.report import parse_report

# Exit status mediainfo uses when run without a file argument
NO_INPUT_EXIT_CODE = 255


class MediaInfoTool(BaseTool):
    """Extract metadata using MediaInfo.

    Runs ``mediainfo --Output=XML -f <file>`` and maps the report onto
    the fixed MediaInfo record:
    - General: container format, duration, size, overall bit rate
    - Video: dimensions, codec, bit rate, frame rate, scan type
    - Audio: codec, channels, sampling rate, bit rate
    - Menu: chapter track format and duration

    No timeout is applied; wrap calls yourself if the binary may hang.

    Install: brew install mediainfo (macOS) or apt install mediainfo (Linux)
    """

    name: ClassVar[str] = "mediainfo"

    @property
    def binary(self) -> str:
        return self.config.mediainfo_bin

    def is_available(self) -> bool:
        """Check if mediainfo is installed.

        Runs the binary with no arguments. Only a "not found" failure
        counts as missing; exit status 255 (no file given) and any other
        outcome mean the binary exists.
        """
        try:
            subprocess.run(
                [self.binary],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except FileNotFoundError:
            return False
        except OSError:
            # e.g. permission denied: present but not runnable by us
            return True
        # NO_INPUT_EXIT_CODE is the usual answer; any exit status means it ran
        return True

    def extract(self, path: str) -> MediaInfo:
        """Extract metadata using mediainfo.

        Raises:
            ToolNotInstalledError: If the binary cannot be found
            ExecutionFailedError: If mediainfo fails to run or exits non-zero
            MalformedReportError: If the XML output cannot be parsed
        """
        if not self.is_available():
            raise ToolNotInstalledError(self.binary)

        raw = self._run_mediainfo(path)
        report = parse_report(raw)
        return map_report(report)

    def _run_mediainfo(self, path: str) -> bytes:
        """Run mediainfo and return its raw XML output."""
        cmd = [self.binary, "--Output=XML", "-f", path]
        try:
            result = subprocess.run(cmd, capture_output=True, check=True, stdin=subprocess.DEVNULL)
        except (OSError, subprocess.CalledProcessError) as e:
            raise ExecutionFailedError(e) from e
        return result.stdout
