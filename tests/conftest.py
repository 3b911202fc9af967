"""Pytest configuration and fixtures."""

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from mediameta.config import MediaMetaConfig
from mediameta.extractors import NO_INPUT_EXIT_CODE

DATA_DIR = Path(__file__).parent / "data"


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    try:
        subprocess.run(
            [cmd, "--version"],
            capture_output=True,
            timeout=5,
        )
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


@pytest.fixture
def has_mediainfo() -> bool:
    """Check if mediainfo is available."""
    return command_exists("mediainfo")


@pytest.fixture
def sample_xml() -> bytes:
    """A full mediainfo XML report with General, Video, Audio, Menu and Text tracks."""
    return (DATA_DIR / "sample.xml").read_bytes()


@pytest.fixture
def fake_mediainfo(tmp_path: Path) -> Callable[..., MediaMetaConfig]:
    """Build a shell script standing in for the mediainfo binary.

    The script exits with ``no_args_exit`` when run without arguments,
    otherwise records its arguments in ``args.txt``, prints ``stdout``
    and exits with ``exit_code``.
    """
    if sys.platform == "win32":
        pytest.skip("fake mediainfo is a POSIX shell script")

    def make(
        stdout: bytes = b"",
        exit_code: int = 0,
        no_args_exit: int = NO_INPUT_EXIT_CODE,
    ) -> MediaMetaConfig:
        report = tmp_path / "report.xml"
        report.write_bytes(stdout)
        script = tmp_path / "mediainfo"
        script.write_text(
            "#!/bin/sh\n"
            'if [ "$#" -eq 0 ]; then\n'
            f"  exit {no_args_exit}\n"
            "fi\n"
            f'printf "%s\\n" "$@" > "{tmp_path / "args.txt"}"\n'
            f'cat "{report}"\n'
            f"exit {exit_code}\n"
        )
        script.chmod(0o755)
        return MediaMetaConfig(mediainfo_bin=str(script))

    return make
