"""Error kinds raised by mediameta."""


class MediaMetaError(Exception):
    """Base class for all mediameta errors."""

    pass


class ToolNotInstalledError(MediaMetaError):
    """The mediainfo binary could not be found."""

    def __init__(self, binary: str):
        self.binary = binary
        super().__init__(f"Must install mediainfo (binary not found: {binary})")


class ExecutionFailedError(MediaMetaError):
    """The mediainfo process could not run or exited abnormally.

    The original exception is available as ``cause`` (and ``__cause__``)
    and its message is used unchanged.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause))


class MalformedReportError(MediaMetaError):
    """The mediainfo output could not be deserialized."""

    pass
