"""Custom exceptions for mixsplit."""


class ExitCode:
    """Process exit codes for the command-line entry points."""

    SUCCESS = 0
    USAGE = 1
    INPUT = 2
    TOOL = 3
    CANCELLED = 130


class MixSplitError(Exception):
    """Base exception for all mixsplit errors."""

    exit_code = ExitCode.INPUT

    def __init__(self, message: str, details: str = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class MissingArgumentError(MixSplitError):
    """Raised when a required command-line argument is absent."""

    exit_code = ExitCode.USAGE

    def __init__(self, message: str, argument: str = None, details: str = None):
        super().__init__(message, details)
        self.argument = argument


class InputNotFoundError(MixSplitError):
    """Raised when a tracklist, CUE or audio file does not exist."""

    exit_code = ExitCode.INPUT

    def __init__(self, message: str, file_path: str = None, details: str = None):
        super().__init__(message, details)
        self.file_path = file_path


class MalformedCueError(MixSplitError):
    """Raised when a CUE sheet cannot be parsed or lacks required elements."""

    exit_code = ExitCode.INPUT

    def __init__(self, message: str, file_path: str = None, details: str = None):
        super().__init__(message, details)
        self.file_path = file_path


class ToolUnavailableError(MixSplitError):
    """Raised when an external tool cannot be located or started."""

    exit_code = ExitCode.TOOL

    def __init__(self, message: str, tool: str = None, details: str = None):
        super().__init__(message, details)
        self.tool = tool


class ToolFailureError(MixSplitError):
    """Raised when an external tool exits with a non-zero status."""

    exit_code = ExitCode.TOOL

    def __init__(
        self,
        message: str,
        tool: str = None,
        returncode: int = None,
        stderr: str = None,
        details: str = None,
    ):
        super().__init__(message, details)
        self.tool = tool
        self.returncode = returncode
        self.stderr = stderr


class ToolTimeoutError(ToolFailureError):
    """Raised when an external tool does not finish within the timeout."""

    def __init__(self, message: str, tool: str = None, timeout: float = None):
        super().__init__(message, tool=tool)
        self.timeout = timeout


class PipelineCancelledError(MixSplitError):
    """Raised when a run is cancelled before its next external call."""

    exit_code = ExitCode.CANCELLED
