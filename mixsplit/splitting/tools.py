"""ffprobe and ffmpeg wrappers used for duration probing and stream copying."""

import subprocess
from pathlib import Path
from typing import List, Optional

from pydub.utils import which

from .models import ExtractionRequest
from ..core.cancellation import CancellationToken
from ..core.config import ToolConfig
from ..core.exceptions import ToolFailureError, ToolTimeoutError, ToolUnavailableError
from ..core.logging_utils import get_logger

log = get_logger(__name__)

STDERR_TAIL_LINES = 10


def _tail(text: str, lines: int = STDERR_TAIL_LINES) -> str:
    return "\n".join(text.splitlines()[-lines:])


class ToolRunner:
    """Runs one external binary to completion, one call at a time."""

    def __init__(self, executable: str, timeout: Optional[float] = None):
        self.executable = executable
        if timeout is None:
            timeout = ToolConfig.timeout()
        elif timeout <= 0:
            timeout = None
        self.timeout = timeout

    def locate(self) -> str:
        """Resolve the binary on PATH."""
        path = which(self.executable)
        if path is None:
            raise ToolUnavailableError(
                f"Could not find '{self.executable}'. Is it installed and in "
                "your system's PATH?",
                tool=self.executable,
            )
        return path

    def run(
        self, args: List[str], token: Optional[CancellationToken] = None
    ) -> subprocess.CompletedProcess:
        """Run the binary with ``args`` and return the finished process."""
        if token is not None:
            token.raise_if_cancelled()

        cmd = [self.locate(), *args]
        log.debug("Running: %s", subprocess.list2cmdline(cmd))

        try:
            completed = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
                # Ctrl-C reaches only this process; a running copy completes
                start_new_session=True,
            )
        except OSError as e:
            raise ToolUnavailableError(
                f"Failed to start {self.executable} process. Is '{self.executable}' "
                "installed and in your system's PATH?",
                tool=self.executable,
                details=str(e),
            )
        except subprocess.TimeoutExpired:
            raise ToolTimeoutError(
                f"{self.executable} did not finish within {self.timeout} seconds",
                tool=self.executable,
                timeout=self.timeout,
            )

        if completed.stderr:
            log.debug("%s stderr: %s", self.executable, completed.stderr.strip())

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            raise ToolFailureError(
                f"{self.executable} exited with code {completed.returncode}",
                tool=self.executable,
                returncode=completed.returncode,
                stderr=stderr,
                details=_tail(stderr) or None,
            )

        return completed


class FFprobeDurationProbe(ToolRunner):
    """Reads the total duration of a media file with ffprobe."""

    def __init__(self, executable: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(executable or ToolConfig.ffprobe(), timeout)

    def get_duration(
        self, file_path: Path, token: Optional[CancellationToken] = None
    ) -> float:
        """Duration of ``file_path`` in seconds."""
        completed = self.run(
            [
                "-v",
                "error",
                "-show_entries",
                "format=duration",
                "-of",
                "default=noprint_wrappers=1:nokey=1",
                str(file_path),
            ],
            token,
        )

        output = completed.stdout.strip()
        try:
            return float(output)
        except ValueError:
            raise ToolFailureError(
                f"Could not parse duration from {self.executable} output: {output!r}",
                tool=self.executable,
                returncode=completed.returncode,
                stderr=completed.stderr,
            )


class FFmpegExtractor(ToolRunner):
    """Copies a time range of a media file into a new file without re-encoding."""

    def __init__(self, executable: Optional[str] = None, timeout: Optional[float] = None):
        super().__init__(executable or ToolConfig.ffmpeg(), timeout)

    @staticmethod
    def build_args(request: ExtractionRequest) -> List[str]:
        """ffmpeg arguments for one request."""
        args = [
            "-i",
            str(request.input_path),
            "-ss",
            request.start,
            "-t",
            request.duration,
        ]
        if request.overwrite:
            args.append("-y")
        args += ["-c", "copy"]

        for key, value in request.metadata.items():
            args += ["-metadata", f"{key}={value}"]

        args.append(str(request.output_path))
        return args

    def extract(
        self, request: ExtractionRequest, token: Optional[CancellationToken] = None
    ) -> Path:
        """Run the copy and return the output path."""
        completed = self.run(self.build_args(request), token)
        if completed.stdout:
            log.debug("%s stdout: %s", self.executable, completed.stdout.strip())
        return request.output_path
