"""CUE sheet grammar parser.

Turns sheet text into the tagged ``CueSheetRecord`` structure without
judging whether the result is usable for splitting; that is left to
``mixsplit.cue.services``.
"""

from pathlib import Path
from typing import List, Optional, Tuple

from .models import CueFileRecord, CueIndexRecord, CueSheetRecord, CueTrackRecord
from ..core.logging_utils import get_logger
from ..core.timecode import CueTime

log = get_logger(__name__)

SHEET_ENCODING = "utf-8-sig"


class CueGrammarError(ValueError):
    """Raised when sheet text violates the CUE grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


def unquote(value: str) -> str:
    """Strip surrounding whitespace and one pair of double quotes."""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def split_command(line: str) -> Tuple[str, str]:
    """Split a line into its upper-cased command and the raw argument text."""
    parts = line.split(None, 1)
    if not parts:
        return "", ""
    argument = parts[1].strip() if len(parts) > 1 else ""
    return parts[0].upper(), argument


def split_file_argument(argument: str, line_number: int) -> Tuple[str, Optional[str]]:
    """Split ``"name" TYPE`` (or ``name TYPE``) into name and type."""
    if argument.startswith('"'):
        end = argument.rfind('"')
        if end == 0:
            raise CueGrammarError("Unterminated quote in FILE command", line_number)
        name = argument[1:end]
        file_type = argument[end + 1 :].strip() or None
    else:
        parts = argument.rsplit(None, 1)
        name = parts[0] if parts else ""
        file_type = parts[1] if len(parts) > 1 else None

    if not name:
        raise CueGrammarError("FILE command requires a file name", line_number)
    return name, file_type.upper() if file_type else None


def parse_time(value: str, line_number: int) -> CueTime:
    try:
        return CueTime.parse(value)
    except ValueError as e:
        raise CueGrammarError(str(e), line_number)


def parse_number(value: str, what: str, line_number: int) -> int:
    if not (value.isascii() and value.isdigit()):
        raise CueGrammarError(f"Invalid {what} number: {value!r}", line_number)
    return int(value)


class CueSheetParser:
    """Line-oriented parser holding the current FILE and TRACK context."""

    def __init__(self):
        self.sheet = CueSheetRecord()
        self.current_file: Optional[CueFileRecord] = None
        self.current_track: Optional[CueTrackRecord] = None
        self.line_number = 0

    def parse(self, text: str) -> CueSheetRecord:
        for line_number, line in enumerate(text.splitlines(), 1):
            self.line_number = line_number
            if line.strip():
                self._parse_line(line)
        return self.sheet

    def _require_track(self, command: str) -> CueTrackRecord:
        if self.current_track is None:
            raise CueGrammarError(f"No TRACK for {command} command", self.line_number)
        return self.current_track

    def _require_args(self, command: str, argument: str, count: int) -> List[str]:
        args = argument.split()
        if len(args) != count:
            raise CueGrammarError(
                f"Command {command!r} requires exactly {count} parameters",
                self.line_number,
            )
        return args

    def _parse_line(self, line: str) -> None:
        command, argument = split_command(line)

        if command == "REM":
            key, _, value = argument.partition(" ")
            if key:
                self.sheet.rem[key.upper()] = unquote(value)

        elif command in ("TITLE", "PERFORMER", "SONGWRITER"):
            if not argument:
                raise CueGrammarError(
                    f"Command {command!r} requires a value", self.line_number
                )
            target = self.current_track if self.current_track else self.sheet
            setattr(target, command.lower(), unquote(argument))

        elif command == "FILE":
            name, file_type = split_file_argument(argument, self.line_number)
            self.current_file = CueFileRecord(name=name, file_type=file_type)
            self.current_track = None
            self.sheet.files.append(self.current_file)

        elif command == "TRACK":
            if self.current_file is None:
                raise CueGrammarError("No FILE for TRACK command", self.line_number)
            number, track_type = self._require_args(command, argument, 2)
            self.current_track = CueTrackRecord(
                number=parse_number(number, "track", self.line_number),
                track_type=track_type.upper(),
            )
            self.current_file.tracks.append(self.current_track)

        elif command == "INDEX":
            track = self._require_track(command)
            number, time = self._require_args(command, argument, 2)
            track.indexes.append(
                CueIndexRecord(
                    number=parse_number(number, "index", self.line_number),
                    time=parse_time(time, self.line_number),
                )
            )

        elif command in ("PREGAP", "POSTGAP"):
            track = self._require_track(command)
            (time,) = self._require_args(command, argument, 1)
            setattr(track, command.lower(), parse_time(time, self.line_number))

        elif command == "FLAGS":
            self._require_track(command).flags = argument.upper().split()

        elif command == "ISRC":
            self._require_track(command).isrc = unquote(argument)

        elif command in ("CATALOG", "CDTEXTFILE"):
            setattr(self.sheet, command.lower(), unquote(argument))

        else:
            log.debug("Line %d: Ignoring unknown command %r", self.line_number, command)


def parse_cue_text(text: str) -> CueSheetRecord:
    """Parse CUE sheet text."""
    return CueSheetParser().parse(text)


def parse_cue_sheet(path: Path) -> CueSheetRecord:
    """Read and parse a CUE sheet file."""
    text = Path(path).read_text(encoding=SHEET_ENCODING, errors="replace")
    return parse_cue_text(text)
