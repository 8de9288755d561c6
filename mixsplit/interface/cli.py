"""Command-line entry points: tracklist2cue, cue2mp3 and tracklist2mp3."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .display import MixDisplay, ProgressTracker
from ..core.cancellation import CancellationToken, cancel_on_signals
from ..core.config import AppInfo, LoggingConfig
from ..core.exceptions import (
    ExitCode,
    MissingArgumentError,
    MixSplitError,
    PipelineCancelledError,
)
from ..pipeline.models import SplitResult
from ..pipeline.services import cue_to_segments, tracklist_to_cue, tracklist_to_segments

TRACKLIST2CUE_USAGE = (
    "tracklist2cue <path/to/your/tracklist.txt> <path/to/output/cue_file.cue> "
    '"album title" <path/to/your/audio.mp3>'
)
CUE2MP3_USAGE = (
    "cue2mp3 <path/to/your/cue_file.cue> <path/to/your/output_folder>"
)
TRACKLIST2MP3_USAGE = (
    "tracklist2mp3 <path/to/your/tracklist.txt> <path/to/your/audio.mp3> "
    '"album title" <path/to/your/output_folder>'
)

# Initialize Rich consoles and Typer apps
console = Console()
display = MixDisplay(console)
progress = ProgressTracker(console)

tracklist2cue_app = typer.Typer(
    name="tracklist2cue",
    help="Convert a plain-text mix tracklist into a CUE sheet.",
    rich_markup_mode="rich",
    add_completion=False,
)
cue2mp3_app = typer.Typer(
    name="cue2mp3",
    help="Split the audio file referenced by a CUE sheet into track files.",
    rich_markup_mode="rich",
    add_completion=False,
)
tracklist2mp3_app = typer.Typer(
    name="tracklist2mp3",
    help="Build a CUE sheet from a tracklist and split the mix with it.",
    rich_markup_mode="rich",
    add_completion=False,
)


def require_arguments(usage: str, **arguments: Optional[str]) -> None:
    """Stop with a usage message when any positional argument is missing."""
    if not all(arguments.values()):
        display.show_usage(usage)
        raise typer.Exit(MissingArgumentError.exit_code)


def handle_error(error: Exception, show_hint: bool = False) -> None:
    """Centralized error handling."""
    if isinstance(error, MixSplitError):
        display.show_error_message(f"An error occurred: {error.message}")
        if error.details:
            display.show_hint(f"Details: {error.details}")
        exit_code = error.exit_code
    else:
        display.show_error_message(f"Unexpected error: {error}")
        exit_code = ExitCode.INPUT

    if show_hint:
        display.show_hint(AppInfo.TOOLS_HINT)

    raise typer.Exit(exit_code)


def _run_split(run, description: str) -> SplitResult:
    token = CancellationToken()
    try:
        with cancel_on_signals(token), progress.processing_progress(description):
            return run(token)
    except (KeyboardInterrupt, PipelineCancelledError):
        display.show_warning_message("Interrupted; files already written are kept.")
        raise typer.Exit(ExitCode.CANCELLED)


def _show_split_result(result: SplitResult) -> None:
    display.show_cue_tracks_table(result.document)
    if result.skipped_count:
        display.show_warning_message(
            f"{result.skipped_count} track(s) skipped because they have no length"
        )
    display.show_saved_files(result.track_files)
    display.show_success_message(
        f"Split into {len(result.track_files)} track files in "
        f"{result.track_files[0].file_path.parent if result.track_files else '-'}"
    )


@tracklist2cue_app.command()
def tracklist2cue(
    tracklist: Optional[str] = typer.Argument(None, help="Tracklist text file"),
    output_cue: Optional[str] = typer.Argument(None, help="CUE file to write"),
    album_title: Optional[str] = typer.Argument(None, help="Album title"),
    audio_file: Optional[str] = typer.Argument(
        None, help="Audio file name to reference from the sheet"
    ),
):
    """Convert a plain-text mix tracklist into a CUE sheet."""
    require_arguments(
        TRACKLIST2CUE_USAGE,
        tracklist=tracklist,
        output_cue=output_cue,
        album_title=album_title,
        audio_file=audio_file,
    )

    display.show_app_header("tracklist2cue")
    try:
        entries = tracklist_to_cue(
            Path(tracklist),
            Path(output_cue),
            album_title,
            audio_file,
            log_level=LoggingConfig.level(),
        )
    except MixSplitError as e:
        handle_error(e)

    display.show_tracklist_table(entries)
    display.show_success_message(f"Successfully created CUE file at: {output_cue}")


@cue2mp3_app.command()
def cue2mp3(
    cue_file: Optional[str] = typer.Argument(None, help="CUE sheet to split by"),
    output_folder: Optional[str] = typer.Argument(
        None, help="Folder for the track files"
    ),
):
    """Split the audio file referenced by a CUE sheet into track files."""
    require_arguments(CUE2MP3_USAGE, cue_file=cue_file, output_folder=output_folder)

    display.show_app_header("cue2mp3")
    try:
        result = _run_split(
            lambda token: cue_to_segments(
                Path(cue_file),
                Path(output_folder),
                log_level=LoggingConfig.level(),
                token=token,
            ),
            "Splitting tracks...",
        )
    except MixSplitError as e:
        handle_error(e, show_hint=True)

    _show_split_result(result)


@tracklist2mp3_app.command()
def tracklist2mp3(
    tracklist: Optional[str] = typer.Argument(None, help="Tracklist text file"),
    audio_file: Optional[str] = typer.Argument(None, help="Recording of the mix"),
    album_title: Optional[str] = typer.Argument(None, help="Album title"),
    output_folder: Optional[str] = typer.Argument(
        None, help="Folder for the CUE sheet and track files"
    ),
):
    """Build a CUE sheet from a tracklist and split the mix with it."""
    require_arguments(
        TRACKLIST2MP3_USAGE,
        tracklist=tracklist,
        audio_file=audio_file,
        album_title=album_title,
        output_folder=output_folder,
    )

    display.show_app_header("tracklist2mp3")
    sheets_written = []

    def show_sheet(cue_path: Path, entries) -> None:
        sheets_written.append(cue_path)
        display.show_tracklist_table(entries)
        display.show_info_message(f"CUE file: {cue_path}")

    try:
        result = _run_split(
            lambda token: tracklist_to_segments(
                Path(tracklist),
                Path(audio_file),
                album_title,
                Path(output_folder),
                log_level=LoggingConfig.level(),
                token=token,
                on_cue_written=show_sheet,
            ),
            "Splitting tracks...",
        )
    except MixSplitError as e:
        # the tools hint only applies once the sheet is written
        handle_error(e, show_hint=bool(sheets_written))

    _show_split_result(result)
