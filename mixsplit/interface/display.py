"""Rich console display components for mixsplit."""

from contextlib import contextmanager
from typing import List, Optional

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table
from rich.text import Text

from ..core.config import AppInfo
from ..core.timecode import seconds_to_clock_string
from ..cue.models import CueDocument
from ..splitting.models import TrackFile
from ..tracklist.models import TracklistEntry


class MixDisplay:
    """Handles all rich console output for the command-line tools."""

    def __init__(
        self, console: Optional[Console] = None, err_console: Optional[Console] = None
    ):
        """Initialize with optional console instances."""
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def show_app_header(self, command: str) -> None:
        """Display application header with branding."""
        header_text = Text()
        header_text.append(AppInfo.NAME.upper(), style="bold blue")
        header_text.append(f" v{AppInfo.VERSION}", style="dim")
        header_text.append(f"\n{command}", style="italic")

        panel = Panel(Align.center(header_text), border_style="blue", padding=(0, 2))
        self.console.print(panel)

    def show_tracklist_table(self, entries: List[TracklistEntry]) -> None:
        """Display parsed tracklist entries."""
        table = Table(title="Parsed Tracklist")
        table.add_column("Track", justify="right", style="cyan", no_wrap=True)
        table.add_column("Time", justify="right", style="green")
        table.add_column("Artist", style="magenta")
        table.add_column("Title", style="blue")

        for number, entry in enumerate(entries, 1):
            table.add_row(
                f"{number:02d}",
                entry.timestamp,
                escape(entry.artist) or "-",
                escape(entry.title),
            )

        self.console.print(table)

    def show_cue_tracks_table(self, document: CueDocument) -> None:
        """Display the tracks of a parsed CUE sheet in start order."""
        title = "CUE Tracks"
        if document.album_title:
            title += f": {escape(document.album_title)}"

        table = Table(title=title)
        table.add_column("Track", justify="right", style="cyan", no_wrap=True)
        table.add_column("Index", justify="right", style="yellow")
        table.add_column("Start", justify="right", style="green")
        table.add_column("Performer", style="magenta")
        table.add_column("Title", style="blue")

        for track in document.tracks:
            table.add_row(
                str(track.track_number),
                str(track.index_time),
                seconds_to_clock_string(track.start_seconds),
                escape(track.performer),
                escape(track.title),
            )

        self.console.print(table)

    def show_saved_files(self, files: List[TrackFile]) -> None:
        """Display written track files."""
        table = Table(title="Generated Track Files")
        table.add_column("Track", justify="right", style="cyan")
        table.add_column("Filename", style="magenta")
        table.add_column("Duration", justify="right", style="green")

        for file in files:
            table.add_row(str(file.track_number), escape(file.filename), file.duration)

        self.console.print(table)

    def show_success_message(self, message: str) -> None:
        """Display a success message."""
        self.console.print(f"[green]✓ {escape(message)}[/green]")

    def show_warning_message(self, message: str) -> None:
        """Display a warning message."""
        self.err_console.print(f"[yellow]⚠ {escape(message)}[/yellow]")

    def show_error_message(self, message: str) -> None:
        """Display an error message."""
        self.err_console.print(f"[red]✗ {escape(message)}[/red]")

    def show_info_message(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(f"[blue]ℹ {escape(message)}[/blue]")

    def show_usage(self, usage: str) -> None:
        """Display a usage line on stderr."""
        self.err_console.print(f"Usage: {escape(usage)}", highlight=False)

    def show_hint(self, message: str) -> None:
        """Display a dimmed hint on stderr."""
        self.err_console.print(f"[dim]{escape(message)}[/dim]")


class ProgressTracker:
    """Manages progress spinners and status updates."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize with optional console instance."""
        self.console = console or Console()

    @contextmanager
    def processing_progress(self, description: str):
        """Context manager for a spinner around a long-running step.

        The spinner is marked complete only when the block exits normally.
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=False,
        ) as progress:
            task = progress.add_task(description, total=None)
            yield progress, task
            progress.update(
                task, description=f"✓ {description.replace('...', ' complete!')}"
            )
