import subprocess
from pathlib import Path

import pytest

from mixsplit.cue.models import CueDocument, CueTrackEntry
from mixsplit.core.timecode import CueTime
from mixsplit.splitting import tools

SAMPLE_TRACKLIST = """
0:05 Artist One - First Track
3:30 Artist Two - Second Track (Extended Mix)
1:02:03 Artist Three - Third - Track
"""


def make_track(number, start, title=None, performer=None):
    minutes, seconds = divmod(int(start), 60)
    return CueTrackEntry(
        track_number=number,
        title=title or f"Title {number}",
        performer=performer or f"Artist {number}",
        index_time=CueTime(minutes, seconds, 0),
        start_seconds=float(start),
    )


def make_document(starts, album_title="My Mix", album_performer=None):
    return CueDocument(
        audio_file_name="mix.mp3",
        tracks=[make_track(i, start) for i, start in enumerate(starts, 1)],
        album_title=album_title,
        album_performer=album_performer,
    )


class FakeTools:
    """Stands in for ffprobe and ffmpeg behind ``subprocess.run``."""

    def __init__(self, duration="120.0", fail_on_call=None, stderr="boom"):
        self.duration = duration
        self.fail_on_call = fail_on_call
        self.stderr = stderr
        self.calls = []
        self.on_ffmpeg = None

    @property
    def ffmpeg_calls(self):
        return [cmd for cmd in self.calls if Path(cmd[0]).name == "ffmpeg"]

    @property
    def ffprobe_calls(self):
        return [cmd for cmd in self.calls if Path(cmd[0]).name == "ffprobe"]

    def run(self, cmd, **kwargs):
        self.calls.append(cmd)
        if Path(cmd[0]).name == "ffprobe":
            return subprocess.CompletedProcess(cmd, 0, stdout=f"{self.duration}\n", stderr="")

        if self.fail_on_call is not None and len(self.ffmpeg_calls) == self.fail_on_call:
            return subprocess.CompletedProcess(cmd, 1, stdout="", stderr=self.stderr)

        Path(cmd[-1]).write_bytes(b"")
        if self.on_ffmpeg:
            self.on_ffmpeg(cmd)
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


@pytest.fixture
def fake_tools(monkeypatch):
    fake = FakeTools()
    monkeypatch.setattr(tools, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.delenv("MIXSPLIT_FFMPEG", raising=False)
    monkeypatch.delenv("MIXSPLIT_FFPROBE", raising=False)
    return fake


@pytest.fixture
def missing_tools(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("no process should be started")

    monkeypatch.setattr(tools, "which", lambda name: None)
    monkeypatch.setattr(subprocess, "run", fail)


@pytest.fixture
def tracklist_file(tmp_path):
    path = tmp_path / "set.txt"
    path.write_text(SAMPLE_TRACKLIST, encoding="utf-8")
    return path


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "mix.mp3"
    path.write_bytes(b"ID3")
    return path
