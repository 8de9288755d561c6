import logging

import pytest

from conftest import make_document, make_track

from mixsplit.core.cancellation import CancellationToken
from mixsplit.core.exceptions import (
    InputNotFoundError,
    MalformedCueError,
    PipelineCancelledError,
    ToolFailureError,
    ToolUnavailableError,
)
from mixsplit.cue.models import CueDocument
from mixsplit.splitting.services import SegmentSplitter


def test_split_issues_one_copy_per_track(fake_tools, audio_file, tmp_path):
    output_dir = tmp_path / "out" / "tracks"
    document = make_document([0, 30, 90], album_performer="DJ Host")

    files = SegmentSplitter().split(audio_file, document, output_dir)

    assert output_dir.is_dir()
    assert len(fake_tools.ffprobe_calls) == 1
    assert [f.filename for f in files] == [
        "Artist 1 - Title 1.mp3",
        "Artist 2 - Title 2.mp3",
        "Artist 3 - Title 3.mp3",
    ]
    assert [f.duration for f in files] == ["00:00:30.000", "00:01:00.000", "00:00:30.000"]

    second = fake_tools.ffmpeg_calls[1]
    assert second[1:8] == ["-i", str(audio_file), "-ss", "00:00:30.000", "-t", "00:01:00.000", "-y"]
    assert second[8:10] == ["-c", "copy"]
    assert second[10:20] == [
        "-metadata",
        "track=2",
        "-metadata",
        "title=Title 2",
        "-metadata",
        "artist=Artist 2",
        "-metadata",
        "album=My Mix",
        "-metadata",
        "album_artist=DJ Host",
    ]
    assert second[-1] == str(output_dir / "Artist 2 - Title 2.mp3")


def test_degenerate_window_produces_no_file(fake_tools, audio_file, tmp_path):
    document = make_document([10, 10])
    files = SegmentSplitter().split(audio_file, document, tmp_path / "out")
    assert len(files) == 1
    assert len(fake_tools.ffmpeg_calls) == 1


def test_missing_input_fails_before_probing(fake_tools, tmp_path):
    with pytest.raises(InputNotFoundError):
        SegmentSplitter().split(tmp_path / "nope.mp3", make_document([0]), tmp_path / "out")
    assert fake_tools.calls == []


def test_empty_document(fake_tools, audio_file, tmp_path):
    document = CueDocument(audio_file_name="mix.mp3", tracks=[])
    with pytest.raises(MalformedCueError):
        SegmentSplitter().split(audio_file, document, tmp_path / "out")


def test_missing_probe_aborts_before_extraction(missing_tools, audio_file, tmp_path):
    with pytest.raises(ToolUnavailableError) as exc:
        SegmentSplitter().split(audio_file, make_document([0, 30]), tmp_path / "out")
    assert exc.value.tool == "ffprobe"
    assert list((tmp_path / "out").iterdir()) == []


def test_first_failure_stops_the_run(fake_tools, audio_file, tmp_path):
    fake_tools.fail_on_call = 2
    fake_tools.stderr = "Invalid data found when processing input"

    with pytest.raises(ToolFailureError) as exc:
        SegmentSplitter().split(audio_file, make_document([0, 30, 90]), tmp_path / "out")

    assert exc.value.returncode == 1
    assert "Invalid data" in exc.value.stderr
    assert len(fake_tools.ffmpeg_calls) == 2
    assert [p.name for p in (tmp_path / "out").iterdir()] == ["Artist 1 - Title 1.mp3"]


def test_cancellation_stops_before_next_track(fake_tools, audio_file, tmp_path):
    token = CancellationToken()
    fake_tools.on_ffmpeg = lambda cmd: token.cancel("user abort")

    with pytest.raises(PipelineCancelledError):
        SegmentSplitter().split(audio_file, make_document([0, 30, 90]), tmp_path / "out", token)

    assert len(fake_tools.ffmpeg_calls) == 1
    assert (tmp_path / "out" / "Artist 1 - Title 1.mp3").exists()


def test_colliding_names_overwrite_with_warning(fake_tools, audio_file, tmp_path, caplog):
    caplog.set_level(logging.WARNING, logger="mixsplit")
    document = make_document([])
    document.tracks = [
        make_track(1, 0, title="Intro!", performer="DJ"),
        make_track(2, 60, title="Intro?", performer="DJ"),
    ]

    files = SegmentSplitter().split(audio_file, document, tmp_path / "out")

    assert [f.filename for f in files] == ["DJ - Intro.mp3", "DJ - Intro.mp3"]
    assert len(list((tmp_path / "out").iterdir())) == 1
    assert "Track 2 overwrites DJ - Intro.mp3 written for track 1" in caplog.text
