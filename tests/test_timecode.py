import pytest

from mixsplit.core.timecode import (
    CueTime,
    clock_timestamp_to_frame_notation,
    cue_frame_time_to_seconds,
    seconds_to_clock_string,
)


def test_frame_time_to_seconds_uses_75_frames():
    seconds = cue_frame_time_to_seconds(CueTime(minutes=1, seconds=30, frames=37))
    assert seconds == pytest.approx(90 + 37 / 75)


def test_clock_string_rounds_milliseconds():
    assert seconds_to_clock_string(90 + 37 / 75) == "00:01:30.493"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00:00.000"),
        (59.9994, "00:00:59.999"),
        (3723.5, "01:02:03.500"),
        (2.0006, "00:00:02.001"),
        (36000, "10:00:00.000"),
    ],
)
def test_clock_string_formats(seconds, expected):
    assert seconds_to_clock_string(seconds) == expected


def test_frame_notation_appends_zero_frames():
    assert clock_timestamp_to_frame_notation("12:34") == "12:34:00"
    assert clock_timestamp_to_frame_notation("1:02:03") == "1:02:03:00"


def test_parse_cue_time():
    assert CueTime.parse("01:30:37") == CueTime(1, 30, 37)
    assert CueTime.parse("120:00:74") == CueTime(120, 0, 74)


def test_parse_cue_time_folds_hours():
    time = CueTime.parse("1:02:03:00")
    assert time == CueTime(62, 3, 0)
    assert str(time) == "62:03:00"
    assert cue_frame_time_to_seconds(time) == 3723


@pytest.mark.parametrize("value", ["1:30", "00:60:00", "00:00:75", "aa:bb:cc", "1:60:00:00", ""])
def test_parse_cue_time_rejects_invalid(value):
    with pytest.raises(ValueError):
        CueTime.parse(value)
