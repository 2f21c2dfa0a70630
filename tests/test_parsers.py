from app.parsers import parse_json3, parse_vtt
from app.utils.timefmt import format_ms, format_timestamp, parse_cue_time


# -------- 时间格式化 --------

def test_format_timestamp():
    assert format_timestamp(3661) == "1:01:01"
    assert format_timestamp(3600) == "1:00:00"
    assert format_timestamp(65) == "1:05"
    assert format_timestamp(5) == "0:05"
    assert format_timestamp(3599) == "59:59"


def test_format_ms_floors_to_seconds():
    assert format_ms(65999) == "1:05"
    assert format_ms(0) == "0:00"


def test_parse_cue_time():
    assert parse_cue_time("00:00:01.000") == 1000
    assert parse_cue_time("01:01:01.500") == 3661500
    assert parse_cue_time("01:05.250") == 65250
    assert parse_cue_time("garbage") is None


# -------- json3 --------

def test_json3_concatenates_segments():
    doc = {"events": [{"tStartMs": 65000, "segs": [{"utf8": "a"}, {"utf8": "b"}]}]}
    entries = parse_json3(doc)
    assert [(e.timestamp, e.text) for e in entries] == [("1:05", "ab")]
    assert entries[0].start_ms == 65000


def test_json3_drops_whitespace_only_and_segless_events():
    doc = {
        "events": [
            {"tStartMs": 0, "dDurationMs": 1000},
            {"tStartMs": 1000, "segs": [{"utf8": "  "}]},
            {"tStartMs": 2000, "segs": [{"utf8": "\n"}, {}]},
            {"tStartMs": 3000, "segs": [{"utf8": " hi "}, {"acAsrConf": 0}]},
        ]
    }
    entries = parse_json3(doc)
    assert [(e.timestamp, e.text) for e in entries] == [("0:03", "hi")]


def test_json3_missing_start_defaults_to_zero():
    entries = parse_json3({"events": [{"segs": [{"utf8": "x"}]}]})
    assert entries[0].timestamp == "0:00"
    assert entries[0].start_ms == 0


def test_json3_long_video_uses_hours():
    entries = parse_json3({"events": [{"tStartMs": 3661000, "segs": [{"utf8": "late"}]}]})
    assert entries[0].timestamp == "1:01:01"


def test_json3_without_events():
    assert parse_json3({}) == []
    assert parse_json3({"events": None}) == []
    assert parse_json3([]) == []


# -------- vtt --------

def test_vtt_joins_text_lines():
    content = "WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nhello\nworld\n"
    entries = parse_vtt(content)
    assert len(entries) == 1
    assert entries[0].timestamp == "00:00:01.000"
    assert entries[0].text == "hello world"
    assert entries[0].start_ms == 1000


def test_vtt_cue_without_text_is_dropped():
    content = (
        "WEBVTT\n\n"
        "00:00:01.000 --> 00:00:02.000\n"
        "00:00:02.000 --> 00:00:03.000 align:start position:0%\n"
        "second\n"
    )
    entries = parse_vtt(content)
    assert [(e.timestamp, e.text) for e in entries] == [("00:00:02.000", "second")]


def test_vtt_skips_notes_and_blank_lines():
    content = (
        "WEBVTT\n"
        "\n"
        "NOTE this is a comment\n"
        "\n"
        "00:00:01.000 --> 00:00:02.000\n"
        "first\n"
        "\n"
        "00:01:05.500 --> 00:01:07.000\n"
        "second line\n"
    )
    entries = parse_vtt(content)
    assert [(e.timestamp, e.text) for e in entries] == [
        ("00:00:01.000", "first"),
        ("00:01:05.500", "second line"),
    ]


def test_vtt_text_before_first_cue_is_ignored():
    entries = parse_vtt("WEBVTT\nKind: captions\nLanguage: en\n\n00:00:01.000 --> 00:00:02.000\nhi\n")
    assert [(e.timestamp, e.text) for e in entries] == [("00:00:01.000", "hi")]


def test_vtt_empty_content():
    assert parse_vtt("") == []
    assert parse_vtt("WEBVTT\n\n") == []
