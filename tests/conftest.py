import os

import pytest

# 测试期间固定使用平台接口来源，避免依赖本机 yt-dlp
os.environ.setdefault("CAPTION_SOURCE", "innertube")

from app.models.transcript import CaptionTrack, TranscriptEntry  # noqa: E402
from app.sources.base import CaptionSource  # noqa: E402


class FakeCaptionSource(CaptionSource):
    """内存中的字幕来源，记录调用参数"""

    name = "fake"

    def __init__(self, tracks=None, entries=None, error=None):
        self.tracks = tracks if tracks is not None else []
        self.entries = entries if entries is not None else []
        self.error = error
        self.listed = []
        self.fetched = []

    def list_tracks(self, video_id):
        self.listed.append(video_id)
        return list(self.tracks)

    def fetch_transcript(self, track):
        self.fetched.append(track)
        if self.error is not None:
            raise self.error
        return list(self.entries)


@pytest.fixture
def fake_source():
    return FakeCaptionSource(
        tracks=[
            CaptionTrack("en", "asr", "https://example.com/asr"),
            CaptionTrack("en", None, "https://example.com/manual"),
        ],
        entries=[
            TranscriptEntry("0:01", "hello", 1000),
            TranscriptEntry("1:05", "world", 65000),
        ],
    )
