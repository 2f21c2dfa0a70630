"""
英文字幕轨道选择
"""
from typing import Iterable, Optional

from app.models.transcript import CaptionTrack


def select_english_track(tracks: Iterable[CaptionTrack]) -> Optional[CaptionTrack]:
    """
    按优先级选择英文字幕，命中即返回

    1. en 人工字幕
    2. en 自动生成字幕
    3. 任意 en 开头的地区变体 (en-US / en-GB ...)
    """
    tracks = list(tracks)

    for track in tracks:
        if track.language_code == "en" and not track.is_generated:
            return track

    for track in tracks:
        if track.language_code == "en" and track.is_generated:
            return track

    for track in tracks:
        if track.language_code.startswith("en"):
            return track

    return None
