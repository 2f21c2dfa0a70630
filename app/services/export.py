"""
纯文本导出（复制 / 下载用）
"""
from typing import Iterable

from app.models.transcript import TranscriptEntry

EXPORT_FILENAME = "youtube-transcript.txt"


def to_plain_text(entries: Iterable[TranscriptEntry]) -> str:
    """每条字幕输出为 "[时间] 文本"，条目之间空一行"""
    return "".join(f"[{e.timestamp}] {e.text}\n\n" for e in entries)
