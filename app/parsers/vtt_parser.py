"""
WebVTT 字幕解析器

逐行扫描:
  - 跳过 WEBVTT 头、空行、NOTE 注释
  - 遇到含 "-->" 的时间行时，把累积的文本按上一个时间输出
  - 其余行视为字幕文本，追加到当前缓冲
时间直接使用时间行中 "-->" 之前的原始字符串
"""
from typing import List

from app.models.transcript import TranscriptEntry
from app.utils.timefmt import parse_cue_time

CUE_SEPARATOR = "-->"


def parse_vtt(content: str) -> List[TranscriptEntry]:
    """
    将 VTT 文本转换为字幕列表

    没有文本的时间段不会输出
    """
    entries: List[TranscriptEntry] = []
    current_text = ""
    current_timestamp = ""

    def flush():
        text = current_text.strip()
        if text and current_timestamp:
            entries.append(
                TranscriptEntry(
                    timestamp=current_timestamp,
                    text=text,
                    start_ms=parse_cue_time(current_timestamp),
                )
            )

    for raw_line in content.splitlines():
        line = raw_line.strip()

        if line == "WEBVTT" or not line or line.startswith("NOTE"):
            continue

        if CUE_SEPARATOR in line:
            flush()
            current_timestamp = line.split(CUE_SEPARATOR, 1)[0].strip()
            current_text = ""
        else:
            current_text += line + " "

    flush()
    return entries
