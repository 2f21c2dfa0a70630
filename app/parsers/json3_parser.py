"""
事件 JSON (json3) 字幕解析器

格式示例:
    {"events": [{"tStartMs": 65000, "dDurationMs": 2000,
                 "segs": [{"utf8": "hello "}, {"utf8": "world"}]}]}

没有 segs 的事件（样式、换行占位等）直接跳过
"""
import logging
from typing import Any, List

from app.models.transcript import TranscriptEntry
from app.utils.timefmt import format_ms

logger = logging.getLogger(__name__)


def parse_json3(document: Any) -> List[TranscriptEntry]:
    """
    将 json3 文档转换为字幕列表

    :param document: 已解码的 JSON 对象
    :return: 按时间顺序排列的字幕，空文本已过滤
    """
    if not isinstance(document, dict):
        return []
    events = document.get("events")
    if not isinstance(events, list):
        return []

    entries: List[TranscriptEntry] = []
    for event in events:
        if not isinstance(event, dict) or "segs" not in event:
            continue

        segs = event.get("segs") or []
        text = "".join(
            seg.get("utf8") or "" for seg in segs if isinstance(seg, dict)
        ).strip()
        if not text:
            continue

        start_ms = int(event.get("tStartMs") or 0)
        entries.append(
            TranscriptEntry(timestamp=format_ms(start_ms), text=text, start_ms=start_ms)
        )

    logger.debug(f"[json3] 事件数={len(events)}, 有效字幕={len(entries)}")
    return entries
