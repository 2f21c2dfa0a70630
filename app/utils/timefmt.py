"""
时间格式化工具
"""
import re
from typing import Optional

_CUE_TIME_RE = re.compile(r"^(?:(\d+):)?(\d{1,2}):(\d{2})[.,](\d{3})$")


def format_timestamp(total_seconds: int) -> str:
    """
    将秒数格式化为展示用时间

    超过 1 小时为 H:MM:SS，否则为 M:SS
    """
    total_seconds = int(total_seconds)
    hours, rem = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rem, 60)
    if total_seconds >= 3600:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_ms(ms: int) -> str:
    """毫秒 -> 展示用时间（向下取整到秒）"""
    return format_timestamp(int(ms) // 1000)


def parse_cue_time(value: str) -> Optional[int]:
    """
    解析 VTT 时间 (HH:MM:SS.mmm 或 MM:SS.mmm) 为毫秒

    无法解析时返回 None
    """
    match = _CUE_TIME_RE.match(value.strip())
    if not match:
        return None
    hours, minutes, seconds, millis = match.groups()
    return (
        int(hours or 0) * 3_600_000
        + int(minutes) * 60_000
        + int(seconds) * 1000
        + int(millis)
    )
