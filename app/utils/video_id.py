"""
从视频链接中提取 11 位视频 ID
"""
import re
from typing import Optional

# 域名 + 路径一起匹配: youtube.com/watch?v= / embed/ / v/ / shorts/ / live/ 以及 youtu.be/
_VIDEO_ID_RE = re.compile(
    r"^(?:https?://)?(?:[A-Za-z0-9-]+\.)*"
    r"(?:youtube\.com/(?:watch\?(?:[^#]*&)?v=|embed/|v/|shorts/|live/)|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])"
)

_PLATFORM_URL_RE = re.compile(
    r"^(https?://)?(www\.|m\.)?(youtube\.com|youtu\.be)/.+", re.IGNORECASE
)


def extract_video_id(url: str) -> Optional[str]:
    """
    提取视频 ID

    :param url: 任意形式的视频链接
    :return: 11 位视频 ID，非平台链接或无法识别时返回 None
    """
    if not isinstance(url, str):
        return None
    match = _VIDEO_ID_RE.match(url.strip())
    return match.group(1) if match else None


def is_platform_url(url: str) -> bool:
    """判断链接是否属于视频平台域名"""
    if not isinstance(url, str):
        return False
    return bool(_PLATFORM_URL_RE.match(url.strip()))


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"
