"""
字幕来源
"""
from typing import Optional

from app.config import settings
from app.sources.base import CaptionSource


def create_caption_source(source_type: Optional[str] = None) -> CaptionSource:
    """根据配置创建字幕来源实例"""
    s_type = (source_type or settings.caption_source).lower()

    if s_type == "innertube":
        from app.sources.innertube_source import InnertubeCaptionSource
        return InnertubeCaptionSource()

    elif s_type == "ytdlp":
        from app.sources.ytdlp_source import YtdlpCaptionSource
        return YtdlpCaptionSource()

    else:
        raise ValueError(f"不支持的字幕来源: {s_type}，可选: innertube / ytdlp")


__all__ = ["CaptionSource", "create_caption_source"]
