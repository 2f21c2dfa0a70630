"""
字幕提取核心 Pipeline
编排整个流程: 链接 → 视频 ID → 字幕轨道 → 选择英文轨道 → 下载解析
"""
import logging
from typing import Optional

from app.errors import InvalidInput, NoCaptions, NoEnglishTrack
from app.models.transcript import TranscriptResult
from app.services.track_selector import select_english_track
from app.sources import CaptionSource, create_caption_source
from app.utils.video_id import extract_video_id, is_platform_url

logger = logging.getLogger(__name__)


class TranscriptService:
    """
    视频字幕提取服务

    Pipeline 流程:
    1. 校验链接并提取视频 ID
    2. 从字幕来源获取轨道列表 (平台接口 / yt-dlp)
    3. 按优先级选择英文轨道
    4. 下载字幕并标准化为 {timestamp, text} 列表

    不做缓存，每次请求都重新获取；任一步失败整体失败，不返回部分结果
    """

    def __init__(self, source: Optional[CaptionSource] = None):
        self.source: CaptionSource = source or create_caption_source()
        logger.info(f"[TranscriptService] 初始化完成: source={self.source.name}")

    def extract(self, url: Optional[str]) -> TranscriptResult:
        """
        主流程入口: 视频 URL → 字幕

        :param url: 用户提交的视频链接
        :return: TranscriptResult
        """
        if not url or not url.strip():
            raise InvalidInput("YouTube URL is required")
        url = url.strip()

        if not is_platform_url(url):
            raise InvalidInput("Invalid YouTube URL")

        video_id = extract_video_id(url)
        if video_id is None:
            raise InvalidInput("Invalid YouTube URL")

        # ---- Step 1: 字幕轨道 ----
        tracks = self.source.list_tracks(video_id)
        if not tracks:
            raise NoCaptions("No captions available for this video")

        # ---- Step 2: 选择英文轨道 ----
        track = select_english_track(tracks)
        if track is None:
            raise NoEnglishTrack(
                "No English transcript available. "
                f"Available languages: {', '.join(sorted({t.language_code for t in tracks}))}"
            )

        # ---- Step 3: 下载并解析 ----
        entries = self.source.fetch_transcript(track)

        logger.info(
            f"[Pipeline] 提取完成: video_id={video_id}, "
            f"lang={track.language_code}, asr={track.is_generated}, 条数={len(entries)}"
        )

        return TranscriptResult(
            video_id=video_id,
            url=url,
            language_code=track.language_code,
            is_generated=track.is_generated,
            source=self.source.name,
            entries=entries,
        )
