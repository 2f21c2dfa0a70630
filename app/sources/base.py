"""
字幕来源抽象基类
所有字幕来源（平台接口 / yt-dlp）都需要继承此类并实现 list_tracks 与 fetch_transcript
"""
from abc import ABC, abstractmethod
from typing import List

from app.models.transcript import CaptionTrack, TranscriptEntry


class CaptionSource(ABC):
    """字幕来源基类"""

    #: 来源名称，写入 TranscriptResult.source
    name: str = ""

    @abstractmethod
    def list_tracks(self, video_id: str) -> List[CaptionTrack]:
        """
        获取视频可用的字幕轨道

        :param video_id: 11 位视频 ID
        :return: 字幕轨道列表，没有字幕时返回空列表
        """
        ...

    @abstractmethod
    def fetch_transcript(self, track: CaptionTrack) -> List[TranscriptEntry]:
        """
        下载并解析指定字幕轨道

        :param track: 由 list_tracks 返回的轨道
        :return: 标准化后的字幕列表
        """
        ...
