"""
基于平台内部播放器接口 (youtubei/v1/player) 的字幕来源

流程:
  1. POST 播放器接口，拿到视频元数据
  2. 读取 captions.playerCaptionsTracklistRenderer.captionTracks
  3. 以 fmt=json3 下载选中的字幕轨道并解析
"""
import logging
from typing import Any, List, Optional
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

import httpx

from app.config import settings
from app.errors import UpstreamUnavailable, UpstreamUnparseable
from app.models.transcript import CaptionTrack, TranscriptEntry
from app.parsers import parse_json3
from app.sources.base import CaptionSource

logger = logging.getLogger(__name__)

PLAYER_ENDPOINT = "https://www.youtube.com/youtubei/v1/player"


def extract_caption_tracks(metadata: Any) -> List[CaptionTrack]:
    """
    从播放器元数据中读取字幕轨道

    视频无字幕或地区限制时该路径不存在，此时返回空列表
    """
    try:
        raw_tracks = metadata["captions"]["playerCaptionsTracklistRenderer"]["captionTracks"]
    except (KeyError, TypeError):
        return []
    if not isinstance(raw_tracks, list):
        return []

    tracks = []
    for raw in raw_tracks:
        if not isinstance(raw, dict) or not raw.get("baseUrl"):
            continue
        name = raw.get("name") or {}
        tracks.append(
            CaptionTrack(
                language_code=raw.get("languageCode", ""),
                kind=raw.get("kind"),
                base_url=raw["baseUrl"],
                name=name.get("simpleText", "") if isinstance(name, dict) else "",
            )
        )
    return tracks


def _with_query(url: str, **params: str) -> str:
    """在 URL 上追加 / 覆盖查询参数"""
    parsed = urlparse(url)
    query = dict(parse_qsl(parsed.query, keep_blank_values=True))
    query.update(params)
    return urlunparse(parsed._replace(query=urlencode(query)))


class InnertubeCaptionSource(CaptionSource):
    """
    平台内部接口字幕来源

    接口会拒绝默认的客户端签名，必须带上浏览器 User-Agent 和 client 信息
    每次请求新建 httpx.Client，实例本身不持有连接，可在线程间共享
    """

    name = "innertube"

    def __init__(
        self,
        timeout: Optional[float] = None,
        client_version: Optional[str] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.client_version = client_version or settings.innertube_client_version
        self.headers = {
            "User-Agent": user_agent or settings.user_agent,
            "Accept-Language": "en-US,en;q=0.9",
        }
        # 测试时注入 httpx.MockTransport
        self.transport = transport

    # ---------- 播放器元数据 ----------

    def fetch_player_metadata(self, video_id: str) -> dict:
        """
        请求播放器接口

        :param video_id: 11 位视频 ID
        :return: 解码后的 JSON
        """
        payload = {
            "context": {
                "client": {
                    "clientName": "WEB",
                    "clientVersion": self.client_version,
                    "hl": "en",
                }
            },
            "videoId": video_id,
        }
        logger.info(f"[Innertube] 请求播放器元数据: video_id={video_id}")
        return self._request_json("POST", PLAYER_ENDPOINT, json=payload)

    def list_tracks(self, video_id: str) -> List[CaptionTrack]:
        metadata = self.fetch_player_metadata(video_id)
        tracks = extract_caption_tracks(metadata)
        logger.info(
            f"[Innertube] 字幕轨道: "
            f"{[(t.language_code, t.kind or 'manual') for t in tracks]}"
        )
        return tracks

    # ---------- 字幕下载 ----------

    def fetch_transcript(self, track: CaptionTrack) -> List[TranscriptEntry]:
        url = _with_query(track.base_url, fmt="json3")
        logger.info(f"[Innertube] 下载字幕: lang={track.language_code}, kind={track.kind}")
        document = self._request_json("GET", url)
        return parse_json3(document)

    def _request_json(self, method: str, url: str, **kwargs) -> Any:
        path = urlparse(url).path
        try:
            with httpx.Client(
                timeout=self.timeout,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                response = client.request(method, url, **kwargs)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"[Innertube] 接口返回错误: {e}")
            raise UpstreamUnavailable(
                f"Request to {path} failed with status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"[Innertube] 连接失败: {e}")
            raise UpstreamUnavailable(f"Request to {path} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamUnparseable(f"Response from {path} is not valid JSON") from e
