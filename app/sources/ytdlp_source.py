"""
基于 yt-dlp 命令行的字幕来源
以子进程方式调用 yt-dlp 下载英文自动字幕 (VTT)，每次请求使用独立的临时目录
"""
import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from app.config import settings
from app.errors import (
    DownloaderFailed,
    MissingDependency,
    NoSubtitleFileProduced,
    UpstreamUnavailable,
)
from app.models.transcript import CaptionTrack, TranscriptEntry
from app.parsers import parse_vtt
from app.sources.base import CaptionSource
from app.utils.video_id import watch_url

logger = logging.getLogger(__name__)


def resolve_executable(configured: str) -> str:
    """
    解析 yt-dlp 可执行文件路径

    :param configured: 配置值，可以是路径，也可以是 PATH 中的命令名
    :return: 可执行文件的绝对路径
    :raises MissingDependency: 找不到可执行文件
    """
    configured = (configured or "").strip()
    if not configured:
        raise MissingDependency("YTDLP_PATH is empty")

    if os.sep in configured or (os.altsep and os.altsep in configured):
        path = Path(configured).expanduser().resolve()
        if path.is_file() and os.access(path, os.X_OK):
            return str(path)
        raise MissingDependency(f"yt-dlp executable not found at {configured}")

    found = shutil.which(configured)
    if not found:
        raise MissingDependency(f"yt-dlp executable '{configured}' not found on PATH")
    return found


class YtdlpCaptionSource(CaptionSource):
    """
    yt-dlp 字幕来源

    yt-dlp 只负责下载英文自动字幕，因此 list_tracks 只返回一条 en/asr 轨道
    """

    name = "ytdlp"

    def __init__(
        self,
        executable: Optional[str] = None,
        scratch_root: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.executable = resolve_executable(executable or settings.ytdlp_path)
        self.scratch_root = scratch_root or settings.scratch_dir or None
        self.timeout = timeout if timeout is not None else settings.downloader_timeout
        logger.info(f"[yt-dlp] 初始化完成: executable={self.executable}")

    def list_tracks(self, video_id: str) -> List[CaptionTrack]:
        return [CaptionTrack(language_code="en", kind="asr", base_url=watch_url(video_id))]

    def build_command(self, url: str, output_dir: str) -> List[str]:
        return [
            self.executable,
            "--write-auto-sub",
            "--sub-lang", "en",
            "--sub-format", "vtt",
            "--skip-download",
            "--output", os.path.join(output_dir, "%(id)s.%(ext)s"),
            url,
        ]

    def fetch_transcript(self, track: CaptionTrack) -> List[TranscriptEntry]:
        """
        下载并解析 VTT 字幕

        临时目录在所有退出路径上都会被删除
        """
        if self.scratch_root:
            os.makedirs(self.scratch_root, exist_ok=True)
        scratch_dir = tempfile.mkdtemp(prefix="yt-", dir=self.scratch_root)
        try:
            vtt_path = self._download(track.base_url, scratch_dir)
            content = vtt_path.read_text(encoding="utf-8")
            return parse_vtt(content)
        finally:
            shutil.rmtree(scratch_dir, ignore_errors=True)
            logger.debug(f"[yt-dlp] 已清理临时目录: {scratch_dir}")

    def _download(self, url: str, scratch_dir: str) -> Path:
        cmd = self.build_command(url, scratch_dir)
        logger.info(f"[yt-dlp] 下载字幕: URL={url}")

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise UpstreamUnavailable(f"yt-dlp timed out after {self.timeout}s") from e
        except OSError as e:
            raise UpstreamUnavailable(f"Failed to spawn yt-dlp: {e}") from e

        if proc.returncode != 0:
            logger.warning(f"[yt-dlp] 退出码={proc.returncode}, stderr={proc.stderr.strip()}")
            raise DownloaderFailed(proc.returncode, proc.stderr)

        vtt_files = sorted(Path(scratch_dir).glob("*.vtt"))
        if not vtt_files:
            raise NoSubtitleFileProduced(
                "No transcript file found. Video may not have subtitles."
            )
        if len(vtt_files) > 1:
            logger.warning(
                f"[yt-dlp] 生成了多个字幕文件，使用 {vtt_files[0].name}: "
                f"{[p.name for p in vtt_files]}"
            )
        return vtt_files[0]
