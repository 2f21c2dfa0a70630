"""
Transcript 服务配置模块
从 .env 文件加载所有配置项，提供全局单例 settings
"""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """全局配置"""

    # 服务
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8900"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # 字幕来源: innertube / ytdlp
    caption_source: str = os.getenv("CAPTION_SOURCE", "innertube")

    # 平台内部接口
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "15"))
    innertube_client_version: str = os.getenv("INNERTUBE_CLIENT_VERSION", "2.20240726.00.00")
    user_agent: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36",
    )

    # yt-dlp (可以是绝对路径，也可以是 PATH 中的命令名)
    ytdlp_path: str = os.getenv("YTDLP_PATH", "yt-dlp")
    downloader_timeout: float = float(os.getenv("DOWNLOADER_TIMEOUT", "120"))
    # 临时目录根路径，留空则使用系统临时目录
    scratch_dir: str = os.getenv("SCRATCH_DIR", "")


settings = Settings()
