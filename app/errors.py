"""
异常定义

所有字幕提取相关的错误都继承自 TranscriptError，
由 create_app() 中注册的异常处理器统一转换为 JSON 响应
"""


class TranscriptError(Exception):
    """字幕提取失败的基类（默认 500）"""

    status_code: int = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InvalidInput(TranscriptError):
    """请求体缺失 / 链接不合法"""

    status_code = 400


class MethodNotAllowed(TranscriptError):
    status_code = 405


class UpstreamUnavailable(TranscriptError):
    """访问元数据接口或启动下载器失败（网络错误、超时等）"""


class UpstreamUnparseable(TranscriptError):
    """上游返回的内容不是合法 JSON"""


class NoCaptions(TranscriptError):
    """视频没有任何字幕轨道"""


class NoEnglishTrack(TranscriptError):
    """存在字幕轨道，但没有英文字幕"""


class NoSubtitleFileProduced(TranscriptError):
    """下载器正常退出，但没有生成字幕文件"""


class DownloaderFailed(TranscriptError):
    """下载器以非零状态码退出"""

    def __init__(self, returncode: int, stderr: str = ""):
        super().__init__(f"yt-dlp failed with code {returncode}: {stderr.strip()}")
        self.returncode = returncode
        self.stderr = stderr


class MissingDependency(Exception):
    """启动时找不到外部依赖（例如 yt-dlp 可执行文件）"""
