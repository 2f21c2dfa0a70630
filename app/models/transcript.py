"""
字幕数据模型
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class CaptionTrack:
    """单条可用字幕轨道的元数据"""
    language_code: str             # 语言代码 (en / en-GB / es ...)
    kind: Optional[str]            # "asr" 表示自动生成，人工字幕为 None
    base_url: str                  # 字幕下载地址
    name: str = ""                 # 轨道显示名称

    @property
    def is_generated(self) -> bool:
        return self.kind == "asr"


@dataclass
class TranscriptEntry:
    """单条字幕"""
    timestamp: str                  # 展示用时间 (M:SS / H:MM:SS，或 VTT 原始起始时间)
    text: str                       # 合并后的字幕文本
    start_ms: Optional[int] = None  # 起始时间（毫秒）


@dataclass
class TranscriptResult:
    """一次提取的完整结果"""
    video_id: str
    url: str
    language_code: str
    is_generated: bool
    source: str                                    # innertube / ytdlp
    entries: List[TranscriptEntry] = field(default_factory=list)
