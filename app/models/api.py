"""
API 请求 / 响应模型 (Pydantic)
"""
from typing import List, Optional

from pydantic import BaseModel

from app.models.transcript import TranscriptResult


class ExtractRequest(BaseModel):
    """提取字幕的请求体"""
    url: Optional[str] = None                          # 视频链接


class TranscriptEntryOut(BaseModel):
    timestamp: str
    text: str
    start_ms: Optional[int] = None


class ExtractResponse(BaseModel):
    """提取成功的返回结果"""
    success: bool = True
    transcript: List[TranscriptEntryOut]
    url: str
    video_id: str
    language_code: str
    is_generated: bool

    @classmethod
    def from_result(cls, result: TranscriptResult) -> "ExtractResponse":
        return cls(
            transcript=[
                TranscriptEntryOut(
                    timestamp=e.timestamp,
                    text=e.text,
                    start_ms=e.start_ms,
                )
                for e in result.entries
            ],
            url=result.url,
            video_id=result.video_id,
            language_code=result.language_code,
            is_generated=result.is_generated,
        )


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
