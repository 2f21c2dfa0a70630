"""
字幕 API 路由

  1. POST    /extract-transcript        — 提取字幕，返回 JSON
  2. POST    /extract-transcript/text   — 提取字幕，返回可下载的纯文本
  3. OPTIONS /extract-transcript        — 非 CORS 的 OPTIONS 请求，返回空 200
  4. GET     /health                    — 健康检查
"""
import logging

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from app.errors import InvalidInput, TranscriptError
from app.models.api import ExtractRequest, ExtractResponse
from app.models.transcript import TranscriptResult
from app.services.export import EXPORT_FILENAME, to_plain_text
from app.services.transcript_service import TranscriptService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["字幕"])

# 全局单例 service
_transcript_service = TranscriptService()


# ==================== API Endpoints ====================


@router.post("/extract-transcript", summary="提取字幕", response_model=ExtractResponse)
def extract_transcript(req: ExtractRequest):
    """
    提取视频英文字幕

    返回按时间顺序排列的 {timestamp, text} 列表
    """
    result = _run_extract(req)
    return ExtractResponse.from_result(result)


@router.post("/extract-transcript/text", summary="提取字幕（纯文本）")
def extract_transcript_text(req: ExtractRequest):
    """以 "[时间] 文本" 纯文本形式返回字幕，作为附件下载"""
    result = _run_extract(req)
    return PlainTextResponse(
        to_plain_text(result.entries),
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.options("/extract-transcript", include_in_schema=False)
@router.options("/extract-transcript/text", include_in_schema=False)
def preflight():
    return Response(status_code=200)


@router.get("/health", summary="健康检查")
def health():
    return {"status": "ok", "caption_source": _transcript_service.source.name}


# ==================== 执行 ====================


def _run_extract(req: ExtractRequest) -> TranscriptResult:
    """调用 Pipeline，统一记录失败日志"""
    try:
        return _transcript_service.extract(req.url)
    except InvalidInput as e:
        logger.info(f"[API] 请求无效: {e.message}, url={req.url!r}")
        raise
    except TranscriptError as e:
        logger.error(f"[API] 提取失败: url={req.url}, error={e}")
        raise
    except Exception as e:
        logger.error(f"[API] 提取异常: url={req.url}, error={e}", exc_info=True)
        raise TranscriptError(str(e)) from e
