"""
Transcript - 视频字幕提取服务
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import MethodNotAllowed, TranscriptError
from app.middleware.cors import EmptyPreflightCORSMiddleware


def create_app() -> FastAPI:
    from app.routers import transcript

    app = FastAPI(
        title="Transcript",
        description="视频字幕提取 API — 输入视频链接，输出带时间戳的英文字幕",
        version="0.1.0",
    )
    app.add_middleware(
        EmptyPreflightCORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TranscriptError, _transcript_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.include_router(transcript.router)
    return app


async def _transcript_error_handler(request: Request, exc: TranscriptError) -> JSONResponse:
    if exc.status_code < 500:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "Failed to extract transcript", "details": exc.message},
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """路由层错误（405 / 404 ...）也使用 {error} 结构"""
    if exc.status_code == 405:
        response = await _transcript_error_handler(request, MethodNotAllowed("Method not allowed"))
    else:
        response = JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})
    if exc.headers:
        response.headers.update(exc.headers)
    return response
