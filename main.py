"""
Transcript — 视频字幕提取服务

启动命令:
    python main.py
    或
    uvicorn main:app --host 0.0.0.0 --port 8900 --reload
"""
import logging

import uvicorn

from app import create_app
from app.config import settings

# 配置日志
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s │ %(levelname)-7s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("transcript")

app = create_app()

if __name__ == "__main__":
    logger.info(f"🚀 Transcript 启动中 http://{settings.host}:{settings.port}")
    logger.info(f"📖 API 文档: http://127.0.0.1:{settings.port}/docs")
    logger.info(f"🎞️ 字幕来源: {settings.caption_source}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=False,
    )
