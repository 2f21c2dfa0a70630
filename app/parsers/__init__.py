"""
字幕格式解析器

- json3: 平台接口返回的事件 JSON
- vtt:   yt-dlp 输出的 WebVTT 文本
"""
from app.parsers.json3_parser import parse_json3
from app.parsers.vtt_parser import parse_vtt

__all__ = ["parse_json3", "parse_vtt"]
