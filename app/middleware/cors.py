"""
CORS 中间件

预检请求统一返回空 body 的 200，CORS 头交给 Starlette 生成
"""
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response

_BODY_HEADERS = {"content-length", "content-type"}


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """允许所有来源，预检响应不带 body"""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in _BODY_HEADERS
        }
        return Response(status_code=200, headers=headers)
