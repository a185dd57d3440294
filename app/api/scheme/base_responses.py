# -*- coding: utf-8 -*-
from typing import Dict, Any, Optional
from starlette.responses import JSONResponse, Response
from app.api.scheme import error_codes


# 统一 JSON 返回
def jsonify_response(data: Optional[Dict[str, Any]] = None, status_response: Optional[tuple] = None, extends: Optional[Dict[str, Any]] = None) -> JSONResponse:
    if data is None:
        data = {}

    if status_response is None:
        status_response = error_codes.SUCCESS
    ret = {"data": data, "code": status_response[0], "msg": status_response[1]}
    if extends:
        ret.update(**extends)
    return JSONResponse(content=ret)


class ResponseSink:
    """
    一次性响应输出端

    处理函数把它交给业务层，业务层至多写入一次，
    处理函数最后通过 ``response`` 取回要返回给 ASGI 服务器的响应。
    """

    def __init__(self):
        self._response: Optional[Response] = None

    @property
    def written(self) -> bool:
        return self._response is not None

    @property
    def response(self) -> Optional[Response]:
        return self._response

    def write(self, response: Response) -> None:
        if self._response is not None:
            raise RuntimeError("response already written")
        self._response = response

    def write_json(self, content: Dict[str, Any], status_code: int = 200) -> None:
        self.write(JSONResponse(content=content, status_code=status_code))

    def to_response(self) -> Response:
        """未写入时返回 204 空响应"""
        if self._response is None:
            return Response(status_code=204)
        return self._response
