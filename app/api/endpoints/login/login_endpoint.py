# -*- coding: utf-8 -*-
"""登录端点 - 仅负责路由注册，将业务逻辑委托给鉴权适配服务"""

from __future__ import annotations

from starlette.requests import Request
from starlette.responses import JSONResponse

from app.api.endpoints.base import Blueprint
from app.api.scheme.base_responses import ResponseSink, jsonify_response
from app.core.auth import LoginService
from app.providers.logger import get_logger

logger = get_logger()
bp = Blueprint("/", name="auth")


@bp.route("/login", methods=["GET", "POST"])
async def login(request: Request):
    sink = ResponseSink()
    service = LoginService.create(request, sink)
    await service.login()
    return sink.to_response()


@bp.route("/user", methods=["GET", "POST"])
async def user(request: Request):
    sink = ResponseSink()
    service = LoginService.create(request, sink)

    def on_checked(err, result):
        if err:
            service.write_error(err)
            return
        sink.write(jsonify_response(data={"userInfo": result["userInfo"]}))

    await service.check(on_checked)
    return sink.to_response()


@bp.route("/health", methods=["GET"])
async def health(request: Request):
    return JSONResponse(content={"status": "ok"})
