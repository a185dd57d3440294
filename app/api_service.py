# -*- coding: utf-8 -*-
"""ASGI 服务模块 - 创建 Starlette 应用并挂载各端点蓝图。"""

from __future__ import annotations

from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request

from app.config.settings import global_settings
from app.providers.logger import get_logger, init_logger
from app.api.scheme import error_codes
from app.api.scheme.base_responses import jsonify_response
from app.core.auth import close_auth_client


async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code == 404:
        status = error_codes.PAGE_NOT_FOUND
    elif exc.status_code == 405:
        status = error_codes.NOT_METHOD_FOR_PATH
    else:
        status = (exc.status_code, exc.detail)
    response = jsonify_response(status_response=status)
    response.status_code = exc.status_code
    return response


async def server_error_handler(request: Request, exc: Exception):
    get_logger().exception(f"未处理的异常: {request.method} {request.url.path}")
    response = jsonify_response(status_response=error_codes.SERVER_ERROR)
    response.status_code = 500
    return response


@asynccontextmanager
async def lifespan(app: Starlette):
    yield
    # 应用关闭时释放共享的鉴权客户端连接池
    await close_auth_client()
    get_logger().info("✅ 鉴权客户端已关闭")


def create_app() -> Starlette:
    """创建 Starlette 应用并返回 ASGI 应用。"""

    init_logger(
        name=global_settings.app.name,
        level=global_settings.logger.level,
        log_file=global_settings.logger.log_file,
        enable_file=global_settings.logger.enable_file,
        enable_console=global_settings.logger.enable_console,
        max_file_size=global_settings.logger.max_file_size,
        retention_days=global_settings.logger.retention_days,
    )
    logger = get_logger()

    from app.api.endpoints import get_registered_blueprints

    routes = []
    for bp in get_registered_blueprints():
        routes.extend(bp.routes)
        logger.info(f"✅ 蓝图已挂载: {bp.summary()}")

    asgi_app = Starlette(
        debug=global_settings.app.debug,
        routes=routes,
        lifespan=lifespan,
        exception_handlers={
            HTTPException: http_exception_handler,
            Exception: server_error_handler,
        },
    )
    logger.info(f"✅ {global_settings.app.name} ASGI 应用创建完成, 鉴权服务: {global_settings.auth.url}")
    return asgi_app


main_asgi = create_app()
