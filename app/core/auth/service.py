# -*- coding: utf-8 -*-
"""
鉴权适配服务

把客户端请求头中的登录凭据转换为鉴权服务请求，解析返回码后：
- login 成功：直接写出会话 {id, skey}，并通过回调交出 userInfo
- check 成功：只通过回调交出 userInfo，不写响应
- 失败：统一包装为 LoginServiceError，通过回调交付；
  未传回调时由默认回调写出错误响应
"""
from __future__ import annotations

import inspect
import json
from typing import Any, Awaitable, Callable, Dict, Optional

from starlette.requests import Request

from app.api.scheme.base_responses import ResponseSink
from app.config.settings import global_settings
from app.providers.logger import get_logger

from . import constants
from .client import AuthApiClient, get_auth_client
from .constants import AuthErrorKind
from .exceptions import LoginServiceError
from .models import BackendRequestEnvelope, BackendResponseEnvelope, OutputEnvelope, Session

logger = get_logger()

Callback = Callable[[Optional[LoginServiceError], Optional[Dict[str, Any]]], Any]


class LoginService:
    """与单个请求/响应绑定的鉴权适配器，不可复用"""

    def __init__(self, request: Request, sink: ResponseSink, client: Optional[AuthApiClient] = None):
        if not isinstance(request, Request):
            raise TypeError("LoginService.request must be an instance of `starlette.requests.Request`")

        if not isinstance(sink, ResponseSink):
            raise TypeError("LoginService.sink must be an instance of `ResponseSink`")

        self.auth_url = global_settings.auth.url
        self.request = request
        self.sink = sink
        self._client = client or get_auth_client()

    @classmethod
    def create(cls, request: Request, sink: ResponseSink, client: Optional[AuthApiClient] = None) -> "LoginService":
        return cls(request, sink, client=client)

    # === 对外接口 ===

    def login(self, callback: Optional[Callback] = None) -> Awaitable[Optional[Dict[str, Any]]]:
        """使用 code + encrypt_data 登录，回调参数非法时立即抛出 TypeError"""
        callback = self._check_callback(callback)
        return self._complete(self._login(), callback)

    def check(self, callback: Optional[Callback] = None) -> Awaitable[Optional[Dict[str, Any]]]:
        """使用 id + skey 校验登录态，回调参数非法时立即抛出 TypeError"""
        callback = self._check_callback(callback)
        return self._complete(self._check(), callback)

    def write_error(self, err: LoginServiceError) -> None:
        if not isinstance(err, LoginServiceError):
            raise TypeError("unknown error passed to LoginService.write_error")

        self._write_json_result(OutputEnvelope(error=err.kind.value, message=err.message))

    # === 登录流程 ===

    async def _login(self) -> Dict[str, Any]:
        try:
            envelope = self._get_login_data()
            body = await self._send_request(envelope, "login")

            if not body.code_is(constants.RETURN_CODE_SUCCESS):
                raise RuntimeError(body.failure_message())

            return_data = body.data()
            self._write_json_result(OutputEnvelope(
                session=Session(id=return_data.get("id"), skey=return_data.get("skey")),
            ))
            return {"userInfo": return_data.get("user_info")}

        except Exception as exc:
            logger.warning(f"[鉴权] 登录失败: {exc}")
            raise LoginServiceError(AuthErrorKind.LOGIN_FAILED, _error_message(exc)) from exc

    async def _check(self) -> Dict[str, Any]:
        try:
            envelope = self._get_check_data()
            body = await self._send_request(envelope, "check")

            if body.code_is(constants.RETURN_CODE_SUCCESS):
                return {"userInfo": body.data().get("user_info")}

            if body.code_is(constants.RETURN_CODE_SESSION_EXPIRED):
                raise LoginServiceError(AuthErrorKind.SESSION_EXPIRED, body.message())

            raise RuntimeError(body.failure_message())

        except LoginServiceError as exc:
            logger.warning(f"[鉴权] 登录态校验失败: {exc}")
            raise
        except Exception as exc:
            logger.warning(f"[鉴权] 登录态校验失败: {exc}")
            raise LoginServiceError(AuthErrorKind.CHECK_LOGIN_FAILED, _error_message(exc)) from exc

    async def _complete(self, operation: Awaitable[Dict[str, Any]], callback: Callback) -> Optional[Dict[str, Any]]:
        """等待操作结束，并把结果或分类错误恰好一次交给回调"""
        try:
            result = await operation
        except LoginServiceError as err:
            await _invoke(callback, err, None)
            return None

        await _invoke(callback, None, result)
        return result

    # === 内部工具 ===

    def _check_callback(self, callback: Optional[Callback]) -> Callback:
        if not callback:
            def callback(err, result=None):
                if err:
                    self.write_error(err)

        if not callable(callback):
            raise TypeError("`callback` must be callable")

        return callback

    def _write_json_result(self, envelope: OutputEnvelope) -> None:
        self.sink.write_json(envelope.to_wire(), status_code=200)

    async def _send_request(self, envelope: BackendRequestEnvelope, action: str) -> BackendResponseEnvelope:
        data = envelope.model_dump()
        logger.debug(f"LoginService::{action} [data] => {json.dumps(data, ensure_ascii=False)}")

        try:
            status, body = await self._client.invoke(data)
        except Exception as exc:
            logger.error(f"[鉴权] 请求鉴权服务失败: url={self.auth_url}, error={exc!r}")
            raise

        if status != 200:
            raise RuntimeError(constants.MSG_REQUEST_FAILED)

        logger.debug(
            f"LoginService::{action} [result] => "
            f"{json.dumps(body, ensure_ascii=False) if isinstance(body, dict) else body}"
        )

        if not isinstance(body, dict) or "returnCode" not in body:
            raise ValueError(constants.MSG_MALFORMED_JSON)

        try:
            return BackendResponseEnvelope.model_validate(body)
        except ValueError as exc:
            raise ValueError(constants.MSG_MALFORMED_JSON) from exc

    def _get_login_data(self) -> BackendRequestEnvelope:
        para = {
            "code": self._get_header(constants.HEADER_CODE),
            "encrypt_data": self._get_header(constants.HEADER_ENCRYPT_DATA),
        }
        return BackendRequestEnvelope.pack(constants.INTERFACE_LOGIN, para)

    def _get_check_data(self) -> BackendRequestEnvelope:
        para = {
            "id": self._get_header(constants.HEADER_ID),
            "skey": self._get_header(constants.HEADER_SKEY),
        }
        return BackendRequestEnvelope.pack(constants.INTERFACE_CHECK, para)

    def _get_header(self, name: str) -> str:
        # starlette Headers 本身大小写不敏感
        return self.request.headers.get(name, "") or ""


async def _invoke(callback: Callback, err: Optional[LoginServiceError], result: Optional[Dict[str, Any]]) -> None:
    ret = callback(err, result)
    if inspect.isawaitable(ret):
        await ret


def _error_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__
