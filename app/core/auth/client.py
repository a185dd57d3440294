# -*- coding: utf-8 -*-
"""
鉴权服务 HTTP 客户端

每次调用只发出一个 POST 请求，不做重试。
应用内共享一个实例（连接池复用），在应用关闭时释放。
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import httpx

from app.config.settings import global_settings
from app.providers.logger import get_logger

logger = get_logger()


class AuthApiClient:
    """鉴权服务调用能力：invoke(envelope) -> (status, body)"""

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            url: 鉴权服务地址，默认读取配置 auth.url
            timeout: 请求超时(秒)，默认读取配置 auth.timeout
            transport: 自定义 httpx 传输层（测试时注入 MockTransport）
        """
        self.url = url or global_settings.auth.url
        self.timeout = timeout if timeout is not None else global_settings.auth.timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """首次使用时创建底层 AsyncClient"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """关闭客户端"""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def invoke(self, envelope: Dict[str, Any]) -> Tuple[int, Any]:
        """
        POST JSON 请求包并返回 (HTTP 状态码, 响应体)

        响应体能解析为 JSON 时返回解析结果，否则返回原始文本。
        网络层异常（连接失败、超时等）直接抛出 httpx.HTTPError。
        """
        response = await self.client.post(self.url, json=envelope)

        try:
            body = response.json()
        except ValueError:
            body = response.text
            logger.debug(f"[鉴权] 响应体不是 JSON: status={response.status_code}, length={len(body)}")
        return response.status_code, body


# 全局共享实例
_auth_client: Optional[AuthApiClient] = None


def get_auth_client() -> AuthApiClient:
    """获取全局鉴权客户端"""
    global _auth_client
    if _auth_client is None:
        _auth_client = AuthApiClient()
    return _auth_client


async def close_auth_client() -> None:
    """释放全局鉴权客户端（应用关闭时调用）"""
    global _auth_client
    if _auth_client is not None:
        await _auth_client.close()
        _auth_client = None
