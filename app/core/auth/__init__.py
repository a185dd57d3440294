# -*- coding: utf-8 -*-
"""
鉴权适配模块

把小程序客户端的请求头凭据转换为鉴权服务调用，并输出标准化结果。
"""

from .constants import AuthErrorKind
from .exceptions import LoginServiceError
from .client import AuthApiClient, close_auth_client, get_auth_client
from .service import LoginService

__all__ = [
    "AuthErrorKind",
    "LoginServiceError",
    "AuthApiClient",
    "get_auth_client",
    "close_auth_client",
    "LoginService",
]
