# -*- coding: utf-8 -*-
"""鉴权适配常量定义。"""

from enum import Enum


# 客户端通过请求头传递的字段（大小写不敏感）
HEADER_CODE = "code"
HEADER_ENCRYPT_DATA = "encrypt_data"
HEADER_ID = "id"
HEADER_SKEY = "skey"

# 鉴权服务接口
INTERFACE_LOGIN = "login"
INTERFACE_CHECK = "check"

ENVELOPE_VERSION = 1
COMPONENT_NAME = "MA"

# 客户端 SDK 据此确认响应来自本适配器
SESSION_MAGIC_ID = "sessionMagic"
SESSION_MAGIC_VALUE = 1

# 鉴权服务返回码
RETURN_CODE_SUCCESS = 0
RETURN_CODE_SESSION_EXPIRED = 60011

MSG_REQUEST_FAILED = "auth API request failed: network or server error"
MSG_MALFORMED_JSON = "auth server returned malformed JSON"


class AuthErrorKind(str, Enum):
    """鉴权错误分类"""
    LOGIN_FAILED = "LOGIN_FAILED"
    CHECK_LOGIN_FAILED = "CHECK_LOGIN_FAILED"
    SESSION_EXPIRED = "SESSION_EXPIRED"
