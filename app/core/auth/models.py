# -*- coding: utf-8 -*-
"""
鉴权服务请求/响应数据模型
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import COMPONENT_NAME, ENVELOPE_VERSION, SESSION_MAGIC_ID, SESSION_MAGIC_VALUE


class InterfaceCall(BaseModel):
    interfaceName: str = Field(..., description="鉴权接口名")
    para: Dict[str, str] = Field(default_factory=dict, description="接口参数")


class BackendRequestEnvelope(BaseModel):
    """发往鉴权服务的请求包"""

    version: int = ENVELOPE_VERSION
    componentName: str = COMPONENT_NAME
    interface: InterfaceCall

    @classmethod
    def pack(cls, interface_name: str, para: Dict[str, str]) -> "BackendRequestEnvelope":
        return cls(interface=InterfaceCall(interfaceName=interface_name, para=para))


class BackendResponseEnvelope(BaseModel):
    """
    鉴权服务响应包

    字段保持鉴权服务返回的原始值，不做类型转换：
    返回码只有数值 0 / 60011 才算命中，"0"、false 等一律按普通失败处理。
    """

    returnCode: Any
    returnMessage: Any = None
    returnData: Any = None

    model_config = ConfigDict(extra="ignore")

    def code_is(self, expected: int) -> bool:
        code = self.returnCode
        return type(code) in (int, float) and code == expected

    def data(self) -> Dict[str, Any]:
        if not isinstance(self.returnData, dict):
            raise ValueError(f"auth server returned invalid returnData: {_render(self.returnData)}")
        return self.returnData

    def message(self) -> str:
        return "" if self.returnMessage is None else _render(self.returnMessage)

    def failure_message(self) -> str:
        return f"#{_render(self.returnCode)} - {self.message()}"


class Session(BaseModel):
    id: Any = None
    skey: Any = None


class OutputEnvelope(BaseModel):
    """写回客户端的响应体，sessionMagic 始终存在"""

    session_magic: int = Field(SESSION_MAGIC_VALUE, alias=SESSION_MAGIC_ID)
    session: Optional[Session] = None
    error: Optional[str] = None
    message: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def _render(value: Any) -> str:
    """按 JSON 字面量习惯输出返回值，用于拼接错误信息"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)
