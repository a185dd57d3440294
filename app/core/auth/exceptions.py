# -*- coding: utf-8 -*-
"""鉴权适配异常定义。"""

from .constants import AuthErrorKind


class LoginServiceError(Exception):
    """带分类码的鉴权异常，区别于未预期的普通异常"""

    def __init__(self, kind: AuthErrorKind, message: str = ""):
        self.kind = AuthErrorKind(kind)
        self.message = message
        super().__init__(message)

    @property
    def type(self) -> str:
        return self.kind.value

    def __str__(self):
        return f"{self.kind.value}: {self.message}"

    def __repr__(self):
        return f"LoginServiceError(kind={self.kind.value!r}, message={self.message!r})"
