# -*- coding: utf-8 -*-
"""
鉴权适配服务配置模块
"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def safe_print(message: str):
    """Windows safe print that handles emoji characters"""
    try:
        print(message, flush=True)
    except UnicodeEncodeError:
        safe_message = message.encode('ascii', 'ignore').decode('ascii')
        print(safe_message, flush=True)


# === 配置子类 ===

class AppConfig(BaseModel):
    name: str = 'mini-auth-adapter'
    port: int = 5757
    debug: bool = False
    env: str = 'dev'
    version: str = '1.0.0'


class AuthConfig(BaseModel):
    """鉴权服务配置"""
    url: str = 'http://127.0.0.1:8080/mina_auth/'
    timeout: float = 15.0  # 单次请求超时(秒)

    @field_validator("url")
    @classmethod
    def _strip_url(cls, value: str) -> str:
        value = (value or "").strip()
        if not value:
            raise ValueError("鉴权服务地址不能为空")
        return value


class LoggerConfig(BaseModel):
    """日志配置"""
    level: str = 'INFO'
    log_file: Optional[str] = None
    enable_file: bool = False
    enable_console: bool = True
    max_file_size: str = '10 MB'
    retention_days: int = 7


class GlobalSettings(BaseSettings):
    """全局配置设置"""
    app: AppConfig = Field(default_factory=AppConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logger: LoggerConfig = Field(default_factory=LoggerConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


def load_config() -> GlobalSettings:
    """
    加载配置的入口函数

    环境变量命名规则示例：
    - APP__PORT=5757
    - AUTH__URL=http://auth.example.com/mina_auth/
    - AUTH__TIMEOUT=10
    - LOGGER__LEVEL=DEBUG
    """
    try:
        settings = GlobalSettings()
        safe_print(f"✅ 配置加载成功: APP_ENV={settings.app.env}, AUTH_URL={settings.auth.url}")
        return settings
    except Exception as e:
        safe_print(f"❌ 加载配置失败: {e}")
        return GlobalSettings.model_construct(
            app=AppConfig(), auth=AuthConfig(), logger=LoggerConfig()
        )


# 全局配置实例
global_settings = load_config()
