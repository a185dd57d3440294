from app.api.endpoints.base import Blueprint, get_registered_blueprints

# 注册路由
import app.api.endpoints.login.login_endpoint

__all__ = ["Blueprint", "get_registered_blueprints"]
