# -*- coding: utf-8 -*-
"""Decorator-friendly blueprint used by API endpoint modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from starlette.routing import BaseRoute, Route

_blueprints: List["Blueprint"] = []


def get_registered_blueprints() -> Iterable["Blueprint"]:
    """Return the registered blueprints."""
    return tuple(_blueprints)


@dataclass
class RouteInfo:
    path: str
    methods: List[str]
    name: str


class Blueprint:
    """Collect HTTP routes via decorators."""

    def __init__(self, prefix: str = "", *, name: Optional[str] = None) -> None:
        normalized_prefix = prefix.rstrip("/")
        if normalized_prefix and not normalized_prefix.startswith("/"):
            normalized_prefix = f"/{normalized_prefix}"

        self.prefix = normalized_prefix
        self.name = name or (self.prefix.strip("/") or "root")
        self._routes: List[BaseRoute] = []
        self._routes_info: List[RouteInfo] = []

        if self not in _blueprints:
            _blueprints.append(self)

    @property
    def routes(self) -> List[BaseRoute]:
        return list(self._routes)

    def route(
        self,
        path: str,
        methods: Optional[List[str]] = None,
        *,
        name: Optional[str] = None,
    ) -> Callable[[Callable], Callable]:
        """Decorator registering a Starlette route."""
        methods = methods or ["GET"]

        def deco(fn: Callable) -> Callable:
            full_path = f"{self.prefix}{path}"
            self._routes.append(Route(full_path, fn, methods=methods, name=name or fn.__name__))
            self._routes_info.append(RouteInfo(path=full_path, methods=list(methods), name=name or fn.__name__))
            return fn

        return deco

    def summary(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "prefix": self.prefix,
            "routes": [{"path": info.path, "methods": info.methods} for info in self._routes_info],
        }
