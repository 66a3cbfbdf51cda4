"""Explicit route tables for DRF viewsets.

Each ``Route`` binds an HTTP method and a path to a viewset action and to
the ordered validation rules that must pass before the action runs.
``build_urlpatterns`` groups the table by path and returns plain Django
``path()`` entries, handing every view its own action -> rules mapping.

Example::

    ROUTES = (
        Route("post", "products", "create", rules=CREATE_RULES),
        Route("get", "products", "list"),
        Route("get", "products/<str:id>", "retrieve", rules=ID_RULES),
    )
    urlpatterns = build_urlpatterns(ProductViewSet, ROUTES, basename="product")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Type

from django.urls import URLPattern, path
from rest_framework.viewsets import ViewSetMixin

from modules.core.validation import FieldRule

# Suffixes follow DRF's router naming ("<basename>-list", "<basename>-detail").
_LIST_SUFFIX = "list"
_DETAIL_SUFFIX = "detail"


@dataclass(frozen=True)
class Route:
    method: str
    path: str
    action: str
    rules: Tuple[FieldRule, ...] = ()


def build_urlpatterns(
    viewset: Type[ViewSetMixin], routes: Sequence[Route], basename: str
) -> List[URLPattern]:
    """Build one URL pattern per distinct path in ``routes``."""
    grouped: Dict[str, List[Route]] = {}
    for route in routes:
        grouped.setdefault(route.path, []).append(route)

    urlpatterns = []
    for route_path, path_routes in grouped.items():
        actions: Dict[str, str] = {}
        for route in path_routes:
            method = route.method.lower()
            if method in actions:
                raise ValueError(
                    f"Duplicate route: {route.method.upper()} {route_path!r}"
                )
            actions[method] = route.action

        view = viewset.as_view(
            actions,
            validation_rules={route.action: route.rules for route in path_routes},
        )
        suffix = _DETAIL_SUFFIX if "<" in route_path else _LIST_SUFFIX
        urlpatterns.append(path(route_path, view, name=f"{basename}-{suffix}"))
    return urlpatterns
