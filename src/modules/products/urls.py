"""Product URL configuration.

One ``Route`` per HTTP method + path, each carrying the ordered request
rules that must pass before the action runs.
"""

from __future__ import annotations

from modules.core.routing import Route, build_urlpatterns
from modules.products.rules import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
)
from modules.products.views import ProductViewSet

PRODUCT_ROUTES = (
    Route("post", "products", "create", rules=CREATE_PRODUCT_RULES),
    Route("get", "products", "list"),
    Route("get", "products/<str:id>", "retrieve", rules=PRODUCT_ID_RULES),
    Route("put", "products/<str:id>", "update", rules=UPDATE_PRODUCT_RULES),
    Route("patch", "products/<str:id>", "partial_update", rules=PRODUCT_ID_RULES),
    Route("delete", "products/<str:id>", "destroy", rules=PRODUCT_ID_RULES),
)

urlpatterns = build_urlpatterns(ProductViewSet, PRODUCT_ROUTES, basename="product")
