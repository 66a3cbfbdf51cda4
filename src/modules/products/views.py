"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Request rules run before every action (see ``ValidatedViewSetMixin``);
domain exceptions are caught here and translated into HTTP status codes.
Unexpected errors are left to the project exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import RequestValidationError
from modules.core.views import ValidatedViewSetMixin
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ProductCreateSerializer,
    ProductListSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
)
from modules.products.services import ProductService

PRODUCT_NOT_FOUND_MESSAGE = "Producto no encontrado"
PRODUCT_DELETED_MESSAGE = "Producto eliminado"

# ---------------------------------------------------------------------------
# OpenAPI metadata
# ---------------------------------------------------------------------------

_PRODUCT_RESPONSE = inline_serializer(
    "ProductResponse", {"data": ProductSerializer()}
)
_PRODUCT_LIST_RESPONSE = inline_serializer(
    "ProductListResponse", {"data": ProductListSerializer(many=True)}
)
_PRODUCT_DELETED_RESPONSE = inline_serializer(
    "ProductDeletedResponse", {"data": serializers.CharField()}
)
_VALIDATION_ERROR = OpenApiResponse(
    inline_serializer(
        "ValidationErrorResponse",
        {"errors": serializers.ListField(child=serializers.DictField())},
    ),
    description="Bad Request - Invalid ID or invalid input data",
)
_NOT_FOUND = OpenApiResponse(
    inline_serializer("NotFoundResponse", {"error": serializers.CharField()}),
    description="Product not found",
)
_ID_PARAMETER = OpenApiParameter(
    "id",
    int,
    OpenApiParameter.PATH,
    description="The ID of the product",
)


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        description="Return every product, newest first.",
        responses={200: _PRODUCT_LIST_RESPONSE},
    ),
    create=extend_schema(
        summary="Create a new product",
        request=ProductCreateSerializer,
        responses={201: _PRODUCT_RESPONSE, 400: _VALIDATION_ERROR},
    ),
    retrieve=extend_schema(
        summary="Get a product by ID",
        parameters=[_ID_PARAMETER],
        responses={200: _PRODUCT_RESPONSE, 400: _VALIDATION_ERROR, 404: _NOT_FOUND},
    ),
    update=extend_schema(
        summary="Update a product with user input",
        parameters=[_ID_PARAMETER],
        request=ProductUpdateSerializer,
        responses={200: _PRODUCT_RESPONSE, 400: _VALIDATION_ERROR, 404: _NOT_FOUND},
    ),
    partial_update=extend_schema(
        summary="Toggle product availability",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={200: _PRODUCT_RESPONSE, 400: _VALIDATION_ERROR, 404: _NOT_FOUND},
    ),
    destroy=extend_schema(
        summary="Delete a product by a given ID",
        parameters=[_ID_PARAMETER],
        responses={
            200: _PRODUCT_DELETED_RESPONSE,
            400: _VALIDATION_ERROR,
            404: _NOT_FOUND,
        },
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(ValidatedViewSetMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Routes and their validation rules are declared in ``urls.py``.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        serializer = ProductListSerializer(products, many=True)
        return Response({"data": serializer.data})

    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(id)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Toggle / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        try:
            dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        except PydanticValidationError as exc:
            raise RequestValidationError.from_pydantic(exc) from exc

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        data = request.data
        try:
            dto = UpdateProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            raise RequestValidationError.from_pydantic(exc) from exc

        try:
            product = self._service.update_product(id, dto)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}

        Flips ``availability``; the request body is ignored.
        """
        try:
            product = self._service.toggle_availability(id)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(id)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": PRODUCT_DELETED_MESSAGE})

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _not_found() -> Response:
        return Response(
            {"error": PRODUCT_NOT_FOUND_MESSAGE},
            status=status.HTTP_404_NOT_FOUND,
        )
