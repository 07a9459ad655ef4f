import re
from typing import Optional

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.exceptions import ApplicationError
from apps.api.schemas import ErrorResponseSerializer, page_response
from apps.common import get_logger

from .container import build_category_service, build_product_service
from .pagination import ProductListPagination
from .serializers import (
    CategorySerializer,
    ProductSerializer,
    ProductWithCategorySerializer,
    ProductWriteSerializer,
)
from .services import CategoryService, ProductService

logger = get_logger(__name__).bind(component="inventory", layer="view")

ERROR_RESPONSE = OpenApiResponse(response=ErrorResponseSerializer)

PLAIN_ID = re.compile(r"[0-9]+")


def parse_id(raw, label: str) -> int:
    """Convert a path segment into an id, rejecting anything but a plain integer."""
    if not isinstance(raw, str) or not PLAIN_ID.fullmatch(raw):
        raise ApplicationError(
            "VALIDATION_ERROR", f"Invalid {label} ID", details={"id": str(raw)}
        )
    return int(raw)


class CategoryViewMixin:
    service: Optional[CategoryService] = None

    def get_service(self) -> CategoryService:
        return self.service or build_category_service()


class ProductViewMixin:
    service: Optional[ProductService] = None
    paginator_class = ProductListPagination

    def get_service(self) -> ProductService:
        return self.service or build_product_service()


@extend_schema(tags=["Categories"])
class CategoryListView(CategoryViewMixin, APIView):
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        summary="List categories", responses={200: CategorySerializer(many=True)}
    )
    def get(self, request):
        self.log.debug("Listing categories")
        data = self.get_service().list_categories()
        return Response(CategorySerializer(data, many=True).data)

    @extend_schema(
        summary="Create category",
        request=CategorySerializer,
        responses={201: CategorySerializer, 400: ERROR_RESPONSE},
    )
    def post(self, request):
        serializer = CategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = self.get_service().create_category(serializer.validated_data)
        self.log.info("Category created via API", category_id=dto.id)
        return Response(CategorySerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(
    tags=["Categories"],
    parameters=[OpenApiParameter("category_id", int, OpenApiParameter.PATH)],
)
class CategoryDetailView(CategoryViewMixin, APIView):
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        summary="Get category",
        responses={200: CategorySerializer, 400: ERROR_RESPONSE, 404: ERROR_RESPONSE},
    )
    def get(self, request, category_id):
        category_id = parse_id(category_id, "category")
        self.log.debug("Fetching category detail", category_id=category_id)
        dto = self.get_service().get_category(category_id)
        if not dto:
            raise ApplicationError(
                "NOT_FOUND", "Category not found", details={"id": str(category_id)}
            )
        return Response(CategorySerializer(dto).data)

    @extend_schema(
        summary="Replace category fields",
        request=CategorySerializer,
        responses={200: CategorySerializer, 400: ERROR_RESPONSE, 404: ERROR_RESPONSE},
    )
    def patch(self, request, category_id):
        category_id = parse_id(category_id, "category")
        serializer = CategorySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Patching category", category_id=category_id)
        dto = self.get_service().update_category(category_id, serializer.validated_data)
        return Response(CategorySerializer(dto).data)

    @extend_schema(
        summary="Delete category",
        responses={
            204: None,
            400: ERROR_RESPONSE,
            404: ERROR_RESPONSE,
            409: ERROR_RESPONSE,
        },
    )
    def delete(self, request, category_id):
        category_id = parse_id(category_id, "category")
        self.log.info("Deleting category", category_id=category_id)
        self.get_service().delete_category(category_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Products"])
class ProductListView(ProductViewMixin, APIView):
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="One page of products with their category embedded.",
        parameters=[
            OpenApiParameter(
                name="page",
                description="1-based page number; missing or invalid values mean 1",
                required=False,
                type=int,
            )
        ],
        responses={200: page_response(ProductWithCategorySerializer)},
    )
    def get(self, request):
        paginator = self.paginator_class()
        products = paginator.paginate_products(self.get_service(), request)
        self.log.debug(
            "Handling product list request",
            page=paginator.page_number,
            returned=len(products),
            total=paginator.total,
        )
        return paginator.get_paginated_response(
            ProductWithCategorySerializer(products, many=True).data
        )

    @extend_schema(
        summary="Create product",
        request=ProductWriteSerializer,
        responses={201: ProductSerializer, 400: ERROR_RESPONSE},
    )
    def post(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Creating product via API", name=serializer.validated_data.get("name"))
        dto = self.get_service().create_product(serializer.validated_data)
        self.log.info("Product created via API", product_id=dto.id)
        return Response(ProductSerializer(dto).data, status=status.HTTP_201_CREATED)


@extend_schema(
    tags=["Products"],
    parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
)
class ProductDetailView(ProductViewMixin, APIView):
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        responses={
            200: ProductWithCategorySerializer,
            400: ERROR_RESPONSE,
            404: ERROR_RESPONSE,
        },
    )
    def get(self, request, product_id):
        product_id = parse_id(product_id, "product")
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.get_service().get_product(product_id)
        if not dto:
            raise ApplicationError(
                "NOT_FOUND", "Product not found", details={"id": str(product_id)}
            )
        return Response(ProductWithCategorySerializer(dto).data)

    @extend_schema(
        summary="Replace product fields",
        request=ProductWriteSerializer,
        responses={200: ProductSerializer, 400: ERROR_RESPONSE, 404: ERROR_RESPONSE},
    )
    def patch(self, request, product_id):
        product_id = parse_id(product_id, "product")
        serializer = ProductWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Patching product", product_id=product_id)
        dto = self.get_service().update_product(product_id, serializer.validated_data)
        return Response(ProductSerializer(dto).data)

    @extend_schema(
        summary="Delete product",
        responses={204: None, 400: ERROR_RESPONSE, 404: ERROR_RESPONSE},
    )
    def delete(self, request, product_id):
        product_id = parse_id(product_id, "product")
        self.log.info("Deleting product", product_id=product_id)
        self.get_service().delete_product(product_id)
        return Response(status=status.HTTP_204_NO_CONTENT)
