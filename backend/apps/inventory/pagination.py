from typing import Any, List, Optional

from django.conf import settings
from rest_framework.pagination import BasePagination
from rest_framework.response import Response


class ProductListPagination(BasePagination):
    """
    Page-number pagination over the product list.

    ``?page`` is 1-based. A missing, non-numeric or non-positive value falls
    back to page 1. The page size is fixed server-side.
    """

    page_query_param = "page"

    def __init__(self, page_size: Optional[int] = None):
        self.page_size = page_size or getattr(settings, "INVENTORY_PAGE_SIZE", 10)
        self.page_number = 1
        self.total = 0

    def get_page_number(self, request) -> int:
        raw = request.query_params.get(self.page_query_param)
        try:
            page = int(raw)
        except (TypeError, ValueError):
            return 1
        return page if page >= 1 else 1

    def paginate_products(self, service, request) -> List[Any]:
        self.page_number = self.get_page_number(request)
        products, self.total = service.list_products(self.page_number, self.page_size)
        return products

    def get_paginated_response(self, data) -> Response:
        return Response(
            {
                "products": data,
                "total": self.total,
                "page": self.page_number,
                "pageSize": self.page_size,
            }
        )
