import unittest
from unittest.mock import Mock

from rest_framework.request import Request
from rest_framework.test import APIRequestFactory

from apps.inventory.pagination import ProductListPagination


class ProductListPaginationTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.paginator = ProductListPagination(page_size=10)

    def _request(self, query=None):
        return Request(self.factory.get("/api/products", query or {}))

    def test_page_number_parsing(self):
        cases = {None: 1, "3": 3, "abc": 1, "0": 1, "-2": 1, "": 1}
        for raw, expected in cases.items():
            query = {} if raw is None else {"page": raw}
            with self.subTest(raw=raw):
                self.assertEqual(self.paginator.get_page_number(self._request(query)), expected)

    def test_paginate_products_records_page_and_total(self):
        service = Mock()
        service.list_products.return_value = (["a", "b"], 12)
        items = self.paginator.paginate_products(service, self._request({"page": "2"}))
        service.list_products.assert_called_once_with(2, 10)
        self.assertEqual(items, ["a", "b"])
        response = self.paginator.get_paginated_response(items)
        self.assertEqual(
            response.data,
            {"products": ["a", "b"], "total": 12, "page": 2, "pageSize": 10},
        )

    def test_default_page_size_from_settings(self):
        self.assertEqual(ProductListPagination().page_size, 10)
