from __future__ import annotations

import threading
from typing import List, Optional, Tuple

from apps.common import get_logger
from apps.common.repository import InMemoryTable

from .commands import CategoryWriteCommand, ProductWriteCommand
from .dtos import CategoryDTO, ProductDTO, ProductWithCategoryDTO
from .exceptions import (
    CategoryInUse,
    CategoryNotFound,
    CategoryReferenceError,
    DanglingCategoryReference,
    ProductNotFound,
)

logger = get_logger(__name__).bind(component="inventory", layer="repository")

# What deleting a category does to products that still reference it.
DELETE_ALLOW = "allow"
DELETE_RESTRICT = "restrict"
DELETE_CASCADE = "cascade"
CATEGORY_DELETE_POLICIES = (DELETE_ALLOW, DELETE_RESTRICT, DELETE_CASCADE)


class InventoryRepository:
    """
    In-memory store of categories and products.

    A product's ``category_id`` is checked against the category collection
    whenever the product is written. Deleting a category is governed by
    ``category_delete_policy``:

    * ``allow``: the category is removed and referencing products are left
      dangling. Reading such a product raises ``DanglingCategoryReference``.
    * ``restrict``: deletion raises ``CategoryInUse`` while any product
      references the category.
    * ``cascade``: referencing products are removed together with the category.
    """

    def __init__(self, *, category_delete_policy: str = DELETE_ALLOW):
        if category_delete_policy not in CATEGORY_DELETE_POLICIES:
            raise ValueError(
                f"Unknown category delete policy {category_delete_policy!r}; "
                f"expected one of {', '.join(CATEGORY_DELETE_POLICIES)}"
            )
        self.category_delete_policy = category_delete_policy
        self.categories: InMemoryTable[CategoryDTO] = InMemoryTable(CategoryDTO)
        self.products: InMemoryTable[ProductDTO] = InMemoryTable(ProductDTO)
        self._lock = threading.RLock()

    # --- Categories ---
    def list_categories(self) -> List[CategoryDTO]:
        with self._lock:
            return self.categories.list()

    def get_category(self, category_id: int) -> Optional[CategoryDTO]:
        with self._lock:
            return self.categories.get(category_id)

    def count_categories(self) -> int:
        with self._lock:
            return self.categories.count()

    def create_category(self, cmd: CategoryWriteCommand) -> CategoryDTO:
        with self._lock:
            return self.categories.create(**cmd.fields())

    def update_category(self, category_id: int, cmd: CategoryWriteCommand) -> CategoryDTO:
        with self._lock:
            if not self.categories.exists(category_id):
                raise CategoryNotFound(category_id)
            return self.categories.replace(category_id, **cmd.fields())

    def delete_category(self, category_id: int) -> None:
        with self._lock:
            if not self.categories.exists(category_id):
                raise CategoryNotFound(category_id)
            if self.category_delete_policy == DELETE_RESTRICT:
                referencing = self._product_ids_for_category(category_id)
                if referencing:
                    raise CategoryInUse(category_id, referencing)
            elif self.category_delete_policy == DELETE_CASCADE:
                removed = self.products.delete_where(
                    lambda p: p.category_id == category_id
                )
                if removed:
                    logger.info(
                        "Cascade removed products with category",
                        category_id=category_id,
                        product_ids=removed,
                    )
            self.categories.delete(category_id)

    # --- Products ---
    def list_products(
        self, page: int, page_size: int
    ) -> Tuple[List[ProductWithCategoryDTO], int]:
        if page_size < 1:
            raise ValueError("page_size must be a positive integer")
        with self._lock:
            total = self.products.count()
            if page < 1:
                return [], total
            start = (page - 1) * page_size
            end = start + page_size
            items = [self._with_category(p) for p in self.products.slice(start, end)]
            return items, total

    def get_product(self, product_id: int) -> Optional[ProductWithCategoryDTO]:
        with self._lock:
            product = self.products.get(product_id)
            if product is None:
                return None
            return self._with_category(product)

    def count_products(self) -> int:
        with self._lock:
            return self.products.count()

    def create_product(self, cmd: ProductWriteCommand) -> ProductDTO:
        with self._lock:
            self._require_category(cmd.category_id)
            return self.products.create(**cmd.fields())

    def update_product(self, product_id: int, cmd: ProductWriteCommand) -> ProductDTO:
        with self._lock:
            self._require_category(cmd.category_id)
            if not self.products.exists(product_id):
                raise ProductNotFound(product_id)
            return self.products.replace(product_id, **cmd.fields())

    def delete_product(self, product_id: int) -> None:
        with self._lock:
            if not self.products.exists(product_id):
                raise ProductNotFound(product_id)
            self.products.delete(product_id)

    # --- Helpers ---
    def _require_category(self, category_id: int) -> None:
        if not self.categories.exists(category_id):
            raise CategoryReferenceError(category_id)

    def _with_category(self, product: ProductDTO) -> ProductWithCategoryDTO:
        category = self.categories.get(product.category_id)
        if category is None:
            raise DanglingCategoryReference(product.id, product.category_id)
        return ProductWithCategoryDTO.compose(product, category)

    def _product_ids_for_category(self, category_id: int) -> List[int]:
        return [p.id for p in self.products.list() if p.category_id == category_id]
