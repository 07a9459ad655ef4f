from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from apps.api.exceptions import ApplicationError
from apps.common import get_logger

from .commands import CategoryWriteCommand, ProductWriteCommand
from .dtos import CategoryDTO, ProductDTO, ProductWithCategoryDTO
from .exceptions import (
    CategoryInUse,
    CategoryNotFound,
    CategoryReferenceError,
    ProductNotFound,
)
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="inventory", layer="service")


def _category_not_found(category_id: int) -> ApplicationError:
    return ApplicationError(
        "NOT_FOUND", "Category not found", details={"id": str(category_id)}
    )


def _product_not_found(product_id: int) -> ApplicationError:
    return ApplicationError(
        "NOT_FOUND", "Product not found", details={"id": str(product_id)}
    )


class CategoryService:
    def __init__(self, categories: CategoryRepositoryProtocol):
        self.categories = categories
        self.logger = logger.bind(service="CategoryService")

    def list_categories(self) -> List[CategoryDTO]:
        self.logger.debug("Listing categories")
        return self.categories.list_categories()

    def get_category(self, category_id: int) -> Optional[CategoryDTO]:
        self.logger.debug("Fetching category", category_id=category_id)
        category = self.categories.get_category(category_id)
        if not category:
            self.logger.info("Category not found", category_id=category_id)
        return category

    def create_category(
        self, data: Union[Dict[str, Any], CategoryWriteCommand]
    ) -> CategoryDTO:
        cmd = data if isinstance(data, CategoryWriteCommand) else CategoryWriteCommand.from_raw(data)
        self.logger.info("Creating category", name=cmd.name)
        category = self.categories.create_category(cmd)
        self.logger.info("Category created", category_id=category.id)
        return category

    def update_category(
        self, category_id: int, data: Union[Dict[str, Any], CategoryWriteCommand]
    ) -> CategoryDTO:
        cmd = data if isinstance(data, CategoryWriteCommand) else CategoryWriteCommand.from_raw(data)
        self.logger.info("Updating category", category_id=category_id)
        try:
            category = self.categories.update_category(category_id, cmd)
        except CategoryNotFound:
            self.logger.warning("Category update failed: not found", category_id=category_id)
            raise _category_not_found(category_id)
        self.logger.info("Category updated", category_id=category_id)
        return category

    def delete_category(self, category_id: int) -> None:
        self.logger.info("Deleting category", category_id=category_id)
        try:
            self.categories.delete_category(category_id)
        except CategoryNotFound:
            self.logger.warning("Category deletion failed: not found", category_id=category_id)
            raise _category_not_found(category_id)
        except CategoryInUse as exc:
            self.logger.warning(
                "Category deletion refused: still referenced",
                category_id=category_id,
                product_ids=exc.product_ids,
            )
            raise ApplicationError(
                "CONFLICT",
                "Category is still referenced by products",
                details={"id": str(category_id), "productIds": exc.product_ids},
                hint="Delete or move the referencing products first.",
            )
        self.logger.info("Category deleted", category_id=category_id)


class ProductService:
    def __init__(self, products: ProductRepositoryProtocol):
        self.products = products
        self.logger = logger.bind(service="ProductService")

    def list_products(
        self, page: int, page_size: int
    ) -> Tuple[List[ProductWithCategoryDTO], int]:
        self.logger.debug("Listing products", page=page, page_size=page_size)
        return self.products.list_products(page, page_size)

    def get_product(self, product_id: int) -> Optional[ProductWithCategoryDTO]:
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.get_product(product_id)
        if not product:
            self.logger.info("Product not found", product_id=product_id)
        return product

    def create_product(
        self, data: Union[Dict[str, Any], ProductWriteCommand]
    ) -> ProductDTO:
        cmd = data if isinstance(data, ProductWriteCommand) else ProductWriteCommand.from_raw(data)
        self.logger.info("Creating product", name=cmd.name, category_id=cmd.category_id)
        try:
            product = self.products.create_product(cmd)
        except CategoryReferenceError as exc:
            self.logger.warning(
                "Product create failed: unknown category", category_id=exc.category_id
            )
            raise self._invalid_category(exc.category_id)
        self.logger.info("Product created", product_id=product.id)
        return product

    def update_product(
        self, product_id: int, data: Union[Dict[str, Any], ProductWriteCommand]
    ) -> ProductDTO:
        cmd = data if isinstance(data, ProductWriteCommand) else ProductWriteCommand.from_raw(data)
        self.logger.info("Updating product", product_id=product_id)
        try:
            product = self.products.update_product(product_id, cmd)
        except CategoryReferenceError as exc:
            self.logger.warning(
                "Product update failed: unknown category",
                product_id=product_id,
                category_id=exc.category_id,
            )
            raise self._invalid_category(exc.category_id)
        except ProductNotFound:
            self.logger.warning("Product update failed: not found", product_id=product_id)
            raise _product_not_found(product_id)
        self.logger.info("Product updated", product_id=product_id)
        return product

    def delete_product(self, product_id: int) -> None:
        self.logger.info("Deleting product", product_id=product_id)
        try:
            self.products.delete_product(product_id)
        except ProductNotFound:
            self.logger.warning("Product deletion failed: not found", product_id=product_id)
            raise _product_not_found(product_id)
        self.logger.info("Product deleted", product_id=product_id)

    @staticmethod
    def _invalid_category(category_id: int) -> ApplicationError:
        return ApplicationError(
            "VALIDATION_ERROR",
            "Invalid category ID",
            details={"categoryId": [f"Category {category_id} does not exist."]},
        )
