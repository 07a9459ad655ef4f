from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from .commands import CategoryWriteCommand, ProductWriteCommand
from .dtos import CategoryDTO, ProductDTO, ProductWithCategoryDTO


class CategoryRepositoryProtocol(Protocol):
    def list_categories(self) -> List[CategoryDTO]:
        ...

    def get_category(self, category_id: int) -> Optional[CategoryDTO]:
        ...

    def create_category(self, cmd: CategoryWriteCommand) -> CategoryDTO:
        ...

    def update_category(self, category_id: int, cmd: CategoryWriteCommand) -> CategoryDTO:
        ...

    def delete_category(self, category_id: int) -> None:
        ...


class ProductRepositoryProtocol(Protocol):
    def list_products(
        self, page: int, page_size: int
    ) -> Tuple[List[ProductWithCategoryDTO], int]:
        ...

    def get_product(self, product_id: int) -> Optional[ProductWithCategoryDTO]:
        ...

    def create_product(self, cmd: ProductWriteCommand) -> ProductDTO:
        ...

    def update_product(self, product_id: int, cmd: ProductWriteCommand) -> ProductDTO:
        ...

    def delete_product(self, product_id: int) -> None:
        ...
