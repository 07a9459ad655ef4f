"""Error taxonomy of the inventory repository."""


class InventoryError(Exception):
    """Base class for every error raised by the inventory repository."""


class EntityNotFound(InventoryError):
    entity = "Entity"

    def __init__(self, entity_id: int):
        super().__init__(f"{self.entity} {entity_id} not found")
        self.entity_id = entity_id


class CategoryNotFound(EntityNotFound):
    entity = "Category"


class ProductNotFound(EntityNotFound):
    entity = "Product"


class CategoryReferenceError(InventoryError):
    """A product write names a category id that does not exist."""

    def __init__(self, category_id: int):
        super().__init__(f"Category {category_id} referenced by product does not exist")
        self.category_id = category_id


class CategoryInUse(InventoryError):
    """Category deletion refused because products still reference it."""

    def __init__(self, category_id: int, product_ids):
        super().__init__(
            f"Category {category_id} is referenced by {len(product_ids)} product(s)"
        )
        self.category_id = category_id
        self.product_ids = list(product_ids)


class InvariantViolation(InventoryError):
    """Stored state breaks an invariant the write path should have enforced."""


class DanglingCategoryReference(InvariantViolation):
    def __init__(self, product_id: int, category_id: int):
        super().__init__(
            f"Product {product_id} references missing category {category_id}"
        )
        self.product_id = product_id
        self.category_id = category_id
