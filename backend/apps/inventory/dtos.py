from dataclasses import asdict, dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CategoryDTO:
    id: int
    name: str


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    description: str
    price: Decimal
    stock: int
    category_id: int


@dataclass(frozen=True)
class ProductWithCategoryDTO(ProductDTO):
    """Read-time join of a product and its category. Never stored."""

    category: CategoryDTO

    @classmethod
    def compose(cls, product: ProductDTO, category: CategoryDTO) -> "ProductWithCategoryDTO":
        return cls(**asdict(product), category=category)
