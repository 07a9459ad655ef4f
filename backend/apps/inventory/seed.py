from decimal import Decimal

from apps.common import get_logger

from .commands import CategoryWriteCommand, ProductWriteCommand
from .repositories import InventoryRepository

logger = get_logger(__name__).bind(component="inventory", layer="seed")

CATEGORIES = [
    "Tools",
    "Electronics",
    "Office Supplies",
]

# (name, price, stock, description, category name)
PRODUCTS = [
    ("Claw Hammer", Decimal("14.99"), 40, "16 oz steel claw hammer.", "Tools"),
    ("Cordless Drill", Decimal("89.00"), 12, "18V drill with two batteries.", "Tools"),
    ("Tape Measure", Decimal("7.50"), 75, "25 ft locking tape measure.", "Tools"),
    ("USB-C Cable", Decimal("9.99"), 200, "1 m braided USB-C cable.", "Electronics"),
    ("Wireless Mouse", Decimal("24.50"), 60, "2.4 GHz optical mouse.", "Electronics"),
    ("Stapler", Decimal("11.25"), 35, "Full-strip desktop stapler.", "Office Supplies"),
    ("A4 Paper Ream", Decimal("5.80"), 150, "500 sheets, 80 gsm.", "Office Supplies"),
]


def seed_demo_inventory(repository: InventoryRepository) -> None:
    """Populate ``repository`` with demo data through its normal write path."""
    category_ids = {}
    for name in CATEGORIES:
        category = repository.create_category(CategoryWriteCommand(name=name))
        category_ids[name] = category.id
    for name, price, stock, description, category_name in PRODUCTS:
        repository.create_product(
            ProductWriteCommand(
                name=name,
                price=price,
                stock=stock,
                description=description,
                category_id=category_ids[category_name],
            )
        )
    logger.info(
        "Seeded demo inventory",
        categories=len(CATEGORIES),
        products=len(PRODUCTS),
    )
