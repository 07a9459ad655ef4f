from decimal import Decimal

import pytest

from apps.inventory.commands import CategoryWriteCommand, ProductWriteCommand
from apps.inventory.dtos import CategoryDTO, ProductWithCategoryDTO
from apps.inventory.exceptions import (
    CategoryInUse,
    CategoryNotFound,
    CategoryReferenceError,
    DanglingCategoryReference,
    InvariantViolation,
    ProductNotFound,
)
from apps.inventory.repositories import (
    DELETE_CASCADE,
    DELETE_RESTRICT,
    InventoryRepository,
)


def category(name="Tools"):
    return CategoryWriteCommand(name=name)


def product(category_id, name="Hammer", price="9.99", stock=3):
    return ProductWriteCommand(name=name, price=price, stock=stock, category_id=category_id)


@pytest.fixture
def repo():
    return InventoryRepository()


def test_ids_increase_monotonically_across_deletes(repo):
    ids = [repo.create_category(category(f"c{i}")).id for i in range(3)]
    repo.delete_category(ids[-1])
    ids.append(repo.create_category(category("c3")).id)
    repo.delete_category(ids[0])
    ids.append(repo.create_category(category("c4")).id)
    assert ids == [1, 2, 3, 4, 5]

    tools = repo.create_category(category()).id
    product_ids = [repo.create_product(product(tools, f"p{i}")).id for i in range(2)]
    repo.delete_product(product_ids[1])
    product_ids.append(repo.create_product(product(tools, "p2")).id)
    assert product_ids == [1, 2, 3]


def test_category_round_trip(repo):
    created = repo.create_category(category("A"))
    assert repo.get_category(created.id) == CategoryDTO(id=created.id, name="A")
    repo.delete_category(created.id)
    assert repo.get_category(created.id) is None


def test_list_categories_in_insertion_order_after_update(repo):
    a = repo.create_category(category("A"))
    repo.create_category(category("B"))
    repo.update_category(a.id, category("A2"))
    assert [c.name for c in repo.list_categories()] == ["A2", "B"]


def test_update_missing_category_raises_and_leaves_state(repo):
    repo.create_category(category("A"))
    before = repo.list_categories()
    with pytest.raises(CategoryNotFound) as excinfo:
        repo.update_category(99, category("Z"))
    assert excinfo.value.entity_id == 99
    assert repo.list_categories() == before


def test_delete_missing_category_raises(repo):
    with pytest.raises(CategoryNotFound):
        repo.delete_category(1)


def test_create_product_with_unknown_category_is_rejected(repo):
    with pytest.raises(CategoryReferenceError) as excinfo:
        repo.create_product(product(category_id=7))
    assert excinfo.value.category_id == 7
    assert repo.count_products() == 0
    # A rejected write does not burn an id.
    tools = repo.create_category(category()).id
    assert repo.create_product(product(tools)).id == 1


def test_create_product_returns_record_without_category(repo):
    tools = repo.create_category(category()).id
    created = repo.create_product(product(tools, price="12.5"))
    assert not isinstance(created, ProductWithCategoryDTO)
    assert created.price == Decimal("12.50")
    assert created.category_id == tools


def test_update_product_checks_category_before_existence(repo):
    with pytest.raises(CategoryReferenceError):
        repo.update_product(42, product(category_id=3))


def test_update_product_with_unknown_category_leaves_state(repo):
    tools = repo.create_category(category()).id
    created = repo.create_product(product(tools))
    with pytest.raises(CategoryReferenceError):
        repo.update_product(created.id, product(category_id=99, name="Other"))
    assert repo.get_product(created.id).name == "Hammer"


def test_update_missing_product_raises_and_leaves_state(repo):
    tools = repo.create_category(category()).id
    repo.create_product(product(tools))
    with pytest.raises(ProductNotFound):
        repo.update_product(5, product(tools, name="Ghost"))
    assert repo.count_products() == 1


def test_update_product_replaces_all_fields(repo):
    tools = repo.create_category(category()).id
    garden = repo.create_category(category("Garden")).id
    created = repo.create_product(product(tools))
    updated = repo.update_product(
        created.id,
        ProductWriteCommand(name="Rake", price="20", category_id=garden),
    )
    assert updated.id == created.id
    assert (updated.name, updated.stock, updated.description) == ("Rake", 0, "")
    assert repo.get_product(created.id).category.name == "Garden"


def test_delete_product(repo):
    tools = repo.create_category(category()).id
    created = repo.create_product(product(tools))
    repo.delete_product(created.id)
    assert repo.get_product(created.id) is None
    with pytest.raises(ProductNotFound):
        repo.delete_product(created.id)


@pytest.mark.parametrize(
    "page, expected",
    [(1, 10), (2, 10), (3, 5), (4, 0), (0, 0), (-1, 0)],
)
def test_list_products_pagination(repo, page, expected):
    tools = repo.create_category(category()).id
    for i in range(25):
        repo.create_product(product(tools, name=f"p{i}"))
    items, total = repo.list_products(page, 10)
    assert len(items) == expected
    assert total == 25


def test_list_products_page_slice_follows_insertion_order(repo):
    tools = repo.create_category(category()).id
    for i in range(25):
        repo.create_product(product(tools, name=f"p{i}"))
    items, _ = repo.list_products(3, 10)
    assert [p.name for p in items] == [f"p{i}" for i in range(20, 25)]
    assert all(p.category.id == tools for p in items)


def test_list_products_rejects_non_positive_page_size(repo):
    with pytest.raises(ValueError):
        repo.list_products(1, 0)


def test_dangling_reference_scenario(repo):
    tools = repo.create_category(category("Tools"))
    assert tools.id == 1
    hammer = repo.create_product(product(tools.id))
    assert hammer.id == 1

    fetched = repo.get_product(1)
    assert fetched.category == CategoryDTO(id=1, name="Tools")
    assert fetched.name == "Hammer"

    repo.delete_category(1)
    with pytest.raises(DanglingCategoryReference) as excinfo:
        repo.get_product(1)
    assert isinstance(excinfo.value, InvariantViolation)
    assert (excinfo.value.product_id, excinfo.value.category_id) == (1, 1)
    with pytest.raises(DanglingCategoryReference):
        repo.list_products(1, 10)


def test_get_missing_product_returns_none(repo):
    assert repo.get_product(1) is None


def test_restrict_policy_refuses_referenced_category():
    repo = InventoryRepository(category_delete_policy=DELETE_RESTRICT)
    tools = repo.create_category(category()).id
    empty = repo.create_category(category("Empty")).id
    created = repo.create_product(product(tools))
    with pytest.raises(CategoryInUse) as excinfo:
        repo.delete_category(tools)
    assert excinfo.value.product_ids == [created.id]
    assert repo.get_category(tools) is not None
    repo.delete_category(empty)
    assert repo.get_category(empty) is None


def test_cascade_policy_removes_referencing_products():
    repo = InventoryRepository(category_delete_policy=DELETE_CASCADE)
    tools = repo.create_category(category()).id
    garden = repo.create_category(category("Garden")).id
    repo.create_product(product(tools, "Hammer"))
    rake = repo.create_product(product(garden, "Rake"))
    repo.delete_category(tools)
    items, total = repo.list_products(1, 10)
    assert total == 1
    assert [p.id for p in items] == [rake.id]


def test_unknown_delete_policy_rejected():
    with pytest.raises(ValueError):
        InventoryRepository(category_delete_policy="orphan")


def test_list_products_huge_page_is_empty(repo):
    tools = repo.create_category(category()).id
    repo.create_product(product(tools))
    items, total = repo.list_products(10**18, 10)
    assert items == []
    assert total == 1
