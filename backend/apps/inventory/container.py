from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .repositories import DELETE_ALLOW, InventoryRepository
from .services import CategoryService, ProductService

_repository: Optional[InventoryRepository] = None


def build_repository() -> InventoryRepository:
    policy = getattr(settings, "INVENTORY_CATEGORY_DELETE_POLICY", DELETE_ALLOW)
    try:
        return InventoryRepository(category_delete_policy=policy)
    except ValueError as exc:
        raise ImproperlyConfigured(str(exc)) from exc


def install_repository(repository: Optional[InventoryRepository]) -> Optional[InventoryRepository]:
    """Make ``repository`` the process-wide store. Returns the one it replaces."""
    global _repository
    previous, _repository = _repository, repository
    return previous


def get_repository() -> InventoryRepository:
    if _repository is None:
        raise ImproperlyConfigured(
            "Inventory repository has not been installed; is apps.inventory in INSTALLED_APPS?"
        )
    return _repository


def build_category_service(repository: Optional[InventoryRepository] = None) -> CategoryService:
    return CategoryService(categories=repository or get_repository())


def build_product_service(repository: Optional[InventoryRepository] = None) -> ProductService:
    return ProductService(products=repository or get_repository())
