from django.apps import AppConfig
from django.conf import settings


class InventoryConfig(AppConfig):
    name = "apps.inventory"
    label = "inventory"
    verbose_name = "Inventory"

    def ready(self):
        from apps.common import get_logger
        from . import container
        from .seed import seed_demo_inventory

        log = get_logger(__name__).bind(component="inventory", layer="app")
        repository = container.build_repository()
        if getattr(settings, "INVENTORY_SEED_DEMO", False):
            seed_demo_inventory(repository)
        container.install_repository(repository)
        log.info(
            "Inventory repository installed",
            category_delete_policy=repository.category_delete_policy,
            categories=repository.count_categories(),
            products=repository.count_products(),
        )
