import os
import sys

import pytest

# Ensure backend package is importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture
def inventory_repository():
    """Install a fresh repository as the process-wide store for one test."""
    from apps.inventory import container
    from apps.inventory.repositories import InventoryRepository

    repository = InventoryRepository()
    previous = container.install_repository(repository)
    yield repository
    container.install_repository(previous)
