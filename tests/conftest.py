import pytest

from catalog_tree.services.normalizer import normalize_records
from catalog_tree.services.tree_builder import build_tree


@pytest.fixture
def bath_records():
    """One active root with an inactive and an active child"""
    return [
        {"id": 1, "parent_id": None, "name": "Bath", "is_active": True},
        {"id": 2, "parent_id": 1, "name": "Soap Bars", "is_active": False},
        {"id": 3, "parent_id": 1, "name": "Shampoo", "is_active": True},
    ]


@pytest.fixture
def bath_categories(bath_records):
    return normalize_records(bath_records)


@pytest.fixture
def bath_tree(bath_categories):
    return build_tree(bath_categories)


@pytest.fixture
def catalog_records():
    """A deeper catalog with mixed status, descriptions and an orphan"""
    return [
        {"id": 10, "name": "Beauty", "slug": "beauty", "is_active": True, "sort_order": 2,
         "description": "Skin and hair care", "products_count": 0},
        {"id": 11, "name": "Hair", "slug": "hair", "parent_id": 10, "is_active": False,
         "sort_order": 1, "products_count": 4},
        {"id": 12, "name": "Shampoo", "slug": "shampoo", "parent_id": 11, "is_active": True,
         "sort_order": 0, "products_count": 12},
        {"id": 13, "name": "Skin", "slug": "skin", "parent_id": 10, "is_active": True,
         "sort_order": 0, "description": "Creams and lotions", "products_count": 7},
        {"id": 20, "name": "Kitchen", "slug": "kitchen", "is_active": False, "sort_order": 1},
        {"id": 21, "name": "Soap dishes", "slug": "soap-dishes", "parent_id": 20, "is_active": False,
         "sort_order": 0},
        {"id": 30, "name": "Clearance", "slug": "clearance", "parent_id": 999, "is_active": True,
         "sort_order": 5},
    ]


@pytest.fixture
def catalog_forest(catalog_records):
    return build_tree(normalize_records(catalog_records))
